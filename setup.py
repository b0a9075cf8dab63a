from setuptools import find_namespace_packages, setup
from setuptools.command.install import install


class CustomInstallCommand(install):
    def run(self):
        install.run(self)
        print("\nInstallation complete!")
        print("To try a command-line definitions file run the following command:")
        print("cmdline-parser --usage your-definitions-file.yaml -- your arguments\n")


setup(
    name="cmdline-parser",
    version="1.0.0",
    description="Declarative command-line argument definition, parsing, and validation.",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cmdline_parser", "cmdline_parser.*"]),
    python_requires=">=3.9",
    install_requires=[
        "dcicutils",
        "prettytable",
        "pyyaml",
        "termcolor"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    },
    entry_points={
        "console_scripts": [
            "cmdline-parser=cmdline_parser.cli.cmdline_parser_cli:main"
        ]
    },
    cmdclass={
        "install": CustomInstallCommand
    }
)
