from __future__ import annotations
from pathlib import Path
from typing import IO, Optional
from cmdline_parser.arguments.certified_value_argument import CertifiedValueArgument
from cmdline_parser.exceptions import CommandLineArgumentOutOfRangeException, CommandLineException
from cmdline_parser.messages import Messages


class FileArgument(CertifiedValueArgument):
    """
    Value argument naming a file, converted to a pathlib.Path; if file_must_exist
    is True (the default) then a file which does not exist is rejected.
    """
    def __init__(self, short_name: Optional[str] = None, long_name: Optional[str] = None,
                 description: Optional[str] = None, file_must_exist: bool = True, **kwargs) -> None:
        kwargs.pop("value_type", None)
        super().__init__(short_name, long_name, description, value_type=Path, **kwargs)
        self.file_must_exist = file_must_exist is not False

    @property
    def file(self) -> Optional[Path]:
        return self.value

    def certify(self, value: Path) -> Path:
        if self.file_must_exist and (not value.is_file()):
            raise CommandLineArgumentOutOfRangeException(Messages.FILE_NOT_FOUND.format(value), self.name)
        return value

    def open_file_read(self, binary: bool = False) -> IO:
        if not self.file_must_exist:
            raise CommandLineException(Messages.FILE_MUST_EXIST)
        return open(self.value, "rb" if binary else "r")

    def open_file_write(self, binary: bool = False) -> IO:
        return open(self.value, "wb" if binary else "w")


class DirectoryArgument(CertifiedValueArgument):

    def __init__(self, short_name: Optional[str] = None, long_name: Optional[str] = None,
                 description: Optional[str] = None, directory_must_exist: bool = True, **kwargs) -> None:
        kwargs.pop("value_type", None)
        super().__init__(short_name, long_name, description, value_type=Path, **kwargs)
        self.directory_must_exist = directory_must_exist is not False

    @property
    def directory(self) -> Optional[Path]:
        return self.value

    def certify(self, value: Path) -> Path:
        if self.directory_must_exist and (not value.is_dir()):
            raise CommandLineArgumentOutOfRangeException(Messages.DIRECTORY_NOT_FOUND.format(value), self.name)
        return value
