import pytest
from cmdline_parser.arguments.switch_argument import SwitchArgument
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.binding import FieldArgumentBind
from cmdline_parser.certifications.group_certification import ArgumentGroupCertification, ArgumentGroupCondition
from cmdline_parser.exceptions import ArgumentConflictException, CommandLineException
from cmdline_parser.parser import CommandLineParser


class Options:

    def __init__(self) -> None:
        self.verbose = None
        self.level = None
        self.names = None


class ReadOnlyOptions:

    @property
    def level(self) -> int:
        return 0


class DeclaredOptions:
    verbose = SwitchArgument("v", "verbose", "Verbose output.")
    level = ValueArgument("l", "level", "Level.", value_type=int, default_value=1)
    names = ValueArgument("n", "name", "Names.", allow_multiple=True)
    certifications = [ArgumentGroupCertification("v,l", ArgumentGroupCondition.ONE_OR_NONE_USED)]


class MoreDeclaredOptions(DeclaredOptions):
    level = ValueArgument("l", "level", "Level.", value_type=float, default_value=2.5)
    output = ValueArgument("o", "output", "Output.")


def test_binding_a():
    options = Options()
    parser = CommandLineParser()
    parser.arguments.append(SwitchArgument("v", "verbose", bind=FieldArgumentBind(options, "verbose")))
    parser.arguments.append(ValueArgument("l", "level", value_type=int, default_value=1,
                                          bind=FieldArgumentBind(options, "level")))
    parser.parse(["-v"])
    assert options.verbose is True
    assert options.level == 1
    parser.parse(["-l", "3"])
    assert options.verbose is False
    assert options.level == 3


def test_binding_b():
    options = {}
    parser = CommandLineParser()
    parser.arguments.append(ValueArgument("l", "level", value_type=int, bind=FieldArgumentBind(options, "level")))
    parser.parse(["--level", "4"])
    assert options == {"level": 4}
    bind = FieldArgumentBind(options, "level")
    assert bind.target is options
    assert bind.field == "level"
    assert bind.get() == 4


def test_binding_c():
    values = []
    parser = CommandLineParser()
    parser.arguments.append(ValueArgument("l", "level", value_type=int, bind=values.append))
    parser.parse(["-l", "5"])
    assert values == [5]
    parser.parse([])
    assert values == [5, None]


def test_binding_d():
    options = Options()
    options.names = ["previous"]
    names = options.names
    parser = CommandLineParser()
    parser.arguments.append(ValueArgument("n", "name", allow_multiple=True, bind=FieldArgumentBind(options, "names")))
    parser.parse(["-n", "x", "-n", "y"])
    assert options.names == ["x", "y"]
    assert options.names is names
    options.names = "string"
    with pytest.raises(CommandLineException):
        parser.parse(["-n", "x"])


def test_binding_e():
    options = ReadOnlyOptions()
    parser = CommandLineParser()
    parser.arguments.append(ValueArgument("l", "level", value_type=int, bind=FieldArgumentBind(options, "level")))
    with pytest.raises(CommandLineException) as e:
        parser.parse(["-l", "1"])
    assert isinstance(e.value.__cause__, AttributeError)
    assert "Binding of the argument l(level) to the field level" in e.value.message


def test_binding_f():
    options = DeclaredOptions()
    parser = CommandLineParser()
    arguments = parser.extract_argument_attributes(options)
    assert len(arguments) == 3
    assert len(parser.certifications) == 1
    parser.parse(["-v", "-n", "x", "-n", "y", "extra"])
    assert options.verbose is True
    assert options.level == 1
    assert options.names == ["x", "y"]
    assert parser.additional_arguments == ["extra"]
    with pytest.raises(ArgumentConflictException):
        parser.parse(["-v", "-l", "3"])
    # The declared arguments themselves are not changed.
    assert DeclaredOptions.verbose.parsed is False
    assert DeclaredOptions.verbose.bind is None


def test_binding_g():
    first_options = DeclaredOptions()
    second_options = DeclaredOptions()
    first_parser = CommandLineParser()
    first_parser.extract_argument_attributes(first_options)
    second_parser = CommandLineParser()
    second_parser.extract_argument_attributes(second_options)
    first_parser.parse(["-l", "7"])
    second_parser.parse(["-v"])
    assert first_options.level == 7
    assert first_options.verbose is False
    assert second_options.level == 1
    assert second_options.verbose is True


def test_binding_h():
    options = MoreDeclaredOptions()
    parser = CommandLineParser()
    parser.extract_argument_attributes(options)
    assert len(parser.arguments) == 4
    parser.parse(["-o", "out.txt"])
    assert options.level == 2.5
    assert options.output == "out.txt"
    parser.parse(["-l", "0.5"])
    assert options.level == 0.5
