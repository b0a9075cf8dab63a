from datetime import date
from enum import Enum
import pytest
from cmdline_parser.arguments.certified_value_argument import (
    BoundedValueArgument,
    EnumeratedValueArgument,
    RegexValueArgument
)
from cmdline_parser.arguments.file_argument import DirectoryArgument, FileArgument
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.exceptions import (
    CommandLineArgumentOutOfRangeException,
    CommandLineConfigurationError,
    CommandLineException,
    InvalidConversionException
)
from cmdline_parser.parser import CommandLineParser


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Point:

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @staticmethod
    def parse(value: str) -> "Point":
        x, y = value.split(",")
        return Point(int(x), int(y))


def parse(argument, args):
    parser = CommandLineParser()
    parser.arguments.append(argument)
    parser.parse(args)
    return argument


def test_value_arguments_a():
    argument = parse(ValueArgument("l", "level", value_type=int), ["-l", "007"])
    assert argument.value == 7
    assert argument.string_value == "007"
    assert argument.parsed is True
    assert argument.value_type_name == "int"
    argument = parse(ValueArgument("r", "ratio", value_type=float), ["--ratio", "0.5"])
    assert argument.value == 0.5
    argument = parse(ValueArgument("f", "flag", value_type=bool), ["-f", "yes"])
    assert argument.value is True


def test_value_arguments_b():
    argument = ValueArgument("i", "include", allow_multiple=True)
    parse(argument, ["-i", "x", "--include", "y"])
    assert argument.values == ["x", "y"]
    assert argument.string_values == ["x", "y"]
    with pytest.raises(CommandLineException):
        argument.value
    argument = parse(ValueArgument("i", "include"), ["-i", "x"])
    with pytest.raises(CommandLineException):
        argument.values


def test_value_arguments_c():
    argument = BoundedValueArgument("b", "bounded", min_value=0, max_value=3)
    parse(argument, ["-b", "2"])
    assert argument.value == 2
    with pytest.raises(CommandLineArgumentOutOfRangeException) as e:
        parse(argument, ["-b", "5"])
    assert e.value.message == "Argument value 5 is greater then maximum value 3"
    assert e.value.argument == "b(bounded)"
    with pytest.raises(CommandLineArgumentOutOfRangeException) as e:
        parse(argument, ["-b", "-1"])
    assert e.value.message == "Argument value -1 is lesser then minimum value 0"
    argument = BoundedValueArgument("b", "bounded", value_type=float, min_value=1.5)
    parse(argument, ["-b", "1000"])
    assert argument.value == 1000.0
    with pytest.raises(CommandLineArgumentOutOfRangeException):
        parse(argument, ["-b", "1.4"])


def test_value_arguments_d():
    argument = EnumeratedValueArgument("c", "color", allowed_values=["red", "green"])
    parse(argument, ["-c", "red"])
    assert argument.value == "red"
    with pytest.raises(CommandLineArgumentOutOfRangeException) as e:
        parse(argument, ["-c", "blue"])
    assert e.value.message == "Value blue is not allowed for argument c(color)"
    with pytest.raises(CommandLineArgumentOutOfRangeException):
        parse(argument, ["-c", "RED"])
    argument.ignore_case = True
    parse(argument, ["-c", "RED"])
    assert argument.value == "red"
    assert argument.string_value == "RED"


def test_value_arguments_e():
    with pytest.raises(CommandLineConfigurationError):
        EnumeratedValueArgument("n", value_type=int, allowed_values=[1, 2], ignore_case=True)
    argument = EnumeratedValueArgument("n", value_type=int)
    argument.init_allowed_values("1;2,3")
    assert argument.allowed_values == [1, 2, 3]
    parse(argument, ["-n", "3"])
    assert argument.value == 3
    with pytest.raises(CommandLineArgumentOutOfRangeException):
        parse(argument, ["-n", "4"])


def test_value_arguments_f():
    argument = RegexValueArgument("p", "phone", regex=r"^\d{3}-\d{4}$")
    parse(argument, ["-p", "555-1234"])
    assert argument.value == "555-1234"
    with pytest.raises(CommandLineArgumentOutOfRangeException) as e:
        parse(argument, ["-p", "5551234"])
    assert e.value.message == "Argument '5551234' does not match the regex pattern '^\\d{3}-\\d{4}$'."
    argument.sample_value = "555-1234"
    with pytest.raises(CommandLineArgumentOutOfRangeException) as e:
        parse(argument, ["-p", "5551234"])
    assert "An example of a valid value would be '555-1234'." in e.value.message


def test_value_arguments_g(tmp_path):
    file = tmp_path / "input.txt"
    file.write_text("hello")
    argument = parse(FileArgument("f", "file"), ["-f", str(file)])
    assert argument.value == file
    assert argument.file == file
    with argument.open_file_read() as f:
        assert f.read() == "hello"
    with pytest.raises(CommandLineArgumentOutOfRangeException):
        parse(argument, ["-f", str(tmp_path / "missing.txt")])
    # A directory is not a file.
    with pytest.raises(CommandLineArgumentOutOfRangeException):
        parse(argument, ["-f", str(tmp_path)])


def test_value_arguments_h(tmp_path):
    output_file = tmp_path / "output.txt"
    argument = parse(FileArgument("o", "output", file_must_exist=False), ["-o", str(output_file)])
    assert argument.value == output_file
    with pytest.raises(CommandLineException):
        argument.open_file_read()
    with argument.open_file_write() as f:
        f.write("written")
    assert output_file.read_text() == "written"


def test_value_arguments_i(tmp_path):
    argument = parse(DirectoryArgument("d", "directory"), ["-d", str(tmp_path)])
    assert argument.value == tmp_path
    assert argument.directory == tmp_path
    with pytest.raises(CommandLineArgumentOutOfRangeException):
        parse(argument, ["-d", str(tmp_path / "missing")])
    argument = parse(DirectoryArgument("d", "directory", directory_must_exist=False), ["-d", "C:\\Input"])
    assert str(argument.value) == "C:\\Input"


def test_value_arguments_j():
    argument = ValueArgument("p", "point", value_type=tuple,
                             convert_value_handler=lambda value: tuple(int(item) for item in value.split(",")))
    parse(argument, ["-p", "1,2"])
    assert argument.value == (1, 2)
    with pytest.raises(InvalidConversionException):
        parse(argument, ["-p", "a,b"])
    argument = parse(ValueArgument("p", "point", value_type=Point), ["-p", "3,4"])
    assert (argument.value.x, argument.value.y) == (3, 4)


def test_value_arguments_k():
    argument = ValueArgument("o", "object", value_type=object)
    with pytest.raises(InvalidConversionException) as e:
        parse(argument, ["-o", "value"])
    assert "is not a built-in type" in e.value.message
    assert e.value.argument == "o(object)"


def test_value_arguments_l():
    argument = parse(ValueArgument("c", "color", value_type=Color), ["-c", "green"])
    assert argument.value == Color.GREEN
    argument = parse(ValueArgument("c", "color", value_type=Color), ["-c", "RED"])
    assert argument.value == Color.RED
    with pytest.raises(InvalidConversionException):
        parse(argument, ["-c", "blue"])
    argument = parse(ValueArgument("d", "date", value_type=date), ["-d", "2024-12-06"])
    assert argument.value == date(2024, 12, 6)


def test_value_arguments_m():
    argument = ValueArgument("l", "level", value_type=int, default_value=4)
    assert argument.value == 4
    argument.default_value = 5
    assert argument.value == 5
    parse(argument, ["-l", "1"])
    assert argument.value == 1
    parse(argument, [])
    assert argument.value == 5
    argument.value = 6
    assert argument.value == 6
    assert argument.value_info() == ["l(level)", "int", "6", ""]


def test_value_arguments_n():
    with pytest.raises(CommandLineConfigurationError):
        ValueArgument()
    with pytest.raises(CommandLineConfigurationError):
        ValueArgument(" ")
    with pytest.raises(CommandLineConfigurationError):
        ValueArgument("l", "two words")
    with pytest.raises(CommandLineConfigurationError):
        ValueArgument("l", "level", aliases=[""])
    argument = ValueArgument("level")
    assert argument.short_name is None
    assert argument.long_name == "level"
    assert argument.name == "level"
    argument.add_alias("v")
    argument.add_alias("lvl")
    assert argument.short_aliases == ["v"]
    assert argument.long_aliases == ["lvl"]
    assert argument.names == ["-v", "--level", "--lvl"]
