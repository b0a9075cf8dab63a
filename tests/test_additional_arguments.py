from pathlib import Path
import pytest
from cmdline_parser.additional_arguments import AdditionalArgumentsSettings
from cmdline_parser.arguments.file_argument import DirectoryArgument, FileArgument
from cmdline_parser.arguments.switch_argument import SwitchArgument
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.exceptions import (
    CommandLineConfigurationError,
    CommandLineException,
    InvalidConversionException,
    MissingAdditionalArgumentsException
)
from cmdline_parser.parser import CommandLineParser


def test_additional_arguments_a():
    parser = CommandLineParser()
    parser.arguments.append(DirectoryArgument("d", "directory", directory_must_exist=False))
    parser.additional_arguments_settings.typed_additional_arguments.append(
        FileArgument("first", file_must_exist=False, optional=False))
    parser.additional_arguments_settings.typed_additional_arguments.append(
        FileArgument("second", file_must_exist=False, optional=False))
    with pytest.raises(MissingAdditionalArgumentsException) as e:
        parser.parse(["-d", "C:\\Input", "file1.txt"])
    assert e.value.message == "Not enough additional arguments. Needed 2 additional arguments."
    parser.parse(["-d", "C:\\Input", "file1.txt", "file2.txt"])
    assert parser.parsing_succeeded is True
    first, second = parser.additional_arguments_settings.typed_additional_arguments
    assert first.value == Path("file1.txt")
    assert second.value == Path("file2.txt")
    assert first.parsed is True
    assert parser.additional_arguments == ["file1.txt", "file2.txt"]


def test_additional_arguments_b():
    numbers = ValueArgument("numbers", value_type=int, allow_multiple=True, optional=False)
    parser = CommandLineParser(additional_arguments_settings=AdditionalArgumentsSettings(
        typed_additional_arguments=[numbers]))
    parser.parse(["1", "2", "3"])
    assert numbers.values == [1, 2, 3]
    parser.parse(["4"])
    assert numbers.values == [4]
    with pytest.raises(MissingAdditionalArgumentsException):
        parser.parse([])
    with pytest.raises(InvalidConversionException):
        parser.parse(["1", "two"])


def test_additional_arguments_c():
    output = ValueArgument("output")
    parser = CommandLineParser(additional_arguments_settings=AdditionalArgumentsSettings(
        typed_additional_arguments=[output]))
    parser.parse([])
    assert output.parsed is False
    assert output.value is None
    parser.parse(["out.txt"])
    assert output.value == "out.txt"
    # Additional arguments beyond the typed ones are still available.
    parser.parse(["out.txt", "extra"])
    assert output.value == "out.txt"
    assert parser.additional_arguments == ["out.txt", "extra"]


def test_additional_arguments_d():
    parser = CommandLineParser(additional_arguments_settings=AdditionalArgumentsSettings(
        typed_additional_arguments=[ValueArgument("first"), ValueArgument("second")]))
    with pytest.raises(CommandLineConfigurationError):
        parser.parse(["a", "b"])
    parser = CommandLineParser(additional_arguments_settings=AdditionalArgumentsSettings(
        typed_additional_arguments=[ValueArgument("first", optional=False),
                                    ValueArgument("second", optional=False, allow_multiple=True)]))
    with pytest.raises(CommandLineConfigurationError):
        parser.parse(["a", "b"])


def test_additional_arguments_e():
    settings = AdditionalArgumentsSettings()
    with pytest.raises(CommandLineException) as e:
        settings.additional_arguments
    assert e.value.message == "Additional arguments cannot be accessed before the command line is parsed."
    with pytest.raises(ValueError):
        settings.requested_additional_arguments_count = -1
    settings.requested_additional_arguments_count = 2
    assert settings.requested_additional_arguments_count == 2
    settings.accept_additional_arguments = False
    with pytest.raises(CommandLineException):
        settings.additional_arguments


def test_additional_arguments_f():
    values = []
    parser = CommandLineParser()
    parser.arguments.append(SwitchArgument("v", "verbose"))
    parser.additional_arguments_settings.typed_additional_arguments.append(
        ValueArgument("count", value_type=int, optional=False, bind=values.append))
    parser.parse(["-v", "12"])
    assert values == [12]
    assert parser.lookup_argument("v").value is True
