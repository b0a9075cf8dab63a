"""
Exceptions raised while configuring a CommandLineParser or parsing a command line with it.
Every one of these is fatal to the current parse call; all derive from CommandLineException,
and the argument-level ones (CommandLineArgumentException and below) carry the argument name.

  CommandLineException
    CommandLineFormatException
    CommandLineConfigurationError
    CommandLineArgumentException
      UnknownArgumentException
      MissingArgumentValueException
      InvalidConversionException
      CommandLineArgumentOutOfRangeException
      MandatoryArgumentNotSetException
    ArgumentConflictException
    InvalidArgumentGroupException
    MissingAdditionalArgumentsException
"""
from typing import Optional


class CommandLineException(Exception):

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CommandLineFormatException(CommandLineException):
    pass


class CommandLineConfigurationError(CommandLineException):
    pass


class CommandLineArgumentException(CommandLineException):

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class UnknownArgumentException(CommandLineArgumentException):
    pass


class MissingArgumentValueException(CommandLineArgumentException):
    pass


class InvalidConversionException(CommandLineArgumentException):
    pass


class CommandLineArgumentOutOfRangeException(CommandLineArgumentException):
    pass


class MandatoryArgumentNotSetException(CommandLineArgumentException):
    pass


class ArgumentConflictException(CommandLineException):
    pass


class InvalidArgumentGroupException(CommandLineException):
    pass


class MissingAdditionalArgumentsException(CommandLineException):
    pass
