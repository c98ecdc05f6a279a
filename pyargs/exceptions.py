from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type


class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class OptionSpecException(OptionException):
    pass


class OptionParseException(OptionException):
    pass


class OptionExistsError(OptionSpecException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ already exists")


class InvalidOptionFormatError(OptionSpecException):
    def __init__(self, format: str):
        super().__init__(f"Invalid option format ‘{format}’")


class InvalidCommandLineError(OptionException, ValueError):
    """Raised when ``parse`` is handed something that is not a command line.

    This is a mistake of the calling program, not of the user typing the
    command, so it is kept apart from :class:`ParseError`.
    """

    def __init__(self, reason: str):
        super().__init__(f"Invalid command line: {reason}")


class ArgumentIncorrectType(OptionParseException):
    def __init__(self, arg: str):
        super().__init__(f"Argument ‘{arg}’ failed to parse")
        self.arg = arg


class ErrorKind(Enum):
    UNRECOGNIZED_OPTION = "unrecognized_option"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"
    POSITIONAL_ARGUMENT = "positional_argument"


@dataclass(frozen=True)
class ParseErrorInfo:
    """Where in the command line a parse failed.

    ``command_line`` is the whole command line joined with single spaces,
    ``error_column`` the 1-based column of the first offending character and
    ``error_width`` the number of offending characters.
    """

    command_line: str
    kind: ErrorKind
    error_column: int
    error_width: int

    @property
    def substring(self) -> str:
        start = self.error_column - 1
        return self.command_line[start:start + self.error_width]


class ParseError(OptionParseException):
    kind: ErrorKind
    phrase = ""

    def __init__(self, info: ParseErrorInfo):
        super().__init__(f"{self.phrase}: '{info.substring}'")
        self.info = info

    @staticmethod
    def from_info(info: ParseErrorInfo) -> "ParseError":
        return _ERROR_CLASSES[info.kind](info)


class UnrecognizedOptionError(ParseError):
    kind = ErrorKind.UNRECOGNIZED_OPTION
    phrase = "Unrecognized option"


class MissingArgumentError(ParseError):
    kind = ErrorKind.MISSING_ARGUMENT
    phrase = "Missing argument for parameter"


class InvalidArgumentError(ParseError):
    kind = ErrorKind.INVALID_ARGUMENT
    phrase = "Invalid argument"


class PositionalArgumentError(ParseError):
    kind = ErrorKind.POSITIONAL_ARGUMENT
    phrase = "Positional arguments are not supported yet"


_ERROR_CLASSES: Dict[ErrorKind, Type[ParseError]] = {
    cls.kind: cls
    for cls in (UnrecognizedOptionError, MissingArgumentError,
                InvalidArgumentError, PositionalArgumentError)
}
