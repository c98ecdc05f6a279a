import logging
from typing import Any, List, Optional, Sequence

from .arguments import Arguments
from .exceptions import (
    ArgumentIncorrectType,
    ErrorKind,
    InvalidCommandLineError,
    ParseError,
    ParseErrorInfo,
)
from .parameters import ParameterInfo, Parameters

logger = logging.getLogger(__name__)

CommandLine = Sequence[Optional[str]]


def check_command_line(command_line: CommandLine) -> None:
    # argv[0] may be missing on some platforms; nothing after it may be.
    if isinstance(command_line, (str, bytes)):
        raise InvalidCommandLineError("expected a sequence of arguments, not a single string")
    if len(command_line) == 0:
        raise InvalidCommandLineError("empty argument list")
    first = command_line[0]
    if first is not None and not isinstance(first, str):
        raise InvalidCommandLineError(f"program name is not a string: {first!r}")
    for position, arg in enumerate(command_line[1:], start=1):
        if not isinstance(arg, str):
            raise InvalidCommandLineError(f"argument {position} is {arg!r}")


def command_line_string(command_line: CommandLine) -> str:
    return " ".join(arg for arg in command_line if arg is not None)


def command_line_columns(command_line: CommandLine) -> List[int]:
    """1-based column at which each argument starts in ``command_line_string``."""
    columns = []
    column = 1
    for arg in command_line:
        columns.append(column)
        if arg is not None:
            column += len(arg) + 1
    return columns


class CommandLineParser:
    def __init__(self, command_line: CommandLine, parameters: Parameters):
        check_command_line(command_line)
        self.command_line = list(command_line)
        self.parameters = parameters
        self.columns = command_line_columns(self.command_line)
        self.slots: List[Any] = [None] * (len(parameters) + 1)
        self.slots[0] = self.command_line[0]

    def parse(self) -> Arguments:
        logger.debug("Parsing %r", self.command_line)
        current = 1
        while current < len(self.command_line):
            arg = self.command_line[current]
            if arg != "--" and arg.startswith("--"):
                current = self._parse_long_option(current)
            elif arg not in ("-", "--") and arg.startswith("-"):
                current = self._parse_short_options(current)
            else:
                raise self._error(ErrorKind.POSITIONAL_ARGUMENT, current, 0, len(arg))
            current += 1
        return Arguments(self.slots)

    def _parse_long_option(self, current: int) -> int:
        name = self.command_line[current][2:]
        info = self.parameters.find_long(name)
        if info is None:
            raise self._error(ErrorKind.UNRECOGNIZED_OPTION, current, 2, len(name))

        if info.is_flag:
            self._store(info, "")
        elif current + 1 < len(self.command_line):
            current += 1
            self._store_argument(info, current, 0, self.command_line[current])
        else:
            raise self._error(ErrorKind.MISSING_ARGUMENT, current, 2, len(name))
        return current

    def _parse_short_options(self, current: int) -> int:
        arg = self.command_line[current]
        for offset in range(1, len(arg)):
            info = self.parameters.find_short(arg[offset])
            if info is None:
                raise self._error(ErrorKind.UNRECOGNIZED_OPTION, current, offset, 1)

            if info.is_flag:
                self._store(info, "")
            elif offset + 1 < len(arg):
                # the rest of the token is the argument, not more aliases
                self._store_argument(info, current, offset + 1, arg[offset + 1:])
                break
            elif current + 1 < len(self.command_line):
                current += 1
                self._store_argument(info, current, 0, self.command_line[current])
            else:
                raise self._error(ErrorKind.MISSING_ARGUMENT, current, offset, 1)
        return current

    def _store_argument(self, info: ParameterInfo, position: int, offset: int, text: str) -> None:
        try:
            self._store(info, text)
        except ArgumentIncorrectType as e:
            raise self._error(ErrorKind.INVALID_ARGUMENT, position, offset, len(text)) from e

    def _store(self, info: ParameterInfo, text: str) -> None:
        value = info.value.convert(text)
        if info.value.is_container:
            if self.slots[info.index] is None:
                self.slots[info.index] = []
            self.slots[info.index].append(value)
        else:
            self.slots[info.index] = value

    def _error(self, kind: ErrorKind, position: int, offset: int, width: int) -> ParseError:
        info = ParseErrorInfo(
            command_line=command_line_string(self.command_line),
            kind=kind,
            error_column=self.columns[position] + offset,
            error_width=width,
        )
        logger.debug("Rejected command line: %r", info)
        return ParseError.from_info(info)


def parse(command_line: CommandLine, parameters: Optional[Parameters] = None) -> Arguments:
    """Match ``command_line`` against ``parameters``.

    ``command_line`` is the whole argument vector, program name included
    (``sys.argv``). Raises a :class:`ParseError` subclass on the first
    offending argument; nothing is returned for a partial parse.
    """
    if parameters is None:
        parameters = Parameters()
    return CommandLineParser(command_line, parameters).parse()
