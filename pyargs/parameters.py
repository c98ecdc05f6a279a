import logging
import re
from typing import Any, Dict, Iterator, List, Optional

from .exceptions import InvalidOptionFormatError, OptionExistsError
from .values import Value, value_type

logger = logging.getLogger(__name__)

HELP_INDENT = "\t"
DEFAULT_ARG_HELP = "arg"
EMPTY_DESCRIPTION = "..."

_OPTS_FORMAT = re.compile(r"(([a-zA-Z0-9]),)?([a-zA-Z0-9][-_a-zA-Z0-9]*)")


class ParameterInfo:
    def __init__(self, long_name: str, short_name: Optional[str], description: str,
                 value: Value, arg_help: str, index: int):
        self.long_name = long_name
        self.short_name = short_name
        self.description = description
        self.value = value
        self.arg_help = arg_help
        self.index = index

    @property
    def is_flag(self) -> bool:
        return self.value.is_flag

    def names(self) -> str:
        names = f"--{self.long_name}"
        if self.short_name:
            names += f", -{self.short_name}"
        if not self.is_flag:
            names += f" [{self.arg_help or DEFAULT_ARG_HELP}]"
        return names

    def __repr__(self):
        return f"ParameterInfo({self.long_name!r}, short={self.short_name!r}, value={self.value!r})"


class Parameter:
    """Handle returned by ``Parameters.add``; reads its value out of ``Arguments``."""

    __slots__ = ("index", "value")

    def __init__(self, index: int, value: Value):
        self.index = index
        self.value = value

    def __repr__(self):
        return f"Parameter({self.index}, {self.value!r})"


class Parameters:
    def __init__(self):
        self._infos: List[ParameterInfo] = []
        self._long: Dict[str, ParameterInfo] = {}
        self._short: Dict[str, ParameterInfo] = {}

    def add(self, opts: str, description: str = "", value: Any = None, arg_help: str = "") -> Parameter:
        """Declare a parameter and return its handle.

        ``opts`` is either a long name (``"verbose"``) or a short alias and a
        long name separated by a comma (``"v,verbose"``). ``value`` selects the
        argument type; leaving it out declares a flag.
        """
        match = _OPTS_FORMAT.fullmatch(opts)
        if not match:
            raise InvalidOptionFormatError(opts)
        short = match.group(2)
        long = match.group(3)

        if long in self._long:
            raise OptionExistsError(long)
        if short is not None and short in self._short:
            raise OptionExistsError(short)

        converter = value_type(value)
        # slot 0 is reserved for the program name
        info = ParameterInfo(long, short, description, converter, arg_help, len(self._infos) + 1)
        self._infos.append(info)
        self._long[long] = info
        if short is not None:
            self._short[short] = info

        logger.debug("Registered parameter %r", info)
        return Parameter(info.index, converter)

    def find_long(self, name: str) -> Optional[ParameterInfo]:
        return self._long.get(name)

    def find_short(self, name: str) -> Optional[ParameterInfo]:
        return self._short.get(name)

    def __iter__(self) -> Iterator[ParameterInfo]:
        return iter(self._infos)

    def __len__(self) -> int:
        return len(self._infos)

    def help_string(self) -> str:
        if not self._infos:
            return ""

        lines = [(info.names(), info.description) for info in self._infos]
        longest = max(len(names) for names, _ in lines)

        result = ""
        for names, description in lines:
            result += f"{HELP_INDENT}{names.ljust(longest)} : {description or EMPTY_DESCRIPTION}\n"
        return result
