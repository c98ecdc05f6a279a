import re
from typing import Any, Dict, Union

import numpy as np

from .exceptions import ArgumentIncorrectType

_SIGNED_DIGITS = re.compile(r"-?[0-9]+")
_UNSIGNED_DIGITS = re.compile(r"[0-9]+")

_TRUE_WORDS = ("true", "yes", "on", "1")
_FALSE_WORDS = ("false", "no", "off", "0")


class Value:
    """Converts the text of one command-line argument into a typed value.

    ``convert`` either returns the decoded value or raises
    :class:`ArgumentIncorrectType`.
    """

    is_flag = False
    is_container = False

    def convert(self, text: str) -> Any:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class Unit(Value):
    """Marker for parameters that take no argument; presence alone sets them."""

    is_flag = True

    def convert(self, text: str) -> bool:
        return True


class String(Value):
    def convert(self, text: str) -> str:
        return text


class Character(Value):
    def convert(self, text: str) -> str:
        if len(text) != 1:
            raise ArgumentIncorrectType(text)
        return text


class Boolean(Value):
    def convert(self, text: str) -> bool:
        if text in _TRUE_WORDS:
            return True
        if text in _FALSE_WORDS:
            return False
        raise ArgumentIncorrectType(text)


class Integer(Value):
    """Fixed-width integer, bounded by the numpy dtype it is built from."""

    def __init__(self, dtype=np.int64):
        self.dtype = np.dtype(dtype)
        if self.dtype.kind not in "iu":
            raise TypeError(f"Integer requires an integer dtype, got {self.dtype}")
        self.signed = self.dtype.kind == "i"
        info = np.iinfo(self.dtype)
        self.min = int(info.min)
        self.max = int(info.max)

    def convert(self, text: str) -> np.integer:
        pattern = _SIGNED_DIGITS if self.signed else _UNSIGNED_DIGITS
        if not pattern.fullmatch(text):
            raise ArgumentIncorrectType(text)
        try:
            number = int(text)
        except ValueError:
            raise ArgumentIncorrectType(text)
        if not self.min <= number <= self.max:
            raise ArgumentIncorrectType(text)
        return self.dtype.type(number)

    def __repr__(self):
        return f"Integer({self.dtype.name})"


class Incremental(Value):
    """Repeatable parameter; every occurrence appends one converted value."""

    is_container = True

    def __init__(self, inner: Any = None):
        self.inner = value_type(inner)
        if self.inner.is_container:
            raise TypeError("Incremental parameters cannot be nested")
        self.is_flag = self.inner.is_flag

    def convert(self, text: str) -> Any:
        return self.inner.convert(text)

    def __repr__(self):
        return f"Incremental({self.inner!r})"


Int8 = Integer(np.int8)
Int16 = Integer(np.int16)
Int32 = Integer(np.int32)
Int64 = Integer(np.int64)
UInt8 = Integer(np.uint8)
UInt16 = Integer(np.uint16)
UInt32 = Integer(np.uint32)
UInt64 = Integer(np.uint64)

_BUILTIN_VALUES: Dict[type, Value] = {
    int: Int64,
    str: String(),
    bool: Boolean(),
}


def value_type(spec: Union[Value, type, None]) -> Value:
    """Turns whatever was passed to ``Parameters.add`` as a value into a ``Value``."""
    if spec is None:
        return Unit()
    if isinstance(spec, Value):
        return spec
    if isinstance(spec, type):
        if issubclass(spec, Value):
            return spec()
        if spec in _BUILTIN_VALUES:
            return _BUILTIN_VALUES[spec]
        if issubclass(spec, np.integer):
            return Integer(spec)
    raise TypeError(f"Unsupported parameter type {spec!r}")
