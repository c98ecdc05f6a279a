"""Typed command-line argument parsing with exact error locations."""

from .arguments import Arguments
from .exceptions import (
    ArgumentIncorrectType,
    ErrorKind,
    InvalidArgumentError,
    InvalidCommandLineError,
    InvalidOptionFormatError,
    MissingArgumentError,
    OptionException,
    OptionExistsError,
    OptionParseException,
    OptionSpecException,
    ParseError,
    ParseErrorInfo,
    PositionalArgumentError,
    UnrecognizedOptionError,
)
from .parameters import Parameter, ParameterInfo, Parameters
from .parse import parse
from .values import (
    Boolean,
    Character,
    Incremental,
    Int8,
    Int16,
    Int32,
    Int64,
    Integer,
    String,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    Unit,
    Value,
    value_type,
)

__version__ = "0.1.0"
