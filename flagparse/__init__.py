"""
Flagparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    FlagParseError,
    FlagparseError,
    InsufficientArgumentsError,
    RegistrationError,
    TypeCoercionError,
    UnexpectedValueError,
    UnknownOptionError,
)
from .flag_parser import FlagParser
from .flag_spec import FlagSpec
from .help import HelpRenderer
from .logger import logger
from .parse_result import ParseResult
from .value_parsers import (
    CounterParser,
    IntegerParser,
    NumberParser,
    StringParser,
    ValueKind,
    ValueParser,
)

__version__ = "0.1.0"

__all__ = [
    "FlagParser",
    "FlagSpec",
    "ParseResult",
    "HelpRenderer",
    "ValueKind",
    "ValueParser",
    "StringParser",
    "NumberParser",
    "IntegerParser",
    "CounterParser",
    "FlagparseError",
    "RegistrationError",
    "FlagParseError",
    "UnknownOptionError",
    "InsufficientArgumentsError",
    "UnexpectedValueError",
    "TypeCoercionError",
    "logger",
]
