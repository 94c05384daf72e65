# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind` and the `ValueParser` strategies that turn raw tokens into
flag values.

A value parser is attached to a `FlagSpec` and answers three questions for the
tokenizer:
- how many extra tokens the flag consumes (`arity`, fixed per class),
- what the flag's value is before any token is seen (`initial_value`),
- how a match folds new tokens into the current value (`accumulate`).

Because arity is static, `FlagParser` slices the needed tokens out of the input
before calling `accumulate`; no parser ever looks at the rest of the input.

Built-in parsers:
- `StringParser`: one token, stored verbatim.
- `NumberParser`: one token, stored as `float`.
- `IntegerParser`: one token, stored as `int` (decimals truncate toward zero).
- `CounterParser`: no tokens, counts occurrences.

Flags without a parser are boolean (`ValueKind.BOOLEAN`).

Custom types subclass `ValueParser` and are registered with
`FlagParser.add_flag(name, parser)`.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from flagparse.exceptions import TypeCoercionError


class ValueKind(Enum):
    """
    Tags the value type carried by a flag.

    Members:
        STRING: A single raw string.
        NUMBER: A floating point number.
        INTEGER: A whole number.
        COUNTER: The number of times the flag appeared.
        BOOLEAN: Whether the flag appeared at all.
        CUSTOM: A value produced by a user supplied parser.
    """

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    COUNTER = "counter"
    BOOLEAN = "boolean"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


class ValueParser(ABC):
    """Strategy that converts raw tokens into the value of a single flag."""

    kind: ValueKind = ValueKind.CUSTOM

    @abstractmethod
    def arity(self) -> int:
        """Number of tokens consumed after the option itself."""

    @abstractmethod
    def initial_value(self, default: str | None = None) -> Any:
        """Return the starting value, interpreting the default literal if given."""

    @abstractmethod
    def accumulate(self, current: Any, *tokens: str) -> Any:
        """Fold `tokens` into `current` and return the new value."""

    def placeholder(self) -> str:
        """Return the usage placeholder shown in help, e.g. `<string>`."""
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class StringParser(ValueParser):
    """Stores the token exactly as given."""

    kind = ValueKind.STRING

    def arity(self) -> int:
        return 1

    def initial_value(self, default: str | None = None) -> str | None:
        return default

    def accumulate(self, current: Any, *tokens: str) -> str:
        if not tokens:
            raise TypeCoercionError(None, "string")
        return tokens[0]

    def placeholder(self) -> str:
        return "<string>"


def _to_float(token: str | None) -> float:
    if not token or "_" in token:
        raise TypeCoercionError(token, "number")
    try:
        number = float(token)
    except ValueError:
        raise TypeCoercionError(token, "number") from None
    if not math.isfinite(number):
        raise TypeCoercionError(token, "number")
    return number


def _to_int(token: str | None) -> int:
    if not token or "_" in token:
        raise TypeCoercionError(token, "integer")
    try:
        return int(token)
    except ValueError:
        pass
    try:
        number = float(token)
    except ValueError:
        raise TypeCoercionError(token, "integer") from None
    if not math.isfinite(number):
        raise TypeCoercionError(token, "integer")
    return math.trunc(number)


class NumberParser(ValueParser):
    """Parses the token as a floating point number."""

    kind = ValueKind.NUMBER

    def arity(self) -> int:
        return 1

    def initial_value(self, default: str | None = None) -> float | None:
        if default is None:
            return None
        try:
            return _to_float(default)
        except TypeCoercionError:
            return None

    def accumulate(self, current: Any, *tokens: str) -> float:
        return _to_float(tokens[0] if tokens else None)

    def placeholder(self) -> str:
        return "<number>"


class IntegerParser(ValueParser):
    """Parses the token as a whole number, truncating decimals toward zero."""

    kind = ValueKind.INTEGER

    def arity(self) -> int:
        return 1

    def initial_value(self, default: str | None = None) -> int | None:
        if not default:
            return None
        try:
            return _to_int(default)
        except TypeCoercionError:
            return None

    def accumulate(self, current: Any, *tokens: str) -> int:
        return _to_int(tokens[0] if tokens else None)

    def placeholder(self) -> str:
        return "<integer>"


class CounterParser(ValueParser):
    """Counts how many times the flag was given, e.g. `-vvv`."""

    kind = ValueKind.COUNTER

    def arity(self) -> int:
        return 0

    def initial_value(self, default: str | None = None) -> int:
        if not default:
            return 0
        try:
            return _to_int(default)
        except TypeCoercionError:
            return 0

    def accumulate(self, current: Any, *tokens: str) -> int:
        return int(current or 0) + 1
