# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagparse.

Registration errors are programmer errors and are raised while flags are being
declared. Parse errors are raised by `FlagParser.parse()` on the first malformed
token and abort the whole parse.

All exceptions inherit from `FlagparseError`.

Exception Hierarchy:
- FlagparseError
    ├── RegistrationError
    └── FlagParseError
            ├── UnknownOptionError
            ├── InsufficientArgumentsError
            ├── UnexpectedValueError
            └── TypeCoercionError
"""
from __future__ import annotations


class FlagparseError(Exception):
    """Base exception for Flagparse."""


class RegistrationError(FlagparseError):
    """Raised when a flag is declared with an empty or duplicate name or alias."""


class FlagParseError(FlagparseError):
    """Raised when a raw argument vector cannot be parsed."""

    def __init__(
        self, message: str, token: str | None = None, option: str | None = None
    ) -> None:
        super().__init__(message)
        self.token = token
        self.option = option


class UnknownOptionError(FlagParseError):
    """Raised when a token names a long or short option that is not registered."""


class InsufficientArgumentsError(FlagParseError):
    """Raised when an option needs more values than remain in the input."""


class UnexpectedValueError(FlagParseError):
    """Raised when a value is attached with `=` to a flag that takes none."""


class TypeCoercionError(FlagParseError):
    """
    Raised when a value parser cannot convert a raw token.

    Value parsers raise it without knowing which option they serve; the
    parser re-raises it with `option` filled in.
    """

    def __init__(
        self,
        token: str | None,
        expected: str,
        option: str | None = None,
    ) -> None:
        self.expected = expected
        if option:
            message = f"invalid {expected} value {token!r} for option {option}"
        else:
            message = f"invalid {expected} value {token!r}"
        super().__init__(message, token=token, option=option)
