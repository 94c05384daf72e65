# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the value returned by `FlagParser.parse()`.

A result is either a normal parse (`early_exit` is False, `values` holds an
entry for every registered flag, `positionals` holds the leftover tokens) or an
early exit triggered by a force-exit flag such as `--help`, in which case both
collections are empty. Callers check `early_exit` first.

`values` is a read-only mapping. Results compare by value but are not
hashable, since flag values may be lists or other mutable objects.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse."""

    early_exit: bool = False
    values: Mapping[str, Any] = field(default_factory=dict)
    positionals: tuple[Any, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "positionals", tuple(self.positionals))

    @classmethod
    def exited(cls) -> ParseResult:
        """Return the early-exit result."""
        return cls(early_exit=True)

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)
