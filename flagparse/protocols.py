# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols shared between flags and the parser that owns them.

Protocols:
- FlagRegistry: The owner a `FlagSpec` reports short alias changes to, so that
  alias clashes fail at declaration time rather than at parse time.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flagparse.flag_spec import FlagSpec


@runtime_checkable
class FlagRegistry(Protocol):
    def claim_short(self, flag: FlagSpec, short: str | None) -> None: ...
