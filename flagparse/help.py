# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the usage banner and flag listing for a `FlagParser`.

Flags are listed with their short alias first, ordered by alias, followed by
flags that only have a long name, ordered by name:

    Usage: deploy [OPTIONS] SCRIPT [ARGS...]

    Flags:
      -T | --max-threads <number>
          Maximum threads to use, or -1 for unlimited
      -h | --help
          Print this message and exit
         | --dry-run

`format_help()` returns plain text; `render_help()` prints it through a rich
console. Neither changes the flags being rendered.
"""
from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text

from flagparse.console import console as default_console
from flagparse.flag_spec import FlagSpec


def sort_key(flag: FlagSpec) -> tuple[bool, str, str]:
    """Aliased flags first by alias, then long-only flags by name."""
    return (flag.short is None, flag.short or "", flag.name)


class HelpRenderer:
    """
    Formats help output for a set of flags.

    Args:
        flags (Iterable[FlagSpec]): The flags to list.
        program (str): Program name shown in the usage line.
        description (str): Optional paragraph shown below the usage line.
        usage (str): Text appended to the usage line, e.g. positional names.
        console (Console | None): Rich console used by `render_help()`.
    """

    def __init__(
        self,
        flags: Iterable[FlagSpec],
        program: str = "",
        description: str = "",
        usage: str = "",
        console: Console | None = None,
    ) -> None:
        self.flags: tuple[FlagSpec, ...] = tuple(flags)
        self.program: str = program
        self.description: str = description
        self.usage: str = usage
        self.console: Console = console or default_console

    def get_usage(self) -> str:
        parts = ["Usage:"]
        if self.program:
            parts.append(self.program)
        parts.append("[OPTIONS]")
        if self.usage:
            parts.append(self.usage)
        return " ".join(parts)

    def get_flag_line(self, flag: FlagSpec) -> str:
        if flag.short:
            line = f"  -{flag.short} | --{flag.name}"
        else:
            line = f"     | --{flag.name}"
        placeholder = flag.placeholder()
        if placeholder:
            line = f"{line} {placeholder}"
        return line

    def _lines(self, reason: str | None = None) -> list[tuple[str, str]]:
        lines: list[tuple[str, str]] = []
        if reason:
            lines.append((reason, "bold red"))
            lines.append(("", ""))
        lines.append((self.get_usage(), "bold"))
        if self.description:
            lines.append(("", ""))
            lines.append((self.description, ""))
        lines.append(("", ""))
        lines.append(("Flags:", "bold"))
        for flag in sorted(self.flags, key=sort_key):
            lines.append((self.get_flag_line(flag), ""))
            if flag.help_text:
                lines.append((f"      {flag.help_text}", "dim"))
        return lines

    def format_help(self, reason: str | None = None) -> str:
        """Return the help text, optionally preceded by `reason`."""
        return "\n".join(line for line, _ in self._lines(reason))

    def render_help(self, reason: str | None = None) -> None:
        """Print the help text to the console."""
        for line, style in self._lines(reason):
            self.console.print(Text(line, style=style), highlight=False)
