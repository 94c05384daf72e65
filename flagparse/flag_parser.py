# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, a small flag parser meant to be embedded in
task scripts. Flags are declared with chainable builders, the raw argument
vector is parsed in one left-to-right pass, and the result is plain data.

Key Features:
- Long options: `--name value`, `--name=value` (the value may contain `=`)
- Short options: `-n value`, `-nvalue`, clustering `-abc`
- `--` ends option parsing; everything after it is positional
- Typed values via `ValueParser` strategies (string, number, integer, counter)
- Boolean flags, repeatable counters, per-flag actions
- Force-exit flags (the built-in `-h | --help`) that stop parsing early
- Rich-rendered help with the failure reason prepended

Public Interface:
- `flag()`, `string()`, `number()`, `integer()`, `counter()`, `add_flag()`:
  Register a flag and return its `FlagSpec` for further configuration.
- `parse(args)`: Parse and return a `ParseResult`, raising `FlagParseError`.
- `parse_or_exit(args)`: Parse, printing help and exiting on errors or `--help`.
- `format_help()` / `print_help()`: Render the usage listing.

Example Usage:
    parser = FlagParser(program="deploy", usage="SCRIPT [ARGS...]")
    parser.flag("redeploy").short_opt("r").help("Kill and restart running copies")
    parser.number("max-threads").short_opt("T").default("-1")
    parser.counter("verbose").short_opt("v")

    result = parser.parse(["-rvv", "--max-threads=8", "hack.js", "n00dles"])

    # result.values == {"help": False, "redeploy": True,
    #                   "max-threads": 8.0, "verbose": 2}
    # result.positionals == ("hack.js", "n00dles")

A parser is not re-entrant; use one instance per concurrent parse.
"""
from __future__ import annotations

from typing import Any, Iterator, Sequence

from rich.console import Console

from flagparse.console import console as default_console
from flagparse.exceptions import (
    FlagParseError,
    InsufficientArgumentsError,
    RegistrationError,
    TypeCoercionError,
    UnexpectedValueError,
    UnknownOptionError,
)
from flagparse.flag_spec import FlagSpec
from flagparse.help import HelpRenderer
from flagparse.logger import logger
from flagparse.parse_result import ParseResult
from flagparse.value_parsers import (
    CounterParser,
    IntegerParser,
    NumberParser,
    StringParser,
    ValueParser,
)

END_OF_OPTIONS = "--"


def to_token(arg: Any) -> str:
    """Return the text form of a raw argument, `true`/`false` for booleans."""
    if isinstance(arg, bool):
        return "true" if arg else "false"
    return str(arg)


class FlagParser:
    """
    Flag registry and tokenizer.

    Args:
        program (str): Program name shown in the usage line.
        description (str): Paragraph shown under the usage line in help.
        usage (str): Text appended to the usage line, e.g. `HOSTNAME`.
        exit_on_error (bool): Whether `parse_or_exit()` raises `SystemExit`.
        console (Console | None): Rich console used to print help.
    """

    def __init__(
        self,
        program: str = "",
        description: str = "",
        usage: str = "",
        exit_on_error: bool = True,
        console: Console | None = None,
    ) -> None:
        self.program: str = program
        self.description: str = description
        self.usage: str = usage
        self.exit_on_error: bool = exit_on_error
        self.console: Console = console or default_console
        self._flags: dict[str, FlagSpec] = {}
        self._short_map: dict[str, FlagSpec] = {}
        self._frozen: bool = False
        self._add_help()

    def _add_help(self) -> None:
        """Add the built-in help flag."""
        self.flag("help").short_opt("h").action(self.print_help).force_exit(True).help(
            "Print this message and exit"
        )

    def add_flag(self, name: str, parser: ValueParser | None = None) -> FlagSpec:
        """
        Register a flag under `name` and return it.

        Args:
            name (str): The long name, used as `--name` and as the result key.
            parser (ValueParser | None): Value parser, None for a boolean flag.

        Raises:
            RegistrationError: If the name is empty or already registered, or
                parsing has already started.
        """
        if self._frozen:
            raise RegistrationError(
                f"Cannot register '--{name}' once parsing has started"
            )
        if not isinstance(name, str) or not name:
            raise RegistrationError("Flag name must be a non-empty string")
        if name in self._flags:
            raise RegistrationError(f"Flag '--{name}' is already registered")
        if parser is not None and not isinstance(parser, ValueParser):
            raise RegistrationError(
                f"Parser for '--{name}' must be a ValueParser, got {type(parser).__name__}"
            )
        flag = FlagSpec(name, parser, registry=self)
        self._flags[name] = flag
        logger.debug("Registered flag '--%s' (%s)", name, flag.kind)
        return flag

    def flag(self, name: str) -> FlagSpec:
        """Register a boolean flag."""
        return self.add_flag(name)

    def string(self, name: str) -> FlagSpec:
        """Register a flag taking one string."""
        return self.add_flag(name, StringParser())

    def number(self, name: str) -> FlagSpec:
        """Register a flag taking one floating point number."""
        return self.add_flag(name, NumberParser())

    def integer(self, name: str) -> FlagSpec:
        """Register a flag taking one integer."""
        return self.add_flag(name, IntegerParser())

    def counter(self, name: str) -> FlagSpec:
        """Register a flag counting how often it appears."""
        return self.add_flag(name, CounterParser())

    def claim_short(self, flag: FlagSpec, short: str | None) -> None:
        """Move `flag`'s short alias to `short`, rejecting clashes."""
        if short is not None:
            owner = self._short_map.get(short)
            if owner is not None and owner is not flag:
                raise RegistrationError(
                    f"Short option '-{short}' is already used by '--{owner.name}'"
                )
        if flag.short is not None and self._short_map.get(flag.short) is flag:
            del self._short_map[flag.short]
        if short is not None:
            self._short_map[short] = flag

    def get_flag(self, name: str) -> FlagSpec | None:
        return self._flags.get(name)

    @property
    def flags(self) -> tuple[FlagSpec, ...]:
        """Registered flags in registration order."""
        return tuple(self._flags.values())

    def _freeze(self) -> None:
        if self._frozen:
            return
        self._frozen = True
        for flag in self._flags.values():
            flag.freeze()

    def _take_values(
        self,
        args: Sequence[Any],
        start: int,
        flag: FlagSpec,
        option: str,
        attached: str | None,
    ) -> tuple[list[str], int]:
        """Collect the tokens for `flag`, returning them and the next cursor."""
        nargs = flag.arity()
        values = [] if attached is None else [attached]
        needed = nargs - len(values)
        if start + needed > len(args):
            raise InsufficientArgumentsError(
                f"too few arguments to flag {option}: expected {nargs}",
                token=option,
                option=option,
            )
        values.extend(to_token(arg) for arg in args[start : start + needed])
        return values, start + needed

    def _apply(
        self,
        flag: FlagSpec,
        option: str,
        values: dict[str, Any],
        tokens: list[str],
    ) -> bool:
        """Accumulate `tokens` into `flag`, run its action, report force exit."""
        try:
            values[flag.name] = flag.accumulate(values[flag.name], *tokens)
        except TypeCoercionError as error:
            raise TypeCoercionError(
                error.token, error.expected, option=option
            ) from error
        flag.run_action()
        return flag.exits

    def parse(self, args: Sequence[Any]) -> ParseResult:
        """
        Parse a raw argument vector.

        Args:
            args (Sequence[Any]): Tokens as given to the program. Non-string
                tokens are matched by their text form.

        Returns:
            ParseResult: The parsed values and positionals, or the early-exit
                result if a force-exit flag was matched.

        Raises:
            FlagParseError: On the first malformed token.
        """
        self._freeze()
        values: dict[str, Any] = {
            name: flag.initial_value() for name, flag in self._flags.items()
        }
        long_map = dict(self._flags)
        short_map = dict(self._short_map)
        positionals: list[Any] = []

        i = 0
        while i < len(args):
            raw = args[i]
            token = to_token(raw)

            if token == END_OF_OPTIONS:
                positionals.extend(args[i + 1 :])
                break

            if token.startswith("--"):
                # The name ends at the first "="; the value may contain more.
                name, sep, attached = token[2:].partition("=")
                if not sep:
                    attached = None
                flag = long_map.get(name)
                if flag is None:
                    raise UnknownOptionError(
                        f"unknown long option '--{name}'", token=token, option=f"--{name}"
                    )
                option = f"--{name}"
                if attached is not None and flag.arity() == 0:
                    raise UnexpectedValueError(
                        f"flag {option} does not take a value", token=token, option=option
                    )
                tokens, i = self._take_values(args, i + 1, flag, option, attached)
                if self._apply(flag, option, values, tokens):
                    return ParseResult.exited()
                continue

            if token.startswith("-") and len(token) > 1:
                i += 1
                j = 1
                while j < len(token):
                    char = token[j]
                    flag = short_map.get(char)
                    if flag is None:
                        raise UnknownOptionError(
                            f"unknown short option '-{char}' in '{token}'",
                            token=token,
                            option=f"-{char}",
                        )
                    option = f"-{char}"
                    attached = None
                    j += 1
                    if flag.arity() > 0 and j < len(token):
                        attached = token[j:]
                        j = len(token)
                    tokens, i = self._take_values(args, i, flag, option, attached)
                    if self._apply(flag, option, values, tokens):
                        return ParseResult.exited()
                continue

            positionals.append(raw)
            i += 1

        return ParseResult(early_exit=False, values=values, positionals=tuple(positionals))

    def parse_or_exit(self, args: Sequence[Any]) -> ParseResult:
        """
        Parse `args`, handling failures the way a script entry point would.

        On a parse error the help is printed with the error as the reason. When
        `exit_on_error` is set, errors raise `SystemExit(2)` and early exits
        raise `SystemExit(0)`; otherwise the early-exit result is returned.
        """
        try:
            result = self.parse(args)
        except FlagParseError as error:
            logger.debug("Parse failed for %s: %s", self.program or "parser", error)
            self.print_help(str(error))
            if self.exit_on_error:
                raise SystemExit(2) from error
            return ParseResult.exited()
        if result.early_exit:
            logger.debug("Parse exited early for %s", self.program or "parser")
            if self.exit_on_error:
                raise SystemExit(0)
        return result

    def get_help_renderer(self) -> HelpRenderer:
        return HelpRenderer(
            self._flags.values(),
            program=self.program,
            description=self.description,
            usage=self.usage,
            console=self.console,
        )

    def format_help(self, reason: str | None = None) -> str:
        """Return the help text, optionally preceded by `reason`."""
        return self.get_help_renderer().format_help(reason)

    def print_help(self, reason: str | None = None) -> None:
        """Print help to the console, optionally preceded by `reason`."""
        self.get_help_renderer().render_help(reason)

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[FlagSpec]:
        return iter(self.flags)

    def __str__(self) -> str:
        return (
            f"FlagParser(flags={len(self._flags)}, "
            f"short={len(self._short_map)}, program={self.program!r})"
        )

    def __repr__(self) -> str:
        return str(self)
