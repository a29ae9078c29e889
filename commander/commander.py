# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Commander`, a small builder-style command-line parser.

Options are declared up front with `add_option()`, then `parse()` walks the raw
invocation arguments once, matching every flag against the `OptionRegistry`,
coercing the value that follows it, and storing the result under the option's
canonical (short-form) name. Values are read back with typed getters that
return None when an option is unknown, was not given, or holds a value of a
different type.

Parsing Rules:
- The first element is the executable path, stored under `__exec__`.
- `--name` is a long-form flag, `-n` is a short-form flag.
- A flag whose option expects a value consumes the next token, whatever it
  looks like, so `-c -5` stores -5.
- A flag expecting a value with no token left is stored with no value.
- Unknown flags and stray values are reported on stderr and skipped.
- A value that cannot be coerced to its declared type aborts the parse with
  `OptionValueError`.
- A repeated option overwrites the earlier occurrence, also across calls to
  `parse()`, which merge into the arguments already stored.

Example Usage:
    cmd = Commander()
    cmd.add_option("v", "version", "Show the version", OptionValueType.NO_VALUE)
    cmd.add_option("c", "count", "Amount of times", OptionValueType.NUMBER)
    cmd.parse(["app", "--count", "10"])

    cmd.get_number_option("c")  # 10
"""
from __future__ import annotations

import sys
from typing import Iterator, Sequence

from rich.console import Console

from commander.argument import ArgumentValue, ParsedArgument
from commander.coercion import coerce_value
from commander.console import console as default_console
from commander.console import error_console as default_error_console
from commander.exceptions import CommanderError, OptionValueError
from commander.logger import logger
from commander.option import CommandOption
from commander.option_value_type import OptionValueType
from commander.registry import OptionRegistry

EXEC_KEY = "__exec__"


class Commander:
    """
    Command-line option registry and argument store.

    Features:
    - Chainable option declaration.
    - Short (`-c`) and long (`--count`) flags resolved to one canonical name.
    - String, 32-bit integer and 32-bit float values.
    - Typed retrieval that never raises for absent or mismatched values.
    - Plain-text help listing.
    """

    def __init__(
        self,
        registry: OptionRegistry | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.registry: OptionRegistry = (
            registry if registry is not None else OptionRegistry()
        )
        self.console: Console = console if console is not None else default_console
        self.error_console: Console = (
            error_console if error_console is not None else default_error_console
        )
        self._args: dict[str, ParsedArgument] = {}

    def add_option(
        self,
        short_form: str,
        long_form: str,
        description: str = "",
        value_type: OptionValueType | str = OptionValueType.NO_VALUE,
    ) -> Commander:
        """
        Add a supported option. Call before `parse()`.

        Returns:
            Commander: This instance, to allow chaining.
        """
        self.registry.add_option(short_form, long_form, description, value_type)
        return self

    def option_count(self) -> int:
        """Return the number of supported options added to this instance."""
        return self.registry.option_count()

    def _report(self, message: str) -> None:
        logger.info(message)
        _write(self.error_console, f"{message}\n")

    def _parse_value(self, option: CommandOption, raw: str) -> ArgumentValue:
        try:
            return coerce_value(raw, option.value_type)
        except ValueError as error:
            raise OptionValueError(option.short_form, raw, option.value_type) from error

    def parse(self, args: Sequence[str] | None = None) -> Commander:
        """
        Parse invocation arguments against the registered options.

        Args:
            args (Sequence[str] | None): Arguments with the executable path first.
                Defaults to `sys.argv`.

        Returns:
            Commander: This instance, to allow chaining.

        Raises:
            CommanderError: If `args` is empty.
            OptionValueError: If a value cannot be coerced to its option's type.
                The previously parsed arguments are left untouched.
        """
        if args is None:
            args = sys.argv
        args = list(args)
        if not args:
            raise CommanderError("Expected at least the executable path in args")

        store = dict(self._args)
        store[EXEC_KEY] = ParsedArgument(EXEC_KEY, ArgumentValue.from_string(args[0]))
        tokens = iter(args[1:])
        for token in tokens:
            if token.startswith("--"):
                is_long_form, flag = True, token[2:]
            elif token.startswith("-"):
                is_long_form, flag = False, token[1:]
            else:
                self._report(f"[BAD?] V: {token}")
                continue

            option = self.registry.find_option(flag, is_long_form)
            if option is None:
                self._report(f"[BAD] O({'L' if is_long_form else 'S'}): {flag}")
                continue

            value = ArgumentValue.no_value()
            if option.expects_value:
                raw = next(tokens, None)
                if raw is None:
                    logger.debug("No value given for %s", option)
                else:
                    value = self._parse_value(option, raw)

            store[option.canonical_name] = ParsedArgument(option.canonical_name, value)

        self._args = store
        logger.debug("Parsed arguments: %s", list(map(str, store.values())))
        return self

    init = parse

    def _get_value(
        self, token: str, is_long_form: bool, kind: OptionValueType
    ) -> str | int | float | None:
        option = self.registry.find_option(token, is_long_form)
        if option is None:
            return None
        argument = self._args.get(option.canonical_name)
        if argument is None:
            return None
        return argument.value.get(kind)

    def get_string_option(self, token: str, is_long_form: bool = False) -> str | None:
        """Return the string value of an option, or None."""
        return self._get_value(token, is_long_form, OptionValueType.STRING)  # type: ignore[return-value]

    def get_number_option(self, token: str, is_long_form: bool = False) -> int | None:
        """Return the integer value of an option, or None."""
        return self._get_value(token, is_long_form, OptionValueType.NUMBER)  # type: ignore[return-value]

    def get_float_option(self, token: str, is_long_form: bool = False) -> float | None:
        """Return the float value of an option, or None."""
        return self._get_value(token, is_long_form, OptionValueType.FLOAT)  # type: ignore[return-value]

    def has_option(self, token: str, is_long_form: bool = False) -> bool:
        """Check whether a registered option was given on the command line."""
        option = self.registry.find_option(token, is_long_form)
        return option is not None and option.canonical_name in self._args

    @property
    def executable(self) -> str | None:
        """Path of the executable, once parsed."""
        argument = self._args.get(EXEC_KEY)
        if argument is None:
            return None
        return argument.value.get(OptionValueType.STRING)  # type: ignore[return-value]

    def arg_count(self) -> int:
        """Return the number of stored arguments, the executable included."""
        return len(self._args)

    def arguments(self) -> Iterator[tuple[str, ParsedArgument]]:
        """Yield `(canonical name, ParsedArgument)` pairs for stored arguments."""
        for name, argument in list(self._args.items()):
            yield name, argument

    def render_help(self) -> str:
        """Return the formatted listing of available options."""
        return self.registry.render_help()

    def print_help(self) -> None:
        """Print the options listing to the console, tabs included."""
        _write(self.console, self.render_help())

    def __str__(self) -> str:
        return (
            f"Commander(options={self.option_count()}, "
            f"arguments={self.arg_count()})"
        )

    def __repr__(self) -> str:
        return str(self)


def _write(console: Console, text: str) -> None:
    """Write text to the console's stream unchanged."""
    console.file.write(text)
    console.file.flush()
