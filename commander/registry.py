# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionRegistry`, the ordered collection of options a
`Commander` recognizes.

Options are kept sorted by short form after every addition, so lookups and
help output always follow short-form order regardless of the order in which
options were declared. Duplicate short or long forms are accepted and logged;
lookups return the first match in sorted order.

Public Interface:
- `add_option(...)`: Register an option (chainable).
- `option_count()`: Number of registered options.
- `find_option(token, is_long_form)`: Look up an option by flag text.
- `render_help()`: Build the plain-text options listing.

Example Usage:
    registry = OptionRegistry()
    registry.add_option("v", "version", "Show the version", "none").add_option(
        "c", "count", "Amount of times to do something", OptionValueType.NUMBER
    )
    registry.find_option("count", is_long_form=True)
"""
from __future__ import annotations

from typing import Iterator

from commander.exceptions import OptionDefinitionError
from commander.logger import logger
from commander.option import CommandOption
from commander.option_value_type import OptionValueType

HELP_HEADER = "Options available:"


class OptionRegistry:
    """Sorted registry of supported command-line options."""

    def __init__(self) -> None:
        self._options: list[CommandOption] = []

    def _validate_form(self, form: str, name: str) -> str:
        if not isinstance(form, str):
            raise OptionDefinitionError(f"{name} must be a string, got {form!r}")
        if not form:
            raise OptionDefinitionError(f"{name} must not be empty")
        if form.startswith("-"):
            raise OptionDefinitionError(
                f"{name} '{form}' must be given without leading dashes"
            )
        return form

    def _validate_value_type(
        self, value_type: OptionValueType | str
    ) -> OptionValueType:
        if isinstance(value_type, OptionValueType):
            return value_type
        try:
            return OptionValueType(value_type)
        except ValueError as error:
            raise OptionDefinitionError(str(error)) from error

    def _warn_duplicates(self, option: CommandOption) -> None:
        for existing in self._options:
            if existing.short_form == option.short_form:
                logger.warning(
                    "Duplicate short form '-%s' declared by %s and %s",
                    option.short_form,
                    existing,
                    option,
                )
            if existing.long_form == option.long_form:
                logger.warning(
                    "Duplicate long form '--%s' declared by %s and %s",
                    option.long_form,
                    existing,
                    option,
                )

    def add_option(
        self,
        short_form: str,
        long_form: str,
        description: str = "",
        value_type: OptionValueType | str = OptionValueType.NO_VALUE,
    ) -> OptionRegistry:
        """
        Register a supported option and re-sort the registry by short form.

        Args:
            short_form (str): Flag text used with a single dash, e.g. "c".
            long_form (str): Flag text used with two dashes, e.g. "count".
            description (str): Help text for the option.
            value_type (OptionValueType | str): Value expected after the flag.

        Returns:
            OptionRegistry: This registry, to allow chaining.

        Raises:
            OptionDefinitionError: If a form or the value type is invalid.
        """
        option = CommandOption(
            short_form=self._validate_form(short_form, "short_form"),
            long_form=self._validate_form(long_form, "long_form"),
            description=description,
            value_type=self._validate_value_type(value_type),
        )
        self._warn_duplicates(option)
        self._options.append(option)
        self._options.sort(key=lambda registered: registered.short_form)
        logger.debug("Registered option %s", option)
        return self

    def option_count(self) -> int:
        """Return the number of registered options, duplicates included."""
        return len(self._options)

    def find_option(self, token: str, is_long_form: bool) -> CommandOption | None:
        """
        Find the first option whose short or long form equals `token`.

        Args:
            token (str): Flag text without leading dashes.
            is_long_form (bool): Match against long forms instead of short forms.

        Returns:
            CommandOption | None: The matching option, or None.
        """
        return next(
            (option for option in self._options if option.matches(token, is_long_form)),
            None,
        )

    def render_help(self) -> str:
        """
        Render the options listing.

        One header line followed by one tab-separated line per option in
        short-form order, each terminated by a line break.
        """
        lines = [HELP_HEADER]
        lines.extend(option.get_help_line() for option in self._options)
        return "".join(f"{line}\n" for line in lines)

    def __iter__(self) -> Iterator[CommandOption]:
        return iter(list(self._options))

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return f"OptionRegistry(options={len(self._options)})"

    def __repr__(self) -> str:
        return str(self)
