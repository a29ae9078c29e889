# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parsed argument models stored by `Commander`.

`ArgumentValue` is a tagged value: its `kind` says which payload it carries so
typed getters can refuse a value of the wrong kind instead of converting it.
`ParsedArgument` pairs a value with the canonical name it is stored under.
"""
from __future__ import annotations

from dataclasses import dataclass

from commander.option_value_type import OptionValueType


@dataclass(frozen=True)
class ArgumentValue:
    """A parsed value tagged with its `OptionValueType`."""

    kind: OptionValueType
    value: str | int | float | None = None

    @classmethod
    def from_string(cls, value: str) -> ArgumentValue:
        return cls(OptionValueType.STRING, value)

    @classmethod
    def from_number(cls, value: int) -> ArgumentValue:
        return cls(OptionValueType.NUMBER, value)

    @classmethod
    def from_float(cls, value: float) -> ArgumentValue:
        return cls(OptionValueType.FLOAT, value)

    @classmethod
    def no_value(cls) -> ArgumentValue:
        return cls(OptionValueType.NO_VALUE)

    def get(self, kind: OptionValueType) -> str | int | float | None:
        """Return the payload if it is of `kind`, else None."""
        if self.kind is kind:
            return self.value
        return None

    def __str__(self) -> str:
        if self.kind is OptionValueType.STRING:
            return f"String({self.value!r})"
        elif self.kind is OptionValueType.NUMBER:
            return f"Number({self.value})"
        elif self.kind is OptionValueType.FLOAT:
            return f"Float({self.value})"
        return "NoValue"


@dataclass(frozen=True)
class ParsedArgument:
    """
    A recognized command-line argument.

    Attributes:
        option (str): Canonical name (short form, or `__exec__`).
        value (ArgumentValue): The tagged value parsed for the option.
    """

    option: str
    value: ArgumentValue

    def __str__(self) -> str:
        return f"{self.option}={self.value}"
