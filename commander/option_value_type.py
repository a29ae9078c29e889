# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionValueType`, the enum describing what kind of value a registered
command-line option expects to follow it.

Supports alias coercion so option declarations loaded from YAML or TOML can use
short, config-friendly names.

Example:
    OptionValueType("string") → OptionValueType.STRING
    OptionValueType("int")    → OptionValueType.NUMBER
    OptionValueType("flag")   → OptionValueType.NO_VALUE
"""
from __future__ import annotations

from enum import Enum


class OptionValueType(Enum):
    """
    The value expected after an option flag.

    Members:
        STRING: The next token is stored verbatim.
        NUMBER: The next token is parsed as a signed 32-bit integer.
        FLOAT: The next token is parsed as a 32-bit float.
        NO_VALUE: The option is a switch and consumes no token.

    Aliases:
        - "str" → "string"
        - "int", "integer" → "number"
        - "double", "f32" → "float"
        - "none", "flag", "switch", "no_value" → "no value"
    """

    STRING = "string"
    NUMBER = "number"
    FLOAT = "float"
    NO_VALUE = "no value"

    @classmethod
    def choices(cls) -> list[OptionValueType]:
        """Return a list of all value types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "number",
            "integer": "number",
            "double": "float",
            "f32": "float",
            "none": "no value",
            "flag": "no value",
            "switch": "no value",
            "no_value": "no value",
            "novalue": "no value",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def help_tag(self) -> str:
        """The bracketed tag shown for this type in help output."""
        return _HELP_TAGS[self]

    def __str__(self) -> str:
        return self.value


_HELP_TAGS = {
    OptionValueType.STRING: "[string]",
    OptionValueType.NUMBER: "[Number]",
    OptionValueType.FLOAT: "[Float]",
    OptionValueType.NO_VALUE: "[no parameter]",
}
