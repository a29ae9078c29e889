# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Commander.

Unsupported flags and stray values are not exceptions: they are reported as
diagnostics and parsing continues. Exceptions are reserved for mistakes in how
options are declared and for values that cannot be coerced to their declared
type.

Exception Hierarchy:
- CommanderError
    ├── OptionDefinitionError
    └── OptionValueError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commander.option_value_type import OptionValueType


class CommanderError(Exception):
    """Base exception for Commander."""


class OptionDefinitionError(CommanderError):
    """Exception raised when an option is declared with invalid fields."""


class OptionValueError(CommanderError):
    """
    Exception raised when a value token cannot be coerced to the type declared
    for its option.
    """

    def __init__(self, option: str, value: str, value_type: OptionValueType) -> None:
        self.option = option
        self.value = value
        self.value_type = value_type
        super().__init__(
            f"option -{option}: invalid {value_type} value: {value!r}"
        )
