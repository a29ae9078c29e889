# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `CommandOption` dataclass, the registry's record of one supported
command-line option.

Key Attributes:
- `short_form`: flag text used after a single dash (`-c`); also the canonical
  name under which parsed values are stored
- `long_form`: flag text used after two dashes (`--count`)
- `description`: help text
- `value_type`: `OptionValueType` describing the value that follows the flag
"""
from dataclasses import dataclass

from commander.option_value_type import OptionValueType


@dataclass(frozen=True)
class CommandOption:
    """
    Represents a supported command-line option.

    Attributes:
        short_form (str): Flag text used with a single dash.
        long_form (str): Flag text used with two dashes.
        description (str): Help text for the option.
        value_type (OptionValueType): Kind of value expected after the flag.
    """

    short_form: str
    long_form: str
    description: str = ""
    value_type: OptionValueType = OptionValueType.NO_VALUE

    @property
    def canonical_name(self) -> str:
        """Key used for this option in the argument store."""
        return self.short_form

    @property
    def expects_value(self) -> bool:
        return self.value_type is not OptionValueType.NO_VALUE

    def matches(self, token: str, is_long_form: bool) -> bool:
        """Check whether flag text (without dashes) refers to this option."""
        if is_long_form:
            return self.long_form == token
        return self.short_form == token

    def get_help_line(self) -> str:
        """Return the help line for this option, without the line break."""
        return (
            f"\t--{self.long_form}, -{self.short_form}"
            f"\t\t{self.value_type.help_tag}"
            f"\t\t{self.description}"
        )

    def __str__(self) -> str:
        return f"-{self.short_form}/--{self.long_form} ({self.value_type})"
