"""
Commander CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentValue, ParsedArgument
from .commander import EXEC_KEY, Commander
from .exceptions import CommanderError, OptionDefinitionError, OptionValueError
from .option import CommandOption
from .option_value_type import OptionValueType
from .registry import OptionRegistry
from .version import __version__

__all__ = [
    "Commander",
    "OptionRegistry",
    "CommandOption",
    "OptionValueType",
    "ArgumentValue",
    "ParsedArgument",
    "CommanderError",
    "OptionDefinitionError",
    "OptionValueError",
    "EXEC_KEY",
    "__version__",
]
