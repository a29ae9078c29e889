# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Load option declarations for a `Commander` from YAML or TOML files.

Example (YAML):
    options:
      - short: c
        long: count
        description: Amount of times to do something
        type: number
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ValidationError, field_validator

from commander.commander import Commander
from commander.exceptions import OptionDefinitionError
from commander.logger import logger
from commander.option_value_type import OptionValueType


class RawOption(BaseModel):
    """Raw option model for Commander configuration."""

    short: str
    long: str
    description: str = ""
    type: OptionValueType = OptionValueType.STRING

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> OptionValueType:
        if isinstance(value, OptionValueType):
            return value
        return OptionValueType(value)


def convert_options(raw_options: list[dict[str, Any]]) -> list[RawOption]:
    options = []
    for index, entry in enumerate(raw_options):
        if not isinstance(entry, dict):
            raise OptionDefinitionError(
                f"Option entry #{index} must be a mapping, got {entry!r}"
            )
        try:
            options.append(RawOption(**entry))
        except ValidationError as error:
            raise OptionDefinitionError(
                f"Invalid option entry #{index}: {error}"
            ) from error
    return options


def apply_options(commander: Commander, raw_options: list[dict[str, Any]]) -> Commander:
    """Add options described by raw config entries to an existing `Commander`."""
    for option in convert_options(raw_options):
        commander.add_option(option.short, option.long, option.description, option.type)
    return commander


def load_raw_options(file_path: Path | str) -> list[dict[str, Any]]:
    """
    Read the `options` list from a YAML or TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("options", []), list
    ):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "options:\n"
            "  - short: 'c'\n"
            "    long: 'count'\n"
            "    description: 'Amount of times to do something'\n"
            "    type: 'number'"
        )
    raw_options = raw_config.get("options", [])
    logger.debug("Loaded %d option(s) from %s", len(raw_options), path)
    return raw_options


def loader(file_path: Path | str) -> Commander:
    """
    Build a `Commander` with the options declared in a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        Commander: A new instance with the declared options, not yet parsed.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is malformed.
        OptionDefinitionError: If an option entry is invalid.
    """
    return apply_options(Commander(), load_raw_options(file_path))
