"""
Commander CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from commander.commander import Commander
from commander.config import apply_options, load_raw_options
from commander.exceptions import CommanderError
from commander.option_value_type import OptionValueType
from commander.utils import setup_logging
from commander.version import __version__


def find_commander_config() -> Path | None:
    candidates = [
        Path(os.environ.get("COMMANDER_CONFIG", "commander.yaml")),
        Path.cwd() / "commander.yaml",
        Path.cwd() / "commander.toml",
        Path.home() / ".config" / "commander" / "commander.yaml",
        Path.home() / ".config" / "commander" / "commander.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def build_commander() -> Commander:
    """Create a `Commander` with the demo option set."""
    cmd = Commander()
    cmd.add_option(
        "v", "version", "Show the version of this application", OptionValueType.NO_VALUE
    ).add_option("h", "help", "Show this help", OptionValueType.NO_VALUE).add_option(
        "if", "input", "File to use as input", OptionValueType.STRING
    ).add_option(
        "c", "count", "Amount of times to do something", OptionValueType.NUMBER
    ).add_option(
        "b", "balance", "Amount of money in your bank account", OptionValueType.FLOAT
    )
    return cmd


def render_arguments(cmd: Commander) -> Table:
    table = Table(title="Parsed arguments")
    table.add_column("Option", style="bold")
    table.add_column("Value")
    for name, argument in sorted(cmd.arguments(), key=lambda item: item[0]):
        table.add_row(escape(name), escape(str(argument.value)))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(console_log_level=logging.WARNING)
    cmd = build_commander()

    config_path = find_commander_config()
    try:
        if config_path:
            apply_options(cmd, load_raw_options(config_path))
        cmd.parse(argv)
    except (CommanderError, ValueError) as error:
        cmd.error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    if cmd.arg_count() == 1 or cmd.has_option("h"):
        cmd.print_help()
        return 0

    if cmd.has_option("v"):
        cmd.console.print(f"commander {__version__}", highlight=False)
        return 0

    cmd.console.print(render_arguments(cmd))
    return 0


if __name__ == "__main__":
    sys.exit(main())
