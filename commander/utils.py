# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
LOG_MODES = ("cli", "json")

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container(cgroup_path: str = "/proc/1/cgroup") -> bool:
    """Guess whether PID 1 runs under a container runtime."""
    try:
        cgroups = Path(cgroup_path).read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroups for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records to the console and, optionally, a file.

    Any handlers already on the root logger are replaced.

    Args:
        mode (str | None): "cli" for Rich output or "json" for one JSON object
            per record. Falls back to `COMMANDER_LOG_MODE`, then to "json"
            inside containers and "cli" elsewhere.
        log_filename (str | None): Log file to append to; None disables it.
        json_log_to_file (bool): Write the file as JSON instead of text lines.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv("COMMANDER_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("commander").debug("Logging set up in %s mode", mode)
