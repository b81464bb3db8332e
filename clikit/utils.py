# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shlex
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from clikit.exceptions import InputError


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {os.path.basename(script)}"
    return script


def split_command_line(line: str) -> list[str]:
    """Split a command line the way a POSIX shell would.

    Raises:
        InputError: On unbalanced quotes.
    """
    try:
        return shlex.split(line)
    except ValueError as error:
        raise InputError(f"invalid command line: {error}") from error


CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    """Guess from the cgroups of PID 1 whether we run inside a container."""
    try:
        content = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODES = ("cli", "json")


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(_json_formatter())
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str = "clikit.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route the "clikit" logger to the console and to a log file.

    Args:
        mode (str | None): "cli" for Rich console logs, "json" for one JSON
            object per line. Defaults to `$CLIKIT_LOG_MODE`, else "json" inside
            a container and "cli" elsewhere.
        log_filename (str): File the logs are appended to.
        json_log_to_file (bool): Write the file logs as JSON.
        file_log_level (int): Level of the file handler.
        console_log_level (int): Level of the console handler. User input errors
            are printed by the `Cli`, so the console only shows warnings by default.

    Raises:
        ValueError: If `mode` is not "cli" or "json". Existing handlers are kept.
    """
    mode = mode or os.getenv("CLIKIT_LOG_MODE") or (
        "json" if running_in_container() else "cli"
    )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(
        _json_formatter()
        if json_log_to_file
        else logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)
    root.addHandler(file_handler)

    # rich renders Markdown welcome messages through markdown_it
    logging.getLogger("markdown_it").setLevel(logging.WARNING)

    logger = logging.getLogger("clikit")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
