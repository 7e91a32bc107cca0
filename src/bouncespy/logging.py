"""Logging setup for the bouncespy command-line tool.

Log records go to stderr so that stdout only carries classification output.
Rotating log files are added when a root directory is configured.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import typer

from .config import LoggingConfig

LOG_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_FILE_NAME = "bouncespy.log"
DEBUG_LOG_FILE_NAME = "debug.log"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUPS = 3

LEVEL_COLOURS: dict[int, str] = {
    logging.DEBUG: typer.colors.CYAN,
    logging.WARNING: typer.colors.YELLOW,
    logging.ERROR: typer.colors.RED,
    logging.CRITICAL: typer.colors.MAGENTA,
}


class CLIFormatter(logging.Formatter):
    """Render records as ``bouncespy: <level>: <message>``."""

    def __init__(self, colour: bool) -> None:
        super().__init__("%(message)s")
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        label = record.levelname.lower()
        fg = LEVEL_COLOURS.get(record.levelno)
        if self.colour and fg is not None:
            label = typer.style(label, fg=fg, bold=True)
        return f"bouncespy: {label}: {super().format(record)}"


def configure_logging(logging_config: LoggingConfig, root_dir: Path | None = None) -> None:
    """Install the stderr handler, plus log files under ``<root_dir>/logs``."""

    handlers: list[logging.Handler] = [_stderr_handler()]
    if root_dir is not None:
        handlers.extend(_file_handlers(root_dir.expanduser() / "logs", logging_config.debug_file))

    logging.basicConfig(level=logging_config.level_number, handlers=handlers, force=True)


def _stderr_handler() -> logging.Handler:
    stream = sys.stderr
    is_tty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CLIFormatter(colour=bool(is_tty and is_tty())))
    return handler


def _file_handlers(log_dir: Path, with_debug: bool) -> list[logging.Handler]:
    log_dir.mkdir(parents=True, exist_ok=True)
    targets = [(LOG_FILE_NAME, logging.INFO)]
    if with_debug:
        targets.append((DEBUG_LOG_FILE_NAME, logging.DEBUG))

    handlers: list[logging.Handler] = []
    for name, level in targets:
        handler = RotatingFileHandler(
            log_dir / name,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        handlers.append(handler)
    return handlers


__all__ = ["CLIFormatter", "configure_logging"]
