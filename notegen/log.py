"""Logging helpers for the notegen package.

User-facing messages go through ``click.echo``; this logger carries
diagnostics on stderr and stays quiet unless ``--verbose`` is given.
"""

from __future__ import annotations

import logging

import click

LOGGER_NAME = "notegen"
_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class ClickEchoHandler(logging.Handler):
    """Write records with ``click.echo(err=True)``.

    The stderr stream is looked up per record, so redirected or replaced
    streams (``CliRunner``, pytest capture) are always honoured.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pragma: no cover - mirrors logging.StreamHandler
            self.handleError(record)


def setup_logger(level: int = logging.WARNING) -> logging.Logger:
    """Configure the package logger once and set its ``level``.

    Repeated calls only adjust the level; a single handler stays attached.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child of the package logger (``notegen.<name>``)."""

    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


__all__ = ["ClickEchoHandler", "LOGGER_NAME", "get_logger", "setup_logger"]
