"""Open generated notes with an external application."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

import click

from .log import get_logger

logger = get_logger("opener")


class OpenerError(RuntimeError):
    """Raised when the application for a note cannot be launched."""


def open_file(path: Path, opener: str | None = None) -> None:
    """Launch ``opener`` (or the OS default application) on ``path``.

    The process is not waited for; only a failure to start it is reported.
    """

    target = str(path)
    if opener:
        command = [*shlex.split(opener), target]
        logger.debug("Launching %s", command)
        try:
            subprocess.Popen(command)
        except OSError as exc:
            raise OpenerError(f"Error opening the markdown file: {exc}") from exc
        return

    logger.debug("Launching default application for %s", target)
    try:
        status = click.launch(target, wait=False)
    except OSError as exc:
        raise OpenerError(f"Error opening the markdown file: {exc}") from exc
    if status != 0:
        raise OpenerError(
            f"Error opening the markdown file: launcher exited with status {status}"
        )
