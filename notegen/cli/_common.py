"""Shared helpers for notegen CLI commands."""

from __future__ import annotations

from typing import Any

import click

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class NotegenCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def prompt_line(text: str) -> str:
    """Ask for one line on stdin.

    An empty line and end of input both count as an empty answer, so every
    prompted field falls back to its default when stdin is closed.
    """

    click.echo(text, nl=False)
    line = click.get_text_stream("stdin").readline()
    if not line:
        click.echo()
    return line.rstrip("\r\n")
