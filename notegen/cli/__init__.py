"""notegen CLI package."""

from __future__ import annotations

from typing import Sequence

import click

from . import generate
from ._common import NotegenCliError

__all__ = ["cli", "main", "NotegenCliError"]

cli = generate.generate


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="notegen", standalone_mode=False) or 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
