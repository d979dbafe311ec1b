"""Template rendering: placeholder substitution and note file creation."""

from __future__ import annotations

import contextlib
import os
import re
from dataclasses import dataclass
from pathlib import Path

from .log import get_logger
from .tags import format_tags

DATE_TOKEN = "{{DATE}}"
NAME_TOKEN = "{{NAME}}"
TAGS_TOKEN = "{{TAGS}}"

OUTPUT_MODE = 0o644

_TOKEN_RE = re.compile(
    "|".join(re.escape(token) for token in (DATE_TOKEN, NAME_TOKEN, TAGS_TOKEN))
)

logger = get_logger("render")


class TemplateReadError(RuntimeError):
    """Raised when a template file cannot be read."""


class OutputWriteError(RuntimeError):
    """Raised when the rendered note cannot be written."""


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """Values substituted into a template for a single note."""

    date: str
    name: str = ""
    tags: tuple[str, ...] = ()


def render_template(text: str, request: RenderRequest) -> str:
    """Replace every placeholder token in ``text``.

    Tokens are matched in one pass over the original text, so a value that
    happens to contain another token is inserted verbatim.
    """

    values = {
        DATE_TOKEN: request.date,
        NAME_TOKEN: request.name,
        TAGS_TOKEN: format_tags(request.tags),
    }
    return _TOKEN_RE.sub(lambda m: values[m.group(0)], text)


def create_markdown_file(
    template_path: Path, output_path: Path, request: RenderRequest
) -> Path:
    """Render ``template_path`` with ``request`` and write it to ``output_path``.

    Missing parent directories of ``output_path`` are created. Nothing is
    written when the template cannot be read, and a failed write leaves no
    file or newly created directory behind. The file mode is ``0644`` less
    the process umask.

    Raises
    ------
    TemplateReadError
        If the template file cannot be read.
    OutputWriteError
        If the output file (or its directory) cannot be written.
    """

    try:
        # newline="" keeps the template's line endings byte-for-byte.
        with template_path.open("r", encoding="utf-8", newline="") as fh:
            template_text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateReadError(f"Error reading the template file: {exc}") from exc

    content = render_template(template_text, request)

    # Deepest first, so a failed write can undo exactly what this call made.
    created_dirs = [parent for parent in output_path.parents if not parent.exists()]
    fd: int | None = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        if fd is not None:
            with contextlib.suppress(OSError):
                output_path.unlink()
        for directory in created_dirs:
            with contextlib.suppress(OSError):
                directory.rmdir()
        raise OutputWriteError(
            f"Error creating the output markdown file: {exc}"
        ) from exc

    logger.debug("Rendered %s into %s", template_path, output_path)
    return output_path
