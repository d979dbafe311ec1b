"""Output path derivation and template lookup."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .config import DEFAULT_JOURNAL_DIR
from .log import get_logger
from .utils.datetime_fmt import format_date, format_time

TEMPLATE_SUFFIX = ".md"

logger = get_logger("paths")


class TemplateNotFoundError(RuntimeError):
    """Raised when the requested template file does not exist."""

    def __init__(self, template_name: str, path: Path) -> None:
        super().__init__(f"Template '{template_name}' not found.")
        self.template_name = template_name
        self.path = path


def derive_output_path(
    template: str,
    name: str,
    now: datetime,
    *,
    journal_dir: Path = DEFAULT_JOURNAL_DIR,
) -> Path:
    """Return the relative path of the note to create.

    Named notes land directly in the working directory as
    ``{date}_{time}_{template}_{name}``; unnamed ones go to the journal
    directory as ``{date}_{time}_{template}``.
    """

    stamp = f"{format_date(now)}_{format_time(now)}_{template}"
    if name:
        return Path(f"{stamp}_{name}")
    return journal_dir / stamp


def resolve_template_path(templates_dir: Path, template_name: str) -> Path:
    """Join ``template_name`` onto ``templates_dir`` and check it exists."""

    path = templates_dir / template_name
    if not path.exists():
        raise TemplateNotFoundError(template_name, path)
    return path


def list_templates(templates_dir: Path) -> list[str]:
    """Return the sorted markdown template file names in ``templates_dir``."""

    try:
        entries = list(templates_dir.iterdir())
    except OSError as exc:
        logger.warning("Could not read template directory %s: %s", templates_dir, exc)
        return []

    return sorted(
        entry.name
        for entry in entries
        if entry.is_file() and entry.name.endswith(TEMPLATE_SUFFIX)
    )
