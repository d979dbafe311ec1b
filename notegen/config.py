"""Configuration management for notegen."""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/notegen").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_TEMPLATE = "task.md"
DEFAULT_JOURNAL_DIR = Path("docs/journal")
TEMPLATES_DIRNAME = "templates"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class NotegenConfig:
    """In-memory representation of the notegen configuration file."""

    templates_dir: Path | None = None
    default_template: str = DEFAULT_TEMPLATE
    journal_dir: Path = DEFAULT_JOURNAL_DIR
    open_after_create: bool = True
    opener: str | None = None
    source_path: Path | None = None


def executable_templates_dir() -> Path:
    """Return the ``templates`` directory next to the running script."""

    return Path(sys.argv[0]).resolve().parent / TEMPLATES_DIRNAME


def _optional_str(section: dict[str, Any], key: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    return value.strip() or None


def load_config(path: Path | None = None) -> NotegenConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/notegen/config.toml``) is used, and a missing file
        simply yields the built-in defaults.

    Raises
    ------
    MissingConfigError
        If an explicitly given file cannot be found.
    InvalidConfigError
        If the file is not valid TOML or settings are malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        if path is not None:
            raise MissingConfigError(config_path)
        return NotegenConfig()

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get("notegen", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'notegen' section must be a table")

    config_dir = config_path.parent

    # Relative template directories are resolved against the config directory.
    templates_dir: Path | None = None
    templates_raw = _optional_str(section, "templates_dir")
    if templates_raw is not None:
        td = Path(templates_raw).expanduser()
        templates_dir = (td if td.is_absolute() else config_dir / td).resolve()

    default_template = _optional_str(section, "default_template") or DEFAULT_TEMPLATE

    journal_raw = _optional_str(section, "journal_dir")
    journal_dir = Path(journal_raw) if journal_raw is not None else DEFAULT_JOURNAL_DIR

    open_after_create = section.get("open_after_create", True)
    if not isinstance(open_after_create, bool):
        raise InvalidConfigError("'open_after_create' must be a boolean when provided")

    return NotegenConfig(
        templates_dir=templates_dir,
        default_template=default_template,
        journal_dir=journal_dir,
        open_after_create=open_after_create,
        opener=_optional_str(section, "opener"),
        source_path=config_path,
    )


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[notegen]\n"
        f'templates_dir = "{TEMPLATES_DIRNAME}"\n'
        f'default_template = "{DEFAULT_TEMPLATE}"\n'
        f'journal_dir = "{DEFAULT_JOURNAL_DIR.as_posix()}"\n'
        "open_after_create = true\n"
    )
    path.write_text(default_content, encoding="utf-8")
    return True
