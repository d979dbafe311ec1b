"""Application bootstrap and context container for notegen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import NotegenConfig, executable_templates_dir, load_config
from .log import setup_logger


@dataclass(slots=True)
class AppContext:
    """Aggregates resolved settings for the CLI lifecycle."""

    config: NotegenConfig
    templates_dir: Path
    output_dir: Path
    logger: logging.Logger


def bootstrap(
    config_path: Path | None,
    *,
    templates_dir: Path | None = None,
    output_dir: Path | None = None,
    verbose: bool = False,
) -> AppContext:
    """Load configuration and settle the directories used for this run."""

    logger = setup_logger(level=logging.DEBUG if verbose else logging.WARNING)

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path)

    effective_templates = (
        templates_dir or config.templates_dir or executable_templates_dir()
    ).expanduser()
    effective_output = (output_dir or Path(".")).expanduser()

    logger.debug("Config: %s", config.source_path or "defaults")
    logger.debug("Templates directory: %s", effective_templates)
    logger.debug("Output directory: %s", effective_output)

    return AppContext(
        config=config,
        templates_dir=effective_templates,
        output_dir=effective_output,
        logger=logger,
    )
