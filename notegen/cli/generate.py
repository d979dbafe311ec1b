"""Note generation command for the notegen CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..app import AppContext, bootstrap
from ..config import DEFAULT_CONFIG_PATH, ConfigError, bootstrap_config_file
from ..opener import OpenerError, open_file
from ..paths import (
    TemplateNotFoundError,
    derive_output_path,
    list_templates,
    resolve_template_path,
)
from ..render import OutputWriteError, TemplateReadError, create_markdown_file
from ..resolver import classify_arguments, resolve_invocation
from ..tags import TagsParseError
from ..utils.datetime_fmt import local_now, today_local
from ._common import CONTEXT_SETTINGS, NotegenCliError, prompt_line


def _init_config(config_path: Path | None) -> None:
    effective_path = config_path or DEFAULT_CONFIG_PATH
    if bootstrap_config_file(effective_path):
        click.echo(f"Created configuration at {effective_path}")
    else:
        click.echo(f"Configuration already exists at {effective_path}")


def _open_note(app: AppContext, output_path: Path) -> None:
    try:
        open_file(output_path, opener=app.config.opener)
    except OpenerError as exc:
        # The note is already written; a failed launch does not fail the run.
        app.logger.warning("%s", exc)
        click.echo(str(exc))


@click.command(name="notegen", context_settings=CONTEXT_SETTINGS)
@click.option(
    "-w",
    "--wizard",
    is_flag=True,
    help="Run in wizard mode (interactive prompts for every field).",
)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option(
    "-d",
    "--templates-dir",
    "templates_dir_opt",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding the markdown templates.",
)
@click.option(
    "-t",
    "--template-file",
    "template_override",
    default=None,
    help="Template file to read; the note is still named after TEMPLATE.",
)
@click.option(
    "-o",
    "--output-dir",
    "output_dir_opt",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Base directory for the generated note (default: current directory).",
)
@click.option(
    "--open/--no-open",
    "open_opt",
    default=None,
    help="Open the generated note with the default application.",
)
@click.option(
    "-l",
    "--list",
    "list_only",
    is_flag=True,
    help="List available templates and exit.",
)
@click.option(
    "--init-config",
    is_flag=True,
    help="Write a default configuration file and exit.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.argument("args", nargs=-1)
def generate(
    args: tuple[str, ...],
    wizard: bool,
    config_path_opt: Path | None,
    templates_dir_opt: Path | None,
    template_override: str | None,
    output_dir_opt: Path | None,
    open_opt: bool | None,
    list_only: bool,
    init_config: bool,
    verbose: bool,
) -> None:
    """Create a dated markdown note from TEMPLATE, optionally titled NAME.

    \b
    notegen                  default template, no prompts
    notegen TEMPLATE         prompts for name, tags and date
    notegen TEMPLATE NAME    prompts for tags and date
    notegen -w               prompts for everything
    """

    if init_config:
        _init_config(config_path_opt)
        return

    try:
        app = bootstrap(
            config_path_opt,
            templates_dir=templates_dir_opt,
            output_dir=output_dir_opt,
            verbose=verbose,
        )
    except ConfigError as exc:
        raise NotegenCliError(str(exc)) from exc

    if list_only:
        for template in list_templates(app.templates_dir):
            click.echo(template)
        return

    available = list_templates(app.templates_dir) if wizard else ()
    invocation = classify_arguments(args, wizard=wizard, available_templates=available)

    try:
        resolved = resolve_invocation(
            invocation,
            prompt=prompt_line,
            today=today_local,
            default_template=app.config.default_template,
            template_override=template_override,
        )
    except TagsParseError as exc:
        raise NotegenCliError(str(exc)) from exc

    try:
        template_path = resolve_template_path(app.templates_dir, resolved.template_name)
    except TemplateNotFoundError as exc:
        raise NotegenCliError(str(exc)) from exc

    output_path = app.output_dir / derive_output_path(
        resolved.template,
        resolved.request.name,
        local_now(),
        journal_dir=app.config.journal_dir,
    )

    try:
        create_markdown_file(template_path, output_path, resolved.request)
    except (TemplateReadError, OutputWriteError) as exc:
        raise NotegenCliError(str(exc)) from exc

    click.echo(
        f"Markdown file '{output_path}' created using template '{template_path}'."
    )

    should_open = app.config.open_after_create if open_opt is None else open_opt
    if should_open:
        _open_note(app, output_path)
