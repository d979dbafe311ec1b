"""Tests for the Click-based notegen command."""

from __future__ import annotations

import inspect
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner
from notegen import cli
from notegen import config as config_module
from notegen.cli import generate as generate_module
from notegen.opener import OpenerError

TEMPLATE = "Date: {{DATE}}\nName: {{NAME}}\nTags: {{TAGS}}\n"
NOW = datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> dict[str, object]:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "task.md").write_text(TEMPLATE, encoding="utf-8")
    (templates / "meeting.md").write_text("# {{NAME}} ({{DATE}})\n", encoding="utf-8")
    output = tmp_path / "out"
    output.mkdir()

    missing_config = tmp_path / "config" / "config.toml"
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", missing_config)
    monkeypatch.setattr(generate_module, "DEFAULT_CONFIG_PATH", missing_config)
    monkeypatch.setattr(generate_module, "local_now", lambda: NOW)
    monkeypatch.setattr(generate_module, "today_local", lambda: "2024-01-15")

    opened: list[Path] = []
    monkeypatch.setattr(
        generate_module, "open_file", lambda path, opener=None: opened.append(path)
    )

    return {
        "templates": templates,
        "output": output,
        "opened": opened,
        "config": missing_config,
    }


def _base_args(ws: dict[str, object]) -> list[str]:
    return ["-d", str(ws["templates"]), "-o", str(ws["output"])]


def test_two_args_create_named_note(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [*_base_args(workspace), "task.md", "standup"],
        input='["work","daily"]\n\n',
    )

    assert result.exit_code == 0, result.output

    note = workspace["output"] / "2024-01-15_09:30:00_task.md_standup"
    assert note.read_text(encoding="utf-8") == (
        'Date: 2024-01-15\nName: standup\nTags: ["work","daily"]\n'
    )
    assert f"Markdown file '{note}' created using template" in result.output
    assert workspace["opened"] == [note]


def test_closed_stdin_counts_as_empty_answers(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, [*_base_args(workspace), "task.md", "standup"], input=""
    )

    assert result.exit_code == 0, result.output
    assert "Tags (optional, JSON-formatted array): " in result.output
    note = workspace["output"] / "2024-01-15_09:30:00_task.md_standup"
    assert note.read_text(encoding="utf-8") == (
        "Date: 2024-01-15\nName: standup\nTags: []\n"
    )


def test_command_module_stays_importable() -> None:
    assert inspect.ismodule(generate_module)
    assert cli.cli is generate_module.generate


def test_no_args_uses_default_template_in_journal(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, _base_args(workspace))

    assert result.exit_code == 0, result.output
    note = workspace["output"] / "docs" / "journal" / "2024-01-15_09:30:00_task.md"
    assert note.read_text(encoding="utf-8") == "Date: 2024-01-15\nName: \nTags: []\n"


def test_one_arg_prompts_for_remaining_fields(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [*_base_args(workspace), "meeting.md"],
        input="retro\n\n2024-02-01\n",
    )

    assert result.exit_code == 0, result.output
    assert "Name (optional): " in result.output
    note = workspace["output"] / "2024-01-15_09:30:00_meeting.md_retro"
    assert note.read_text(encoding="utf-8") == "# retro (2024-02-01)\n"


def test_wizard_ignores_positional_arguments(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [*_base_args(workspace), "-w", "task.md", "ignored"],
        input="meeting.md\nplanning\n\n\n",
    )

    assert result.exit_code == 0, result.output
    assert "possible templates: meeting.md, task.md" in result.output
    note = workspace["output"] / "2024-01-15_09:30:00_meeting.md_planning"
    assert note.exists()


def test_malformed_tags_write_nothing(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [*_base_args(workspace), "task.md", "standup"],
        input="not-json\n\n",
    )

    assert result.exit_code == 1
    assert "Error parsing tags as JSON array" in result.output
    assert list(workspace["output"].iterdir()) == []
    assert workspace["opened"] == []


def test_missing_template_is_reported(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, [*_base_args(workspace), "nope.md", "x"], input="\n\n"
    )

    assert result.exit_code == 1
    assert "Template 'nope.md' not found." in result.output
    assert list(workspace["output"].iterdir()) == []


def test_template_file_override(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        [*_base_args(workspace), "-t", "meeting.md", "daily", "sync"],
        input="\n\n",
    )

    assert result.exit_code == 0, result.output
    note = workspace["output"] / "2024-01-15_09:30:00_daily_sync"
    assert note.read_text(encoding="utf-8") == "# sync (2024-01-15)\n"


def test_no_open_skips_opener(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, [*_base_args(workspace), "--no-open"])

    assert result.exit_code == 0, result.output
    assert workspace["opened"] == []


def test_config_disables_open_and_sets_defaults(workspace, tmp_path: Path) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text(
        '[notegen]\ndefault_template = "meeting.md"\n'
        'journal_dir = "log"\nopen_after_create = false\n',
        encoding="utf-8",
    )

    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-c", str(config_path), *_base_args(workspace)])

    assert result.exit_code == 0, result.output
    assert (workspace["output"] / "log" / "2024-01-15_09:30:00_meeting.md").exists()
    assert workspace["opened"] == []


def test_opener_failure_does_not_fail_run(workspace, monkeypatch) -> None:
    def failing_open(path: Path, opener: str | None = None) -> None:
        raise OpenerError("Error opening the markdown file: boom")

    monkeypatch.setattr(generate_module, "open_file", failing_open)

    runner = CliRunner()
    result = runner.invoke(cli.cli, _base_args(workspace))

    assert result.exit_code == 0, result.output
    assert "Error opening the markdown file: boom" in result.output


def test_list_templates(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-d", str(workspace["templates"]), "--list"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["meeting.md", "task.md"]


def test_init_config_writes_default_file(workspace) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--init-config"])

    assert result.exit_code == 0, result.output
    assert workspace["config"].exists()
    assert "Created configuration" in result.output


def test_missing_explicit_config_is_an_error(workspace, tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["-c", str(tmp_path / "absent.toml")])

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_main_returns_exit_codes(workspace) -> None:
    assert cli.main([*_base_args(workspace), "--no-open"]) == 0
    assert cli.main([*_base_args(workspace), "-t", "missing.md", "--no-open"]) == 1
