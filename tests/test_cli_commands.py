from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from addressbook.cli.app import app
from addressbook.cli.deps import reset_container


def _env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, *, seed: bool = False) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path/'cli.db'}"
    monkeypatch.setenv("ADDRESSBOOK_DATABASE_URL", db_url)
    monkeypatch.setenv("ADDRESSBOOK_ENV", "test")
    monkeypatch.setenv("ADDRESSBOOK_SEED_SAMPLE", "1" if seed else "0")
    reset_container()


def test_cli_show_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["show-settings"])
    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout


def test_cli_add_then_remark(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    added = runner.invoke(
        app,
        ["run", "add n/Alice p/94351253 e/alice@example.com a/Jurong West"],
    )
    assert added.exit_code == 0
    assert "New person added: Alice" in added.stdout

    remarked = runner.invoke(app, ["run", "remark", "1", "r/Likes", "coffee"])
    assert remarked.exit_code == 0
    assert "Remark updated: Alice" in remarked.stdout
    assert "Remark: Likes coffee" in remarked.stdout

    table = runner.invoke(app, ["table"])
    assert table.exit_code == 0
    assert "Alice" in table.stdout


def test_cli_run_reports_errors(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(app, ["run", "remark 3 r/x"])
    assert result.exit_code == 1
    assert "The person index provided is invalid" in result.stdout

    unknown = runner.invoke(app, ["run", "launch"])
    assert unknown.exit_code == 1
    assert "Unknown command" in unknown.stdout


def test_cli_shell_session(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path, seed=True)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["shell"],
        input="find Yu\nremark 1 r/Met at work\nundo\nhistory\nexit\n",
    )

    assert result.exit_code == 0
    assert "1 persons listed!" in result.stdout
    assert "Remark updated: Bernice Yu" in result.stdout
    assert "Undo success!" in result.stdout
    assert "remark 1 r/Met at work" in result.stdout
    assert "Exiting Address Book as requested" in result.stdout
