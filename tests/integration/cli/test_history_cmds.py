"""Integration tests for the history, show, clear, and init commands"""

import pytest
from typer.testing import CliRunner

from linediff.cli.cli import app


runner = CliRunner()


@pytest.fixture(name="saved")
def saved_fixture(tmp_path, monkeypatch):
    """Isolated database holding one saved comparison."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LINEDIFF_DB_URL", f"sqlite:///{tmp_path}/test.db")
    (tmp_path / "a.txt").write_text("x\ny")
    (tmp_path / "b.txt").write_text("y\nx")
    result = runner.invoke(app, ["diff", "a.txt", "b.txt", "--save", "--stats-only"])
    assert result.exit_code == 0, result.output
    return tmp_path


def test_history_cmd_empty(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LINEDIFF_DB_URL", f"sqlite:///{tmp_path}/test.db")
    result = runner.invoke(app, ["history"])
    assert result.exit_code == 0, result.output
    assert "No history." in result.output


def test_history_cmd_respects_history_limit(saved, monkeypatch):
    """Only the newest history_limit entries survive."""
    monkeypatch.setenv("LINEDIFF_HISTORY_LIMIT", "2")
    for _ in range(3):
        result = runner.invoke(app, ["diff", "a.txt", "b.txt", "--save", "--stats-only"])
        assert result.exit_code == 0, result.output
    listing = runner.invoke(app, ["history"])
    rows = [line for line in listing.output.splitlines() if line.startswith("#")]
    assert [row.split()[0] for row in rows] == ["#4", "#3"]


def test_show_cmd_rediffs_entry(saved):
    """show re-runs the diff for a stored entry."""
    result = runner.invoke(app, ["show", "1", "--view", "unified"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("#1")
    assert lines[1:] == ["+ y", "  x", "- y", "add: 1, delete: 1, change: 0"]


def test_show_cmd_missing_entry(saved):
    result = runner.invoke(app, ["show", "99"])
    assert result.exit_code == 1
    assert "History entry 99 not found" in result.output


def test_clear_cmd(saved):
    result = runner.invoke(app, ["clear"])
    assert result.exit_code == 0, result.output
    assert "Cleared 1 history entries." in result.output
    assert "No history." in runner.invoke(app, ["history"]).output


def test_init_cmd_reset(saved):
    """init --reset drops existing history."""
    result = runner.invoke(app, ["init", "--reset"])
    assert result.exit_code == 0, result.output
    assert "Existing data cleared." in result.output
    assert "No history." in runner.invoke(app, ["history"]).output
