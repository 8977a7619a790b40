"""Integration tests for pagestats CLI."""

from __future__ import annotations

import json
import logging
import os
import signal
import threading
import time
from pathlib import Path
from typing import Callable

import pytest
import yaml
from click.testing import CliRunner

from pagestats.cli import CONFIG_TEMPLATE, cli


NOTE = """\
---
title: Deep Work
---
> Focus is a **rare skill** in a ==distracted economy==.
> It pays off.

My comment.
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a fresh tmp dir as project root."""
    return tmp_path


@pytest.fixture
def note(project_dir: Path) -> Path:
    path = project_dir / "deep_work.md"
    path.write_text(NOTE)
    return path


class TestInit:
    def test_creates_config(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["init", "--project-root", str(project_dir)])
        assert result.exit_code == 0
        config_path = project_dir / ".pagestats" / "config.yaml"
        assert config_path.read_text() == CONFIG_TEMPLATE
        assert yaml.safe_load(config_path.read_text()) == {"order": "default"}
        assert "config.yaml" in result.output

    def test_fails_if_dir_exists(self, runner: CliRunner, project_dir: Path) -> None:
        (project_dir / ".pagestats").mkdir()
        result = runner.invoke(cli, ["init", "--project-root", str(project_dir)])
        assert result.exit_code != 0
        assert ".pagestats/ already exists" in result.output


class TestStats:
    def test_panel(self, runner: CliRunner, project_dir: Path, note: Path) -> None:
        result = runner.invoke(
            cli, ["stats", str(note), "--project-root", str(project_dir)],
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "Page Stats - deep_work.md"
        assert "  Highlights       1" in lines
        assert "  Comments         1" in lines
        assert "  Layer 1          12" in lines
        assert "  Layer 2 (**)     2 (17%)" in lines
        assert "  Layer 3 (==)     2 (17%)" in lines

    def test_json(self, runner: CliRunner, project_dir: Path, note: Path) -> None:
        result = runner.invoke(
            cli, ["stats", str(note), "--project-root", str(project_dir), "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["stats"]["num_words_cite"] == 12
        assert data["stats"]["num_comments"] == 1
        assert data["order"] == "default"

    def test_uses_saved_order(self, runner: CliRunner, project_dir: Path, note: Path) -> None:
        runner.invoke(cli, ["order", "reverse", "--project-root", str(project_dir)])
        result = runner.invoke(
            cli, ["stats", str(note), "--project-root", str(project_dir)],
        )
        assert "  Layer 2 (==)     2 (17%)" in result.output.splitlines()

    def test_missing_document(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(
            cli, ["stats", str(project_dir / "nope.md"), "--project-root", str(project_dir)],
        )
        assert result.exit_code != 0

    def test_undecodable_document(self, runner: CliRunner, project_dir: Path) -> None:
        path = project_dir / "binary.md"
        path.write_bytes(b"\xff\xfe\x00bad")
        result = runner.invoke(
            cli, ["stats", str(path), "--project-root", str(project_dir)],
        )
        assert result.exit_code == 1
        assert "Could not read" in result.output

    def test_invalid_config(self, runner: CliRunner, project_dir: Path, note: Path) -> None:
        (project_dir / ".pagestats").mkdir()
        (project_dir / ".pagestats" / "config.yaml").write_text("order: sideways\n")
        result = runner.invoke(
            cli, ["stats", str(note), "--project-root", str(project_dir)],
        )
        assert result.exit_code == 1
        assert "Unsupported order" in result.output


class TestOrder:
    def test_show_default(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["order", "--project-root", str(project_dir)])
        assert result.exit_code == 0
        assert "Order: default" in result.output
        assert "Layer 2: **" in result.output
        assert not (project_dir / ".pagestats").exists()

    def test_set_reverse_persists(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["order", "reverse", "--project-root", str(project_dir)])
        assert result.exit_code == 0
        assert "Saved" in result.output
        assert "Layer 2: ==" in result.output
        saved = yaml.safe_load((project_dir / ".pagestats" / "config.yaml").read_text())
        assert saved["order"] == "reverse"

    def test_unchanged_not_saved(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["order", "default", "--project-root", str(project_dir)])
        assert result.exit_code == 0
        assert "Saved" not in result.output

    def test_rejects_unknown(self, runner: CliRunner, project_dir: Path) -> None:
        result = runner.invoke(cli, ["order", "sideways", "--project-root", str(project_dir)])
        assert result.exit_code != 0


class TestWatch:
    def test_registered(self) -> None:
        assert "watch" in cli.commands

    @pytest.mark.skipif(not hasattr(signal, "SIGWINCH"), reason="needs SIGWINCH")
    def test_resize_redraws_then_stops(
        self, runner: CliRunner, project_dir: Path, note: Path,
    ) -> None:
        result = _invoke_watch(runner, project_dir, note, before_resize=lambda: None)
        assert result.exit_code == 0, result.output
        assert result.output.count("Page Stats - deep_work.md") == 2
        assert "Stopped watching." in result.output

    @pytest.mark.skipif(not hasattr(signal, "SIGWINCH"), reason="needs SIGWINCH")
    def test_unreadable_document_on_resize_keeps_running(
        self,
        runner: CliRunner,
        project_dir: Path,
        note: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="pagestats.cli"):
            result = _invoke_watch(runner, project_dir, note, before_resize=note.unlink)
        assert result.exit_code == 0, result.output
        assert result.output.count("Page Stats - deep_work.md") == 1
        assert "Stopped watching." in result.output
        assert "Error refreshing stats after resize" in caplog.text

    @pytest.mark.skipif(not hasattr(signal, "SIGWINCH"), reason="needs SIGWINCH")
    def test_restores_signal_handlers(
        self, runner: CliRunner, project_dir: Path, note: Path,
    ) -> None:
        before = signal.getsignal(signal.SIGTERM)
        _invoke_watch(runner, project_dir, note, before_resize=lambda: None)
        assert signal.getsignal(signal.SIGTERM) is before


def _invoke_watch(
    runner: CliRunner,
    project_dir: Path,
    note: Path,
    before_resize: Callable[[], None],
):
    """Run ``watch`` while a helper thread resizes the terminal, then stops it."""
    original = signal.getsignal(signal.SIGWINCH)

    def drive() -> None:
        # Wait for the command to install its handlers.
        deadline = time.monotonic() + 10
        while signal.getsignal(signal.SIGWINCH) is original:
            if time.monotonic() > deadline:
                return
            time.sleep(0.01)
        before_resize()
        os.kill(os.getpid(), signal.SIGWINCH)
        time.sleep(0.3)
        os.kill(os.getpid(), signal.SIGTERM)

    helper = threading.Thread(target=drive, daemon=True)
    helper.start()
    try:
        return runner.invoke(
            cli, ["watch", str(note), "--project-root", str(project_dir)],
        )
    finally:
        helper.join(timeout=10)
