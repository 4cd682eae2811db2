"""Tests for the railstart CLI."""

from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from typer.testing import CliRunner

from railstart import __version__
from railstart.cli import app
from railstart.models.workspace import WorkspaceHandle

from conftest import SKELETON, RecordingRunner

runner = CliRunner()


class CapturingRunner(RecordingRunner):
    """RecordingRunner that remembers every instance the CLI creates."""

    instances: list["CapturingRunner"] = []

    def __init__(self, workspace: WorkspaceHandle, *args: Any, **kwargs: Any):
        super().__init__(workspace)
        CapturingRunner.instances.append(self)


@pytest.fixture
def fake_processes(monkeypatch: Any) -> list[CapturingRunner]:
    """Replace process spawning in pipeline contexts with a recording runner."""
    CapturingRunner.instances = []
    monkeypatch.setattr("railstart.pipeline.context.CommandRunner", CapturingRunner)
    return CapturingRunner.instances


def snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_version_command() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_steps_command_lists_checkpoints() -> None:
    result = runner.invoke(app, ["steps"])

    assert result.exit_code == 0
    assert "add gems" in result.stdout
    assert "10 checkpoints per run" in result.stdout


def test_dry_run_changes_nothing(rails_app: Path, fake_processes: list[CapturingRunner]) -> None:
    before = snapshot(rails_app)

    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(rails_app), "--dry-run"])

    assert result.exit_code == 0
    assert snapshot(rails_app) == before
    assert fake_processes == []


def test_apply_runs_pipeline(rails_app: Path, fake_processes: list[CapturingRunner]) -> None:
    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(rails_app)])

    assert result.exit_code == 0, result.stdout
    assert len(fake_processes) == 1
    assert len(fake_processes[0].commits()) == 10
    assert (rails_app / "README.md").exists()
    assert "gem 'sqlite3'" not in (rails_app / "Gemfile").read_text()


def test_apply_reads_project_config(rails_app: Path, fake_processes: list[CapturingRunner]) -> None:
    (rails_app / "railstart.yaml").write_text("develop_branch: dev\nruby_version: 3.3.0\n")

    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(rails_app)])

    assert result.exit_code == 0, result.stdout
    assert fake_processes[0].command_lines()[-1] == "git checkout -b dev"
    assert (rails_app / ".ruby-version").read_text() == "3.3.0\n"


def test_apply_without_gemfile_fails(tmp_path: Path, fake_processes: list[CapturingRunner]) -> None:
    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(tmp_path)])

    assert result.exit_code == 1
    assert fake_processes == []


def test_apply_missing_project_root_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(tmp_path / "nope")])

    assert result.exit_code == 1


def test_apply_invalid_checkpoint_policy(rails_app: Path) -> None:
    result = runner.invoke(
        app,
        ["apply", "blog-app", "--project-root", str(rails_app), "--checkpoint-policy", "sometimes"],
    )

    assert result.exit_code == 1
    assert (rails_app / "Gemfile").read_text() == SKELETON["Gemfile"]


def test_apply_missing_explicit_config(rails_app: Path) -> None:
    result = runner.invoke(
        app,
        ["apply", "blog-app", "--project-root", str(rails_app), "--config", str(rails_app / "nope.yaml")],
    )

    assert result.exit_code == 1


def test_apply_failed_step_exits_nonzero(
    rails_app: Path, fake_processes: list[CapturingRunner]
) -> None:
    (rails_app / "config/routes.rb").write_text("nothing to anchor on\n")

    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(rails_app)])

    assert result.exit_code == 1
    assert len(fake_processes[0].commits()) == 8


def test_apply_summary_lists_failed_optional_step(
    rails_app: Path, fake_processes: list[CapturingRunner], monkeypatch: Any
) -> None:
    console = Console(record=True, width=200)
    monkeypatch.setattr("railstart.utils.console._console", console)
    monkeypatch.setenv("GITHUB_TOKEN", "token")

    def broken_post(*args: Any, **kwargs: Any) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr("railstart.services.remote_providers.github.httpx.post", broken_post)

    result = runner.invoke(app, ["apply", "blog-app", "--project-root", str(rails_app), "--github"])

    assert result.exit_code == 0, result.stdout
    output = console.export_text()
    assert "create_github_remote" in output
    assert "Failed: RuntimeError: boom" in output
