"""Shared test fixtures for starter tests."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from starter.core import InstallContext
from starter.errors import ProcessError
from starter.models import InstallOptions
from starter.output import OutputContext


class RecordingRunner:
    """Command runner double that records argument lists.

    Commands containing fail_on raise ProcessError like a non-zero exit.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[list[str]] = []
        self.fail_on = fail_on

    def __call__(self, args: list[str], cwd: Path, timeout: int | None = None) -> str:
        self.calls.append(list(args))
        if self.fail_on and self.fail_on in " ".join(args):
            raise ProcessError(f"Command failed with exit code 1: {' '.join(args)}", args, 1)
        return ""

    def commands(self) -> list[str]:
        return [" ".join(call) for call in self.calls]


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def laravel_project(tmp_path: Path) -> Path:
    """Create a minimal Laravel project skeleton.

    Contains composer.json with an existing test script, package.json
    and an app/ directory.
    """
    project = tmp_path / "app-root"
    (project / "app" / "Models").mkdir(parents=True)
    (project / "tests").mkdir()
    composer = {
        "name": "laravel/laravel",
        "require": {"php": "^8.2", "laravel/framework": "^11.0"},
        "require-dev": {"phpunit/phpunit": "^11.0"},
        "scripts": {"test": ["old"]},
    }
    (project / "composer.json").write_text(json.dumps(composer, indent=4) + "\n")
    package = {"private": True, "type": "module", "scripts": {"build": "vite build"}}
    (project / "package.json").write_text(json.dumps(package, indent=4) + "\n")
    return project


@pytest.fixture
def output() -> OutputContext:
    """Output context writing to an in-memory, non-terminal console."""
    return OutputContext(Console(file=io.StringIO(), force_terminal=False, width=200))


@pytest.fixture
def recorder() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def make_ctx(laravel_project: Path, output: OutputContext, recorder: RecordingRunner):
    """Factory for InstallContext instances bound to laravel_project."""

    def _make(confirm_answer: bool = True, **options: bool) -> InstallContext:
        return InstallContext(
            project_root=laravel_project,
            output=output,
            options=InstallOptions(**options),
            run=recorder,
            confirm=lambda question, default: confirm_answer,
        )

    return _make


@pytest.fixture
def write_lock():
    """Return a function writing a composer.lock that lists the given packages."""

    def _write(project: Path, *names: str) -> None:
        lock = {"packages": [{"name": name, "version": "1.0.0"} for name in names]}
        (project / "composer.lock").write_text(json.dumps(lock))

    return _write
