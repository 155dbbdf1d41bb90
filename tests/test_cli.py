"""CLI integration tests for starter."""

import subprocess
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from starter.cli import app


def completed(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(cmd, returncode=0, stdout="", stderr="")


class TestVersionCommand:
    """Tests for --version flag."""

    def test_version_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "starter" in result.output
        assert "0.1.0" in result.output


class TestHelpCommand:
    """Tests for --help flag."""

    def test_help_lists_install(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "install" in result.output

    def test_install_help_lists_flags(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["install", "--help"])
        assert result.exit_code == 0
        for flag in ("--skip-packages", "--skip-pest", "--skip-docs", "--no-interaction"):
            assert flag in result.output

    def test_no_args_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(app, [])
        assert "Usage" in result.output


class TestInstallCommand:
    """Tests for starter install."""

    def test_requires_composer_json(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["install", "--path", str(tmp_path)])
        assert result.exit_code == 1
        assert "composer.json not found" in result.output

    def test_successful_install(self, runner: CliRunner, laravel_project: Path) -> None:
        with patch(
            "starter.services.process.subprocess.run", side_effect=completed
        ) as run:
            result = runner.invoke(app, ["install", "-n", "--path", str(laravel_project)])

        assert result.exit_code == 0, result.output
        assert "Creating directory structure" in result.output
        assert "installed successfully" in result.output
        assert "/horizon" in result.output
        executed = [" ".join(call.args[0]) for call in run.call_args_list]
        assert executed[0].startswith("composer require filament/filament")
        assert executed[-1] == "php artisan migrate"
        assert (laravel_project / "docs-site").is_dir()
        assert (laravel_project / "app" / "Enums" / ".gitkeep").exists()

    def test_docs_prompt_declined(self, runner: CliRunner, laravel_project: Path) -> None:
        with patch("starter.services.process.subprocess.run", side_effect=completed):
            result = runner.invoke(
                app,
                ["install", "--skip-packages", "--path", str(laravel_project)],
                input="n\n",
            )

        assert result.exit_code == 0, result.output
        assert "Set up VitePress documentation site?" in result.output
        assert not (laravel_project / "docs-site").exists()

    def test_docs_prompt_default_is_yes(self, runner: CliRunner, laravel_project: Path) -> None:
        with patch("starter.services.process.subprocess.run", side_effect=completed):
            result = runner.invoke(
                app,
                ["install", "--skip-packages", "--path", str(laravel_project)],
                input="\n",
            )

        assert result.exit_code == 0, result.output
        assert (laravel_project / "docs-site").is_dir()

    def test_failed_command_exits_nonzero(
        self, runner: CliRunner, laravel_project: Path
    ) -> None:
        def failing(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
            return subprocess.CompletedProcess(
                cmd, returncode=1, stdout="", stderr="Your requirements could not be resolved"
            )

        with patch("starter.services.process.subprocess.run", side_effect=failing):
            result = runner.invoke(app, ["install", "-n", "--path", str(laravel_project)])

        assert result.exit_code == 1
        assert "exit code 1" in result.output
        assert "could not be resolved" in result.output
        assert "installed successfully" not in result.output

    def test_missing_tool_exits_nonzero(self, runner: CliRunner, laravel_project: Path) -> None:
        with patch(
            "starter.services.process.subprocess.run",
            side_effect=FileNotFoundError("php"),
        ):
            result = runner.invoke(
                app, ["install", "-n", "--skip-packages", "--path", str(laravel_project)]
            )

        assert result.exit_code == 1
        assert "Command not found: php" in result.output

    def test_invalid_config_exits_nonzero(
        self, runner: CliRunner, laravel_project: Path
    ) -> None:
        (laravel_project / "starter.toml").write_text("[process]\ntimeout = -5\n")
        result = runner.invoke(app, ["install", "-n", "--path", str(laravel_project)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_undecodable_composer_json_exits_nonzero(
        self, runner: CliRunner, laravel_project: Path
    ) -> None:
        (laravel_project / "composer.json").write_bytes(b'{"name": "caf\xe9"}')
        with patch("starter.services.process.subprocess.run", side_effect=completed):
            result = runner.invoke(
                app, ["install", "-n", "--skip-packages", "--path", str(laravel_project)]
            )

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "UTF-8" in result.output

    def test_undecodable_guidelines_exits_nonzero(
        self, runner: CliRunner, laravel_project: Path
    ) -> None:
        (laravel_project / "CLAUDE.md").write_bytes(b"# Caf\xe9\n")
        with patch("starter.services.process.subprocess.run", side_effect=completed):
            result = runner.invoke(
                app, ["install", "-n", "--skip-packages", "--path", str(laravel_project)]
            )

        assert result.exit_code == 1
        assert "UTF-8" in result.output

    def test_quiet_hides_progress(self, runner: CliRunner, laravel_project: Path) -> None:
        with patch("starter.services.process.subprocess.run", side_effect=completed):
            result = runner.invoke(
                app,
                ["-q", "install", "-n", "--skip-packages", "--path", str(laravel_project)],
            )

        assert result.exit_code == 0, result.output
        assert "Creating directory structure" not in result.output
        assert "installed successfully" not in result.output

    def test_rerun_is_safe(self, runner: CliRunner, laravel_project: Path) -> None:
        args = ["install", "-n", "--skip-packages", "--path", str(laravel_project)]
        with patch("starter.services.process.subprocess.run", side_effect=completed):
            first = runner.invoke(app, args)
            composer_after_first = (laravel_project / "composer.json").read_text()
            second = runner.invoke(app, args)

        assert first.exit_code == 0
        assert second.exit_code == 0
        assert (laravel_project / "composer.json").read_text() == composer_after_first
        assert "Adding Composer scripts" not in second.output
