"""Shared state handed to every setup step."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import typer

from ..config import StarterConfig
from ..models import InstallOptions
from ..output import OutputContext
from ..services import CommandRunner, IntegrationRegistry, run_command

STUBS_ROOT = Path(__file__).resolve().parent.parent / "stubs"

Confirm = Callable[[str, bool], bool]


def prompt_confirm(question: str, default: bool) -> bool:
    """Ask a yes/no question on the terminal."""
    return typer.confirm(question, default=default)


@dataclass
class InstallContext:
    """Everything a setup step may read or act on.

    The command runner and confirmation prompt are injectable so the
    sequence can run without a PHP toolchain or a terminal.
    """

    project_root: Path
    output: OutputContext
    options: InstallOptions = field(default_factory=InstallOptions)
    config: StarterConfig = field(default_factory=StarterConfig)
    stubs_root: Path = STUBS_ROOT
    run: CommandRunner = run_command
    confirm: Confirm = prompt_confirm
    registry: IntegrationRegistry = field(init=False)

    def __post_init__(self) -> None:
        self.registry = IntegrationRegistry(self.project_root)

    def path(self, *parts: str) -> Path:
        """Path inside the project."""
        return self.project_root.joinpath(*parts)

    def stub(self, *parts: str) -> Path:
        """Path inside the bundled stubs."""
        return self.stubs_root.joinpath(*parts)

    def ask(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no question, answering the default when non-interactive."""
        if self.options.no_interaction:
            return default
        return self.confirm(question, default)

    def _exec(self, args: list[str]) -> str:
        return self.run(args, self.project_root, self.config.process.timeout)

    def composer(self, *args: str) -> str:
        return self._exec([self.config.tools.composer, *args])

    def npm(self, *args: str) -> str:
        return self._exec([self.config.tools.npm, *args])

    def artisan(self, *args: str) -> str:
        return self._exec([self.config.tools.php, "artisan", *args])

    def binary(self, relative: str, *args: str) -> str:
        """Run an executable installed inside the project (e.g. vendor/bin/pest)."""
        return self._exec([str(self.path(relative)), *args])
