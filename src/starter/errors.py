"""Errors raised by the starter installer."""


class StarterError(Exception):
    """Base exception for installer errors."""


class ProcessError(StarterError):
    """Raised when an external command fails.

    Attributes:
        command: Argument list that was executed.
        returncode: Exit code, or None if the command never ran to completion.
        output: Tail of the combined stdout/stderr.
    """

    def __init__(
        self,
        message: str,
        command: list[str],
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.output = output


class ManifestError(StarterError):
    """Raised when a JSON manifest cannot be read or is not an object."""


class DocumentError(StarterError):
    """Raised when the guidelines document cannot be decoded."""


class ConfigError(StarterError):
    """Raised when starter.toml cannot be parsed or validated."""
