"""External command runner for the installer."""

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from ..constants import ERROR_OUTPUT_TAIL, PACKAGE_INSTALL_TIMEOUT
from ..errors import ProcessError

logger = logging.getLogger(__name__)

# Signature shared by run_command and test doubles
CommandRunner = Callable[[list[str], Path, int | None], str]


def run_command(
    args: list[str],
    cwd: Path,
    timeout: int | None = None,
) -> str:
    """Run a command to completion and return its stdout.

    Args:
        args: Argument list, executed without a shell
        cwd: Working directory
        timeout: Optional timeout in seconds (default: PACKAGE_INSTALL_TIMEOUT)

    Returns:
        Captured stdout

    Raises:
        ProcessError: If the command is missing, times out or exits non-zero
    """
    timeout = timeout or PACKAGE_INSTALL_TIMEOUT
    command = " ".join(args)
    logger.debug(f"Running: {command} (cwd={cwd})")

    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ProcessError(
            f"Command timed out after {timeout} seconds: {command}",
            args,
            output=_output_tail(e.stdout, e.stderr),
        ) from e
    except FileNotFoundError:
        raise ProcessError(f"Command not found: {args[0]}", args) from None

    if result.returncode != 0:
        raise ProcessError(
            f"Command failed with exit code {result.returncode}: {command}",
            args,
            returncode=result.returncode,
            output=_output_tail(result.stdout, result.stderr),
        )

    return result.stdout


def _output_tail(stdout: str | bytes | None, stderr: str | bytes | None) -> str:
    # TimeoutExpired may carry bytes even when text=True
    parts = [
        part.decode(errors="replace") if isinstance(part, bytes) else part
        for part in (stdout, stderr)
        if part
    ]
    return "".join(parts).strip()[-ERROR_OUTPUT_TAIL:]
