"""Logging configuration for the starter CLI."""

import logging
import sys
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log level enumeration."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO = sys.stderr,
) -> Console:
    """Set the root log level from -v/-q and route records through rich.

    -v shows debug records (commands run, guards evaluated). -vv also stamps
    each record with its time and source location. -q wins over -v and keeps
    only warnings and errors.

    Progress output does not go through logging; it is printed on the returned
    console, which writes to stdout so it can be piped apart from the log stream.
    """
    level = level_for(verbosity, quiet)
    detailed = verbosity >= 2 and not quiet

    handler = RichHandler(
        console=Console(file=stream, no_color=no_color),
        show_time=detailed,
        show_path=detailed,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return Console(force_terminal=False if no_color else None, no_color=no_color)


def level_for(verbosity: int, quiet: bool) -> LogLevel:
    if quiet:
        return LogLevel.QUIET
    if verbosity:
        return LogLevel.VERBOSE
    return LogLevel.NORMAL
