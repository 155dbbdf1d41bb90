"""CLI command implementations for the installer.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .install import install

__all__ = [
    "install",
]
