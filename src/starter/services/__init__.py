"""External service integrations for the installer.

This package provides interfaces to external tools and the filesystem:
- process: Blocking subprocess execution
- filesystem: Create/copy helpers that never overwrite
- manifest: JSON manifest read/edit/write
- integrations: Installed-integration registry
"""

from .filesystem import copy_if_absent, copy_tree_if_absent, ensure_directory
from .integrations import INTEGRATION_PACKAGES, Integration, IntegrationRegistry
from .manifest import (
    add_missing_scripts,
    has_scripts,
    read_manifest,
    set_scripts,
    write_manifest,
)
from .process import CommandRunner, run_command

__all__ = [
    "INTEGRATION_PACKAGES",
    "CommandRunner",
    "Integration",
    "IntegrationRegistry",
    "add_missing_scripts",
    "copy_if_absent",
    "copy_tree_if_absent",
    "ensure_directory",
    "has_scripts",
    "read_manifest",
    "run_command",
    "set_scripts",
    "write_manifest",
]
