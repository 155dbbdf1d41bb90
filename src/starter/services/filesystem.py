"""Filesystem helpers that never overwrite existing files."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_directory(path: Path, marker: str | None = None) -> bool:
    """Create a directory (with parents) if it does not exist.

    Args:
        path: Directory to create
        marker: Optional empty file written inside a newly created directory

    Returns:
        True if the directory was created, False if it already existed
    """
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    if marker:
        (path / marker).write_text("")
    logger.debug(f"Created directory {path}")
    return True


def copy_if_absent(source: Path, destination: Path) -> bool:
    """Copy a file unless the destination already exists.

    Returns:
        True if the file was copied
    """
    if destination.exists():
        logger.debug(f"Keeping existing {destination}")
        return False
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    logger.debug(f"Copied {source} -> {destination}")
    return True


def copy_tree_if_absent(source: Path, destination: Path) -> bool:
    """Copy a directory tree unless something already exists at the destination.

    Returns:
        True if the tree was copied
    """
    if destination.exists():
        logger.debug(f"Keeping existing {destination}")
        return False
    shutil.copytree(source, destination)
    logger.debug(f"Copied tree {source} -> {destination}")
    return True
