"""JSON manifest (composer.json / package.json) read, edit and write."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import ManifestError


def read_manifest(path: Path) -> dict[str, Any]:
    """Load a JSON manifest, preserving key order.

    Raises:
        ManifestError: If the file is missing, not UTF-8 JSON, or not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}") from None
    except UnicodeDecodeError as e:
        raise ManifestError(f"Cannot read {path}: not valid UTF-8 ({e.reason})") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest is not a JSON object: {path}")
    return data


def write_manifest(path: Path, data: Mapping[str, Any]) -> None:
    """Write a manifest pretty-printed with a trailing newline.

    Slashes are left unescaped, as json.dumps never escapes them.
    """
    path.write_text(json.dumps(data, indent=4) + "\n")


def _scripts(data: dict[str, Any]) -> dict[str, Any]:
    scripts = data.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}
        data["scripts"] = scripts
    return scripts


def add_missing_scripts(data: dict[str, Any], scripts: Mapping[str, Any]) -> list[str]:
    """Add script entries whose names are not yet defined.

    Existing entries are never touched.

    Returns:
        Names of the scripts that were added
    """
    existing = _scripts(data)
    added = []
    for name, commands in scripts.items():
        if name not in existing:
            existing[name] = commands
            added.append(name)
    return added


def set_scripts(data: dict[str, Any], scripts: Mapping[str, Any]) -> None:
    """Set script entries, replacing any previous values for the same names."""
    _scripts(data).update(scripts)


def has_scripts(path: Path, names: list[str]) -> bool:
    """Return True if the manifest at path defines every named script."""
    if not path.exists():
        return False
    scripts = read_manifest(path).get("scripts")
    return isinstance(scripts, dict) and all(name in scripts for name in names)
