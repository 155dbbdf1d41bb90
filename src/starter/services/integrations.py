"""Detection of optional Composer integrations installed in the project."""

import logging
from enum import Enum
from pathlib import Path

from ..constants import COMPOSER_LOCK, COMPOSER_MANIFEST
from ..errors import ManifestError
from .manifest import read_manifest

logger = logging.getLogger(__name__)


class Integration(str, Enum):
    """Optional add-ons whose setup commands run only when installed."""

    FILAMENT = "filament"
    HORIZON = "horizon"
    TELESCOPE = "telescope"
    PULSE = "pulse"
    SENTRY = "sentry"
    IDE_HELPER = "ide-helper"


# Composer package that provides each integration
INTEGRATION_PACKAGES: dict[Integration, str] = {
    Integration.FILAMENT: "filament/filament",
    Integration.HORIZON: "laravel/horizon",
    Integration.TELESCOPE: "laravel/telescope",
    Integration.PULSE: "laravel/pulse",
    Integration.SENTRY: "sentry/sentry-laravel",
    Integration.IDE_HELPER: "barryvdh/laravel-ide-helper",
}


def installed_packages(project_root: Path) -> set[str]:
    """Return the Composer package names known to be installed.

    Reads composer.lock when present (packages and packages-dev), otherwise
    falls back to the require/require-dev keys of composer.json. A missing
    or unreadable manifest yields an empty set.
    """
    lock_path = project_root / COMPOSER_LOCK
    try:
        if lock_path.exists():
            lock = read_manifest(lock_path)
            return {
                entry["name"]
                for section in ("packages", "packages-dev")
                for entry in lock.get(section, [])
                if isinstance(entry, dict) and "name" in entry
            }
        manifest = read_manifest(project_root / COMPOSER_MANIFEST)
    except ManifestError as e:
        logger.debug(f"Cannot read installed packages: {e}")
        return set()
    return {
        name
        for section in ("require", "require-dev")
        for name in (manifest.get(section) or {})
    }


class IntegrationRegistry:
    """Which integrations are present in a project.

    Resolved from Composer metadata on construction and on refresh().
    """

    def __init__(self, project_root: Path) -> None:
        self.project_root = project_root
        self._present: frozenset[Integration] = frozenset()
        self.refresh()

    def refresh(self) -> None:
        """Re-read Composer metadata."""
        packages = installed_packages(self.project_root)
        self._present = frozenset(
            integration
            for integration, package in INTEGRATION_PACKAGES.items()
            if package in packages
        )
        logger.debug(f"Integrations present: {sorted(i.value for i in self._present)}")

    def has(self, integration: Integration) -> bool:
        """Return True if the integration's package is installed."""
        return integration in self._present

    @property
    def present(self) -> frozenset[Integration]:
        return self._present
