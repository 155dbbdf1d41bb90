"""Tests for the integration registry."""

import json
from pathlib import Path

from starter.services.integrations import (
    Integration,
    IntegrationRegistry,
    installed_packages,
)


def test_lockfile_takes_precedence(laravel_project: Path, write_lock) -> None:
    write_lock(laravel_project, "laravel/horizon")
    composer = json.loads((laravel_project / "composer.json").read_text())
    composer["require"]["laravel/pulse"] = "^1.0"
    (laravel_project / "composer.json").write_text(json.dumps(composer))

    registry = IntegrationRegistry(laravel_project)
    assert registry.has(Integration.HORIZON)
    assert not registry.has(Integration.PULSE)


def test_lockfile_dev_packages(laravel_project: Path) -> None:
    lock = {"packages": [], "packages-dev": [{"name": "barryvdh/laravel-ide-helper"}]}
    (laravel_project / "composer.lock").write_text(json.dumps(lock))
    assert IntegrationRegistry(laravel_project).present == {Integration.IDE_HELPER}


def test_falls_back_to_composer_json(laravel_project: Path) -> None:
    composer = json.loads((laravel_project / "composer.json").read_text())
    composer["require"]["filament/filament"] = "^3.2"
    composer["require-dev"]["barryvdh/laravel-ide-helper"] = "^3.0"
    (laravel_project / "composer.json").write_text(json.dumps(composer))

    registry = IntegrationRegistry(laravel_project)
    assert registry.present == {Integration.FILAMENT, Integration.IDE_HELPER}


def test_fresh_project_has_no_integrations(laravel_project: Path) -> None:
    assert IntegrationRegistry(laravel_project).present == frozenset()


def test_unreadable_metadata_means_nothing_installed(tmp_path: Path) -> None:
    (tmp_path / "composer.lock").write_text("{broken")
    assert installed_packages(tmp_path) == set()
    assert installed_packages(tmp_path / "missing") == set()


def test_refresh_picks_up_new_packages(laravel_project: Path, write_lock) -> None:
    registry = IntegrationRegistry(laravel_project)
    assert not registry.has(Integration.SENTRY)
    write_lock(laravel_project, "sentry/sentry-laravel")
    registry.refresh()
    assert registry.has(Integration.SENTRY)
