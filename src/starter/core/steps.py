"""The install sequence: one action (plus guards) per setup step."""

import logging

from ..constants import (
    APP_DIRECTORIES,
    COMPOSER_MANIFEST,
    COMPOSER_SCRIPTS,
    CONFIG_STUBS,
    DOCS_DIR,
    DOCS_SCRIPTS,
    DOCS_STUB_DIR,
    GITKEEP,
    NPM_DEV_PACKAGES,
    PACKAGE_MANIFEST,
    PEST_BINARY,
    PEST_CONFIG,
    REQUIRE_DEV_PACKAGES,
    REQUIRE_PACKAGES,
)
from ..models import SetupStep
from ..services import (
    Integration,
    add_missing_scripts,
    copy_if_absent,
    copy_tree_if_absent,
    ensure_directory,
    has_scripts,
    read_manifest,
    set_scripts,
    write_manifest,
)
from .context import InstallContext
from .doc_patcher import apply_patches, patch_document, read_document

logger = logging.getLogger(__name__)

# (integration, spinner message, artisan arguments), run in this order
PUBLISHERS: list[tuple[Integration, str, list[str]]] = [
    (
        Integration.FILAMENT,
        "Installing Filament...",
        ["filament:install", "--panels", "--no-interaction"],
    ),
    (Integration.HORIZON, "Installing Horizon...", ["horizon:install"]),
    (Integration.TELESCOPE, "Installing Telescope...", ["telescope:install"]),
    (
        Integration.PULSE,
        "Publishing Pulse config...",
        ["vendor:publish", "--provider=Laravel\\Pulse\\PulseServiceProvider"],
    ),
    (Integration.SENTRY, "Publishing Sentry config...", ["sentry:publish", "--dsn="]),
]


# ============================================================================
# Directory structure
# ============================================================================


def directories_exist(ctx: InstallContext) -> bool:
    return all(ctx.path("app", name).is_dir() for name in APP_DIRECTORIES)


def create_directories(ctx: InstallContext) -> None:
    for name in APP_DIRECTORIES:
        ensure_directory(ctx.path("app", name), marker=GITKEEP)


# ============================================================================
# Config files
# ============================================================================


def config_files_exist(ctx: InstallContext) -> bool:
    return all(ctx.path(target).exists() for _, target in CONFIG_STUBS)


def copy_config_files(ctx: InstallContext) -> None:
    for source, target in CONFIG_STUBS:
        copy_if_absent(ctx.stub(source), ctx.path(target))


# ============================================================================
# composer.json scripts
# ============================================================================


def composer_scripts_exist(ctx: InstallContext) -> bool:
    return has_scripts(ctx.path(COMPOSER_MANIFEST), list(COMPOSER_SCRIPTS))


def add_composer_scripts(ctx: InstallContext) -> None:
    manifest_path = ctx.path(COMPOSER_MANIFEST)
    manifest = read_manifest(manifest_path)
    added = add_missing_scripts(manifest, COMPOSER_SCRIPTS)
    if added:
        write_manifest(manifest_path, manifest)
        logger.debug(f"Added composer scripts: {', '.join(added)}")


# ============================================================================
# Packages
# ============================================================================


def install_composer_packages(ctx: InstallContext) -> None:
    with ctx.output.spin("Installing production packages..."):
        ctx.composer("require", *REQUIRE_PACKAGES)
    with ctx.output.spin("Installing development packages..."):
        ctx.composer("require", "--dev", *REQUIRE_DEV_PACKAGES)
    # Packages installed above must be visible to the publishing steps
    ctx.registry.refresh()


def install_npm_packages(ctx: InstallContext) -> None:
    with ctx.output.spin("Installing VitePress..."):
        ctx.npm("install", "-D", *NPM_DEV_PACKAGES)


# ============================================================================
# Pest
# ============================================================================


def pest_available(ctx: InstallContext) -> bool:
    if ctx.path(PEST_BINARY).exists():
        return True
    ctx.output.warning("Pest not found. Skipping migration.")
    return False


def pest_configured(ctx: InstallContext) -> bool:
    return ctx.path(PEST_CONFIG).exists()


def migrate_to_pest(ctx: InstallContext) -> None:
    pest_config = ctx.path(PEST_CONFIG)
    copy_if_absent(ctx.stub(PEST_CONFIG), pest_config)
    if not pest_config.exists():
        ctx.binary(PEST_BINARY, "--init")


# ============================================================================
# VitePress docs
# ============================================================================


def docs_confirmed(ctx: InstallContext) -> bool:
    return ctx.ask("Set up VitePress documentation site?", True)


def setup_docs_site(ctx: InstallContext) -> None:
    copy_tree_if_absent(ctx.stub(DOCS_STUB_DIR), ctx.path(DOCS_DIR))

    package_path = ctx.path(PACKAGE_MANIFEST)
    if package_path.exists():
        package = read_manifest(package_path)
        set_scripts(package, DOCS_SCRIPTS)
        write_manifest(package_path, package)


# ============================================================================
# Artisan publishing
# ============================================================================


def publish_assets(ctx: InstallContext) -> None:
    for integration, message, args in PUBLISHERS:
        if not ctx.registry.has(integration):
            logger.debug(f"{integration.value} not installed, skipping")
            continue
        with ctx.output.spin(message):
            ctx.artisan(*args)

    with ctx.output.spin("Running migrations..."):
        ctx.artisan("migrate")


def ide_helper_installed(ctx: InstallContext) -> bool:
    return ctx.registry.has(Integration.IDE_HELPER)


def generate_ide_helpers(ctx: InstallContext) -> None:
    with ctx.output.spin("Generating IDE helper files..."):
        ctx.artisan("ide-helper:generate")
    with ctx.output.spin("Generating IDE meta file..."):
        ctx.artisan("ide-helper:meta")


# ============================================================================
# Agent guidelines
# ============================================================================


def guidelines_exist(ctx: InstallContext) -> bool:
    return ctx.path(ctx.config.guidelines.file).exists()


def guidelines_patched(ctx: InstallContext) -> bool:
    _, applied = apply_patches(read_document(ctx.path(ctx.config.guidelines.file)))
    return not applied


def patch_guidelines(ctx: InstallContext) -> None:
    patch_document(ctx.path(ctx.config.guidelines.file))


INSTALL_STEPS: tuple[SetupStep, ...] = (
    SetupStep(
        name="directories",
        description="Creating directory structure...",
        action=create_directories,
        is_applied=directories_exist,
    ),
    SetupStep(
        name="config-files",
        description="Copying configuration files...",
        action=copy_config_files,
        is_applied=config_files_exist,
    ),
    SetupStep(
        name="composer-scripts",
        description="Adding Composer scripts...",
        action=add_composer_scripts,
        is_applied=composer_scripts_exist,
    ),
    SetupStep(
        name="composer-packages",
        description="Installing Composer packages...",
        action=install_composer_packages,
        skip_option="skip_packages",
    ),
    SetupStep(
        name="npm-packages",
        description="Installing NPM packages...",
        action=install_npm_packages,
        skip_option="skip_packages",
    ),
    SetupStep(
        name="pest",
        description="Configuring Pest...",
        action=migrate_to_pest,
        is_applied=pest_configured,
        enabled=pest_available,
        skip_option="skip_pest",
    ),
    SetupStep(
        name="docs-site",
        description="Setting up VitePress documentation...",
        action=setup_docs_site,
        enabled=docs_confirmed,
        skip_option="skip_docs",
    ),
    SetupStep(
        name="publish-assets",
        description="Publishing package assets...",
        action=publish_assets,
    ),
    SetupStep(
        name="ide-helpers",
        description="Generating IDE helpers...",
        action=generate_ide_helpers,
        enabled=ide_helper_installed,
    ),
    SetupStep(
        name="guidelines",
        description="Updating agent guidelines...",
        action=patch_guidelines,
        is_applied=guidelines_patched,
        enabled=guidelines_exist,
    ),
)
