"""Configuration management for the starter installer."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .constants import PACKAGE_INSTALL_TIMEOUT
from .errors import ConfigError

CONFIG_FILENAME = "starter.toml"


class ToolsConfig(BaseModel):
    """Executables used for external commands."""

    php: str = "php"
    composer: str = "composer"
    npm: str = "npm"


class ProcessConfig(BaseModel):
    """Subprocess settings."""

    timeout: int = Field(default=PACKAGE_INSTALL_TIMEOUT, gt=0, description="Seconds per command")


class GuidelinesConfig(BaseModel):
    """Agent guidelines document patched at the end of the install."""

    file: str = "CLAUDE.md"


class StarterConfig(BaseModel):
    """Root configuration for the installer."""

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    process: ProcessConfig = Field(default_factory=ProcessConfig)
    guidelines: GuidelinesConfig = Field(default_factory=GuidelinesConfig)


def load_config(project_root: Path) -> StarterConfig:
    """Load config from starter.toml in the project root.

    Args:
        project_root: Path to the Laravel project

    Returns:
        Loaded configuration, or defaults if starter.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return StarterConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return StarterConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
