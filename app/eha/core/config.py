"""User configuration.

Defaults for the hosts file path, the TTL of added names and the add policy
are read from ~/.config/eha/config.toml. A missing file means built-in
defaults; command-line options always take precedence.

Example config.toml::

    hosts_file = "/etc/hosts"
    ttl_minutes = 60
    replace_existing = true
"""

import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eha.core.errors import EhaError
from eha.core.hosts import HostsWriteError, write_atomic
from eha.core.paths import ensure_config_dir, get_config_path, get_default_hosts_path
from eha.models.request import DEFAULT_TTL_MINUTES, MAX_TTL_MINUTES, MIN_TTL_MINUTES


class EhaConfig(BaseModel):
    """Configuration for eha.

    Attributes:
        hosts_file: Hosts file to operate on.
        ttl_minutes: Default time-to-live for added names.
        replace_existing: Drop live entries with the same name when adding.
    """

    model_config = ConfigDict(extra="forbid")

    hosts_file: Path = Field(
        default_factory=get_default_hosts_path,
        description="Hosts file to operate on",
    )
    ttl_minutes: Annotated[
        int,
        Field(
            ge=MIN_TTL_MINUTES,
            le=MAX_TTL_MINUTES,
            description=f"Default TTL in minutes ({MIN_TTL_MINUTES}-{MAX_TTL_MINUTES})",
        ),
    ] = DEFAULT_TTL_MINUTES
    replace_existing: Annotated[
        bool,
        Field(description="Replace live entries with the same name on add"),
    ] = False


class ConfigError(EhaError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> EhaConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated EhaConfig. Built-in defaults if the file doesn't exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return EhaConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return EhaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: EhaConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file atomically.

    Args:
        config: The EhaConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
        config_path = get_config_path()
    else:
        config_path = path

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        write_atomic(config_path, tomli_w.dumps(_config_to_dict(config)))
    except (OSError, HostsWriteError) as e:
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path


def _config_to_dict(config: EhaConfig) -> dict[str, Any]:
    """Convert an EhaConfig to a dictionary suitable for TOML serialization."""
    return {
        "hosts_file": str(config.hosts_file),
        "ttl_minutes": config.ttl_minutes,
        "replace_existing": config.replace_existing,
    }
