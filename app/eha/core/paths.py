"""Path management for eha.

Provides the default hosts file location for the current platform and the
XDG-compliant configuration paths.

XDG defaults:
- Config: ~/.config/eha/
"""

import os
import sys
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "eha"

POSIX_HOSTS_PATH = Path("/etc/hosts")


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/eha/ (or XDG_CONFIG_HOME/eha/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/eha/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_hosts_path() -> Path:
    """Get the operating system's hosts file path.

    Returns:
        /etc/hosts on POSIX systems, or
        %SystemRoot%\\System32\\drivers\\etc\\hosts on Windows.
    """
    if sys.platform == "win32":
        system_root = os.environ.get("SystemRoot", r"C:\Windows")
        return Path(system_root) / "System32" / "drivers" / "etc" / "hosts"
    return POSIX_HOSTS_PATH


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
