"""XDG-compliant path management for tmexclude.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage, plus the scan root and the
built-in skip paths.

XDG defaults:
- Config: ~/.config/tmexclude/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "tmexclude"

# Home-relative paths that are never traversed.
# ~/.Trash holds deleted items, ~/Library is managed by macOS itself.
_DEFAULT_SKIP_TARGETS: tuple[str, ...] = (
    ".Trash",
    "Library",
)


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
        Path to ~/.config/tmexclude/ (or XDG_CONFIG_HOME/tmexclude/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_rules_path() -> Path:
    """Get the rule file path.

    Returns:
        Path to ~/.config/tmexclude/rules.conf.
    """
    return get_config_dir() / "rules.conf"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/tmexclude/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_scan_root() -> Path:
    """Get the default directory tree to scan (the user's home)."""
    return Path.home()


def get_default_skip_paths() -> tuple[Path, ...]:
    """Get the built-in skip paths.

    Returns:
        Absolute paths under the home directory that are never traversed.
    """
    home = Path.home()
    return tuple(home / target for target in _DEFAULT_SKIP_TARGETS)


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_config_dir(), "config")
