"""Path management for bundlectl.

Covers the project configuration document, the build prefix the payload
is assembled into, and the XDG user configuration directory.

Defaults:
- Config: ./bundle.toml (or $BUNDLECTL_CONFIG)
- Prefix: GitHub Actions runner prefix, else $BUNDLECTL_PREFIX, else ./build
- User config: ~/.config/bundlectl/
"""

import os
from pathlib import Path

from bundlectl.core.platform import Platform, is_github_action

# Application identifier for directory naming
APP_NAME = "bundlectl"

CONFIG_FILENAME = "bundle.toml"

# Build prefixes used on GitHub Actions runners, kept short on Windows
# to stay clear of MAX_PATH.
GHA_PREFIXES: dict[Platform, str] = {
    Platform.DEBIAN: "/home/runner/build",
    Platform.MACOS_HOMEBREW: "/Users/runner/build",
    Platform.MSYS2_MINGW64: "c:/cx",
}


def get_user_config_dir() -> Path:
    """Get the user configuration directory path.

    Returns:
        Path to ~/.config/bundlectl/ (or XDG_CONFIG_HOME/bundlectl/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the project configuration document path.

    Returns:
        Path from $BUNDLECTL_CONFIG, or ./bundle.toml.
    """
    override = os.environ.get("BUNDLECTL_CONFIG")
    if override:
        return Path(override)
    return Path.cwd() / CONFIG_FILENAME


def get_gha_prefix(platform: Platform) -> Path:
    """Get the build prefix used on GitHub Actions runners.

    Args:
        platform: Build platform.

    Returns:
        Runner-specific prefix path.
    """
    return Path(GHA_PREFIXES[platform])


def get_prefix(platform: Platform) -> Path:
    """Get the installation prefix the payload is assembled into.

    Args:
        platform: Build platform.

    Returns:
        The GHA prefix under GitHub Actions, else $BUNDLECTL_PREFIX,
        else ./build.
    """
    if is_github_action():
        return get_gha_prefix(platform)

    override = os.environ.get("BUNDLECTL_PREFIX")
    if override:
        return Path(override)
    return Path.cwd() / "build"
