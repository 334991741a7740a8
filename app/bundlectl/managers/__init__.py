"""Native package manager adapters.

This module exports the manager classes and a factory selecting the
adapter for a build platform.
"""

from bundlectl.core.platform import Platform
from bundlectl.managers.apt import AptManager
from bundlectl.managers.base import PackageManager
from bundlectl.managers.brew import BrewManager
from bundlectl.managers.index import AptFileIndex, FileIndex, PkgfileIndex
from bundlectl.managers.pacman import PacmanManager

_MANAGERS: dict[Platform, type[PackageManager]] = {
    Platform.DEBIAN: AptManager,
    Platform.MACOS_HOMEBREW: BrewManager,
    Platform.MSYS2_MINGW64: PacmanManager,
}


def get_manager(platform: Platform, dry_run: bool = False) -> PackageManager:
    """Get the package manager adapter for a platform.

    Args:
        platform: Build platform.
        dry_run: Whether installs should only be logged.

    Returns:
        PackageManager instance for the platform.
    """
    return _MANAGERS[platform](dry_run=dry_run)


__all__ = [
    "AptFileIndex",
    "AptManager",
    "BrewManager",
    "FileIndex",
    "PackageManager",
    "PacmanManager",
    "PkgfileIndex",
    "get_manager",
]
