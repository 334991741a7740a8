"""Build platform detection.

bundlectl supports three build hosts, each tied to one native package
manager: Debian (apt/dpkg), macOS (Homebrew) and MSYS2 MinGW64 (pacman).
"""

import logging
import os
import sys
from enum import Enum
from pathlib import Path

from bundlectl.core.errors import UnsupportedPlatformError

logger = logging.getLogger(__name__)

DEBIAN_VERSION_FILE = Path("/etc/debian_version")

# sys.platform values reported by Python builds running under MSYS2.
_WINDOWS_PLATFORMS = ("win32", "cygwin", "msys")


class Platform(str, Enum):
    """Supported build platforms."""

    DEBIAN = "debian"
    MACOS_HOMEBREW = "macos-homebrew"
    MSYS2_MINGW64 = "msys2-mingw64"


def is_debian() -> bool:
    """Check if running on a Debian-based Linux host."""
    return sys.platform.startswith("linux") and DEBIAN_VERSION_FILE.is_file()


def is_macos() -> bool:
    """Check if running on macOS."""
    return sys.platform == "darwin"


def is_msys2_mingw() -> bool:
    """Check if running inside an MSYS2 environment on Windows."""
    return sys.platform in _WINDOWS_PLATFORMS and "MSYSTEM" in os.environ


def is_github_action() -> bool:
    """Check if running inside a GitHub Actions job."""
    return "GITHUB_ACTIONS" in os.environ


def detect_platform() -> Platform:
    """Detect the current build platform.

    Returns:
        The Platform of this host.

    Raises:
        UnsupportedPlatformError: If the host is not a supported platform.
    """
    if is_debian():
        platform = Platform.DEBIAN
    elif is_macos():
        platform = Platform.MACOS_HOMEBREW
    elif is_msys2_mingw():
        platform = Platform.MSYS2_MINGW64
    else:
        msg = f"Unknown platform: {sys.platform}"
        raise UnsupportedPlatformError(msg)

    logger.debug("Detected platform: %s", platform.value)
    return platform
