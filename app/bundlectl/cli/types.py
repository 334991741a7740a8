"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from bundlectl.core.config import ConfigError, ConfigNotFoundError, load_config
from bundlectl.core.errors import UnsupportedPlatformError
from bundlectl.core.platform import Platform, detect_platform
from bundlectl.models.config import BundleConfig, PlatformConfig
from bundlectl.utils.formatting import print_error, print_info


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def _options(ctx: typer.Context) -> dict[str, object]:
    return ctx.obj if isinstance(ctx.obj, dict) else {}


def require_platform(ctx: typer.Context) -> Platform:
    """Get the build platform or exit with an error.

    Uses the global ``--platform`` option when given, otherwise detects
    the host platform.

    Args:
        ctx: Typer context carrying global options.

    Returns:
        The build Platform.

    Raises:
        typer.Exit: If the host is not a supported platform.
    """
    override = _options(ctx).get("platform")
    if isinstance(override, Platform):
        return override

    try:
        return detect_platform()
    except UnsupportedPlatformError as e:
        print_error(str(e))
        print_info("Use --platform to select debian, macos-homebrew or msys2-mingw64.")
        raise typer.Exit(code=1) from e


def get_config_option(ctx: typer.Context) -> Path | None:
    """Get the global ``--config`` option, if set."""
    path = _options(ctx).get("config_path")
    return path if isinstance(path, Path) else None


def require_config(ctx: typer.Context) -> BundleConfig:
    """Load the configuration or exit with a helpful error message.

    Args:
        ctx: Typer context carrying global options.

    Returns:
        Loaded and validated BundleConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    try:
        return load_config(get_config_option(ctx))
    except ConfigNotFoundError as e:
        print_error(str(e))
        print_info("Run 'bundlectl init' to create a starter configuration.")
        raise typer.Exit(code=1) from e
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def require_platform_config(ctx: typer.Context) -> tuple[Platform, PlatformConfig]:
    """Resolve the build platform and its configuration section.

    Args:
        ctx: Typer context carrying global options.

    Returns:
        Tuple of (Platform, PlatformConfig).

    Raises:
        typer.Exit: If the platform or configuration cannot be resolved.
    """
    platform = require_platform(ctx)
    config = require_config(ctx)
    return platform, config.for_platform(platform)
