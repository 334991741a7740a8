"""Init command implementation.

Creates a starter bundle.toml for the build platform.
"""

from typing import Annotated

import typer

from bundlectl.cli.types import get_config_option, require_platform
from bundlectl.core.config import ConfigError, save_config
from bundlectl.core.paths import get_config_path
from bundlectl.core.platform import Platform
from bundlectl.models.config import BundleConfig, FilterRule, PlatformConfig
from bundlectl.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Create a starter configuration for this platform.",
    invoke_without_command=True,
)

# Starter filters dropping build-time files that never belong in a payload.
_STARTER_FILTERS: dict[Platform, list[FilterRule]] = {
    Platform.MSYS2_MINGW64: [
        FilterRule(package=".", files=[r"\.a$", r"/include/", r"/share/(doc|man|info)/"]),
    ],
    Platform.DEBIAN: [
        FilterRule(package=".", files=[r"^/usr/share/(doc|man|info|lintian)/"]),
    ],
    Platform.MACOS_HOMEBREW: [
        FilterRule(package=".", files=[r"\.a$", r"/include/", r"/share/(doc|man|info)/"]),
    ],
}

_STARTER_STRIP_PREFIX: dict[Platform, str] = {
    Platform.MSYS2_MINGW64: "/mingw64",
}


def _starter_config(platform: Platform) -> BundleConfig:
    return BundleConfig(
        native={
            platform: PlatformConfig(
                packages=[],
                filters=_STARTER_FILTERS[platform],
                strip_prefix=_STARTER_STRIP_PREFIX.get(platform, ""),
            )
        }
    )


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing configuration.",
        ),
    ] = False,
) -> None:
    """Write a starter bundle.toml with default filters for this platform.

    Examples:
        bundlectl init
        bundlectl --platform msys2-mingw64 init --force
    """
    platform = require_platform(ctx)
    path = get_config_option(ctx) or get_config_path()

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(_starter_config(platform), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Created {saved} for {platform.value}")
    print_info("Add the packages to install and bundle under 'packages'.")
