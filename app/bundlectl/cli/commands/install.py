"""Install command implementation.

Installs the configured native packages with the platform's package manager.
"""

from typing import Annotated

import typer

from bundlectl.cli.types import require_platform_config
from bundlectl.core.errors import BundleError
from bundlectl.managers import get_manager
from bundlectl.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Install the configured native packages.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def install(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show the install command without running it.",
        ),
    ] = False,
) -> None:
    """Install every package listed for this platform.

    Examples:
        bundlectl install
        bundlectl install --dry-run
    """
    platform, config = require_platform_config(ctx)

    if not config.packages:
        print_info(f"No packages configured for {platform.value}.")
        return

    manager = get_manager(platform, dry_run=dry_run)
    try:
        manager.install(config.packages)
    except BundleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if dry_run:
        print_info(f"Dry run: {len(config.packages)} packages would be installed.")
    else:
        print_success(f"Installed {len(config.packages)} packages.")
