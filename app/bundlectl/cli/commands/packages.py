"""Packages command implementation.

Prints the native packages configured for the build platform.
"""

import typer

from bundlectl.cli.types import require_config, require_platform
from bundlectl.core.config import get_package_list

app = typer.Typer(
    help="Print the native packages configured for this platform.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def packages(ctx: typer.Context) -> None:
    """Print configured packages as a single space-separated line.

    The output is meant for shell substitution in CI scripts.

    Examples:
        bundlectl packages
        bundlectl --platform debian packages
    """
    platform = require_platform(ctx)
    config = require_config(ctx)
    typer.echo(" ".join(get_package_list(config, platform)))
