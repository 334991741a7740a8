"""CI helper commands.

Provides the `bundlectl ci` subcommands used by GitHub Actions
workflows: cache outputs for the build prefix and the distribution
tarball.
"""

from pathlib import Path
from typing import Annotated

import typer

from bundlectl.cli.types import require_platform
from bundlectl.core.ci import cache_outputs, create_dist_tarball, write_outputs
from bundlectl.core.errors import BundleError
from bundlectl.core.paths import get_prefix
from bundlectl.utils.formatting import print_error, print_success

app = typer.Typer(
    help="Continuous integration helpers.",
    no_args_is_help=True,
)


@app.command("cache-output")
def cache_output(ctx: typer.Context) -> None:
    """Publish the cache ``paths`` and ``prefix`` step outputs.

    Outputs are appended to $GITHUB_OUTPUT when set, otherwise printed.
    """
    platform = require_platform(ctx)
    try:
        write_outputs(cache_outputs(platform))
    except OSError as e:
        print_error(f"Failed to write outputs: {e}")
        raise typer.Exit(code=1) from e


@app.command("dist-tarball")
def dist_tarball(
    ctx: typer.Context,
    prefix: Annotated[
        Path | None,
        typer.Option(
            "--prefix",
            help="Build prefix to archive (default: ./build, or the CI runner prefix).",
        ),
    ] = None,
) -> None:
    """Pack the build prefix into <prefix-name>.tbz2 in the current directory."""
    target = prefix or get_prefix(require_platform(ctx))

    if not target.is_dir():
        print_error(f"Build prefix does not exist: {target}")
        raise typer.Exit(code=1)

    try:
        tarball = create_dist_tarball(target)
    except (BundleError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Created {tarball}")
