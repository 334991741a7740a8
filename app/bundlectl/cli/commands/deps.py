"""Deps command implementation.

Lists the runtime dependencies of packages as reported by the
platform's package manager.
"""

import json
from typing import Annotated

import typer

from bundlectl.cli.display import create_deps_table
from bundlectl.cli.types import OutputFormat, require_platform, require_platform_config
from bundlectl.core.errors import BundleError
from bundlectl.managers import get_manager
from bundlectl.utils.formatting import console, print_error

app = typer.Typer(
    help="List package dependencies.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def deps(
    ctx: typer.Context,
    package: Annotated[
        list[str] | None,
        typer.Option(
            "--package",
            "-p",
            help="Package to query (repeatable). Defaults to the configured seeds.",
        ),
    ] = None,
    direct: Annotated[
        bool,
        typer.Option(
            "--direct",
            "-d",
            help="Only list direct dependencies instead of the full closure.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the dependencies of packages.

    Examples:
        bundlectl deps                          # Closure of configured seeds
        bundlectl deps -p mingw-w64-x86_64-gtk3 # Closure of one package
        bundlectl deps -p libgtk-3-0 --direct   # Direct dependencies only
        bundlectl deps --format json
    """
    if package:
        platform = require_platform(ctx)
        packages = list(package)
    else:
        platform, config = require_platform_config(ctx)
        packages = config.effective_seeds

    manager = get_manager(platform)
    results: dict[str, list[str]] = {}
    try:
        manager.ensure_available()
        for name in packages:
            results[name] = manager.dependencies(name, direct=direct)
    except BundleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(results))
        return

    console.print(create_deps_table(results, direct))
