"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from bundlectl import __version__
from bundlectl.cli.commands import bundle, ci, deps, init, install, packages, plan
from bundlectl.core.platform import Platform
from bundlectl.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="bundlectl",
    help="Assemble minimal runtime payloads for installer builds.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bundlectl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log warnings and errors.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file (default: ./bundle.toml or $BUNDLECTL_CONFIG).",
        ),
    ] = None,
    platform: Annotated[
        Platform | None,
        typer.Option(
            "--platform",
            "-P",
            help="Build platform (default: detected).",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """bundlectl - Dependency closure and payload assembly.

    Walks the native package manager's dependency graph from a set of
    seed packages and copies the filtered runtime files into an
    installation prefix.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path
    ctx.obj["platform"] = platform


# Register commands
app.add_typer(packages.app, name="packages")
app.add_typer(install.app, name="install")
app.add_typer(deps.app, name="deps")
app.add_typer(plan.app, name="plan")
app.add_typer(bundle.app, name="bundle")
app.add_typer(init.app, name="init")
app.add_typer(ci.app, name="ci")


if __name__ == "__main__":
    app()
