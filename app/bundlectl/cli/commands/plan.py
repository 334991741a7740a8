"""Plan command implementation.

Computes the payload copy plan without copying anything.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from bundlectl.cli.display import create_plan_table, print_closure_summary
from bundlectl.cli.types import OutputFormat, require_platform_config
from bundlectl.core.assembler import compute_plan
from bundlectl.core.errors import BundleError
from bundlectl.managers import get_manager
from bundlectl.utils.formatting import console, print_error, print_info

app = typer.Typer(
    help="Compute the payload copy plan.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def plan(
    ctx: typer.Context,
    seed: Annotated[
        list[str] | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed package (repeatable). Defaults to the configured seeds.",
        ),
    ] = None,
    use_index: Annotated[
        bool | None,
        typer.Option(
            "--index/--no-index",
            help="Resolve manifests via the file index (default: from config).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Limit number of plan entries to display.",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the plan to a JSON file.",
        ),
    ] = None,
) -> None:
    """Walk the dependency closure and show the files that would be copied.

    Examples:
        bundlectl plan
        bundlectl plan --seed mingw-w64-x86_64-gtk3 --index
        bundlectl plan --format json
        bundlectl plan --export plan.json
    """
    platform, config = require_platform_config(ctx)
    manager = get_manager(platform)

    try:
        result = compute_plan(manager, config, seed, use_index=use_index)
    except BundleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if export_path is not None:
        export_path = export_path.resolve()
        if export_path.is_dir():
            print_error(f"Export path is a directory: {export_path}")
            raise typer.Exit(code=1)
        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(json.dumps(result.to_dict(), indent=2))
        except OSError as e:
            print_error(f"Failed to export: {e}")
            raise typer.Exit(code=1) from e
        print_info(f"Plan exported to {export_path}")

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict()))
        return

    console.print(create_plan_table(result, limit))
    print_closure_summary(result)
