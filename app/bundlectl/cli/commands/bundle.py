"""Bundle command implementation.

Computes the payload copy plan and copies it into the build prefix.
"""

from pathlib import Path
from typing import Annotated

import typer

from bundlectl.cli.display import print_closure_summary, print_copy_summary
from bundlectl.cli.types import require_platform_config
from bundlectl.core.assembler import assemble_payload
from bundlectl.core.errors import BundleError
from bundlectl.core.paths import get_prefix
from bundlectl.managers import get_manager
from bundlectl.utils.formatting import print_error, print_info

app = typer.Typer(
    help="Assemble the runtime payload into the build prefix.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def bundle(
    ctx: typer.Context,
    seed: Annotated[
        list[str] | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed package (repeatable). Defaults to the configured seeds.",
        ),
    ] = None,
    prefix: Annotated[
        Path | None,
        typer.Option(
            "--prefix",
            help="Installation prefix (default: ./build, or the CI runner prefix).",
        ),
    ] = None,
    use_index: Annotated[
        bool | None,
        typer.Option(
            "--index/--no-index",
            help="Resolve manifests via the file index (default: from config).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be copied without copying.",
        ),
    ] = False,
) -> None:
    """Copy the dependency closure of the seeds into the prefix.

    Files already present in the prefix are not copied again, so the
    command can be re-run after a partial build.

    Examples:
        bundlectl bundle
        bundlectl bundle --prefix /tmp/payload --dry-run
        bundlectl bundle --seed mingw-w64-x86_64-gtk3 --index
    """
    platform, config = require_platform_config(ctx)
    manager = get_manager(platform, dry_run=dry_run)
    target = prefix or get_prefix(platform)

    print_info(f"Assembling {platform.value} payload into {target}")
    try:
        result, report = assemble_payload(
            manager,
            config,
            target,
            seed,
            use_index=use_index,
            dry_run=dry_run,
        )
    except BundleError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_closure_summary(result)
    print_copy_summary(report, dry_run=dry_run)
