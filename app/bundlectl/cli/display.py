"""Shared Rich display functions for plans and copy results.

Provides reusable table builders and summary printers used by the
`deps`, `plan` and `bundle` CLI commands.
"""

from rich.markup import escape
from rich.table import Table

from bundlectl.models.plan import ClosureResult, CopyReport
from bundlectl.utils.formatting import console, print_success, print_warning


def create_plan_table(result: ClosureResult, limit: int | None = None) -> Table:
    """Create a Rich table displaying a copy plan.

    Args:
        result: Closure result to display.
        limit: Show at most this many entries.

    Returns:
        Rich Table configured for plan display.
    """
    table = Table(
        title="Copy Plan",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Package", no_wrap=True, style="package.name")
    table.add_column("Source", style="muted")
    table.add_column("Destination", style="info")

    entries = list(result.plan)
    if limit is not None:
        entries = entries[:limit]

    for entry in entries:
        table.add_row(escape(entry.package), escape(entry.source), escape(entry.destination))

    return table


def create_deps_table(deps: dict[str, list[str]], direct: bool) -> Table:
    """Create a Rich table displaying dependency listings.

    Args:
        deps: Mapping of package name to its dependencies.
        direct: Whether the listing holds direct dependencies only.

    Returns:
        Rich Table configured for dependency display.
    """
    title = "Direct Dependencies" if direct else "Dependency Closure"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Package", no_wrap=True, style="package.name")
    table.add_column("Count", justify="right", style="info")
    table.add_column("Dependencies", style="text")

    for package, names in deps.items():
        table.add_row(escape(package), str(len(names)), escape(" ".join(names)) or "-")

    return table


def print_closure_summary(result: ClosureResult) -> None:
    """Print package and file counts for a closure, warning about pruning.

    Args:
        result: Closure result to summarize.
    """
    console.print(
        f"[info]Packages:[/] {len(result.processed)}  "
        f"[info]Files:[/] {len(result.plan)}  "
        f"[pruned]Empty:[/] {len(result.pruned)}"
    )
    if result.pruned:
        print_warning(f"No files selected from: {', '.join(result.pruned)}")


def print_copy_summary(report: CopyReport, dry_run: bool = False) -> None:
    """Print the outcome of a copy run.

    Args:
        report: Copy report to summarize.
        dry_run: Whether the run only simulated copies.
    """
    verb = "Would copy" if dry_run else "Copied"
    console.print(
        f"[copied]{verb}:[/] {len(report.copied)}  "
        f"[skipped]Already present:[/] {len(report.skipped)}"
    )
    if not dry_run:
        print_success(f"Payload complete: {report.total} files in place.")
