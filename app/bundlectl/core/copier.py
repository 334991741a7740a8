"""Copy plan execution.

Copies planned payload files from the package manager's install root
into the installation prefix. Destinations that already exist as
readable regular files are left alone, so re-running a build only
copies what is missing.
"""

import logging
import os
import shutil
from pathlib import Path

from bundlectl.core.errors import CopyError
from bundlectl.models.plan import CopyEntry, CopyPlan, CopyReport

logger = logging.getLogger(__name__)


def resolve_entry(entry: CopyEntry, source_root: Path, dest_root: Path) -> tuple[Path, Path]:
    """Resolve an entry to absolute source and destination paths.

    Args:
        entry: Plan entry.
        source_root: Root that manifest paths are relative to.
        dest_root: Installation prefix.

    Returns:
        Tuple of (source, destination) paths.
    """
    return source_root / entry.source.lstrip("/"), dest_root / entry.destination


def is_present(path: Path) -> bool:
    """Check if a destination already exists as a readable regular file."""
    return path.is_file() and os.access(path, os.R_OK)


def execute_copy_plan(
    plan: CopyPlan,
    source_root: Path,
    dest_root: Path,
    *,
    dry_run: bool = False,
) -> CopyReport:
    """Copy every planned file that is not already present.

    Args:
        plan: Files to copy.
        source_root: Root that manifest paths are relative to.
        dest_root: Installation prefix.
        dry_run: If True, only log what would be copied.

    Returns:
        CopyReport of copied and skipped entries.

    Raises:
        CopyError: On the first directory or file that cannot be written.
    """
    report = CopyReport()

    for entry in plan:
        source, destination = resolve_entry(entry, source_root, dest_root)

        if is_present(destination):
            logger.debug("Already present: %s", destination)
            report.skipped.append(entry)
            continue

        if dry_run:
            logger.info("Would copy %s -> %s", source, destination)
            report.copied.append(entry)
            continue

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CopyError(str(source), str(destination), f"cannot create directory: {e}") from e

        try:
            shutil.copy2(source, destination)
        except OSError as e:
            raise CopyError(str(source), str(destination), str(e)) from e

        logger.info("Copied %s -> %s", source, destination)
        report.copied.append(entry)

    return report
