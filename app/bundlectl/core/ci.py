"""Continuous integration helpers.

Reports GitHub Actions step outputs for caching the build prefix and
packs the prefix into a distribution tarball.
"""

import json
import logging
import os
from pathlib import Path

from bundlectl.core.paths import get_gha_prefix
from bundlectl.core.platform import Platform, is_github_action
from bundlectl.utils.formatting import console
from bundlectl.utils.shell import run_interactive_checked

logger = logging.getLogger(__name__)


def cache_outputs(platform: Platform) -> dict[str, str]:
    """Build the GitHub Actions outputs describing the cacheable prefix.

    Args:
        platform: Build platform.

    Returns:
        Mapping with ``paths`` (JSON-encoded, newline-joined path list)
        and ``prefix``.
    """
    prefix = get_gha_prefix(platform).as_posix()
    paths = [prefix]
    return {
        "paths": json.dumps("\n".join(paths)),
        "prefix": prefix,
    }


def write_outputs(outputs: dict[str, str]) -> None:
    """Publish step outputs.

    Appends ``name=value`` lines to the file named by ``$GITHUB_OUTPUT``
    when it is set, otherwise prints them.

    Args:
        outputs: Output names and single-line values.

    Raises:
        OSError: If the output file cannot be written.
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    lines = [f"{name}={value}" for name, value in outputs.items()]

    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        logger.debug("Wrote %d outputs to %s", len(lines), output_file)
        return

    for line in lines:
        console.print(line, markup=False, highlight=False)


def create_dist_tarball(prefix: Path, cwd: Path | None = None) -> Path:
    """Pack the build prefix into ``<basename>.tbz2``.

    The archive is created in ``cwd`` and contains the prefix directory
    itself as its single top-level entry.

    Args:
        prefix: Build prefix to archive.
        cwd: Directory to write the archive into. Defaults to the current directory.

    Returns:
        Path to the created tarball.

    Raises:
        CommandError: If tar fails.
        ToolNotFoundError: If tar is not installed.
    """
    prefix = prefix.resolve()
    work_dir = cwd or Path.cwd()
    tarball_name = f"{prefix.name}.tbz2"

    run_interactive_checked(
        ["tar", "cjvf", tarball_name, "-C", str(prefix.parent), prefix.name],
        cwd=str(work_dir),
    )

    if is_github_action():
        write_outputs({"dist-tarball-file": tarball_name})

    return work_dir / tarball_name
