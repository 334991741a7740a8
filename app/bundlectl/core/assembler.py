"""Payload assembly orchestration.

Wires a package manager, a manifest resolver and the platform's filter
rules into a ClosureWalker, then executes the resulting copy plan. These
functions are shared between the `plan` and `bundle` CLI commands.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from bundlectl.core.closure import ClosureWalker
from bundlectl.core.copier import execute_copy_plan
from bundlectl.core.errors import ToolNotFoundError
from bundlectl.core.resolver import (
    DirectManifestResolver,
    IndexedManifestResolver,
    ManifestResolver,
)

if TYPE_CHECKING:
    from bundlectl.managers.base import PackageManager
    from bundlectl.models.config import PlatformConfig
    from bundlectl.models.plan import ClosureResult, CopyReport

logger = logging.getLogger(__name__)


def build_resolver(manager: PackageManager, *, use_index: bool) -> ManifestResolver:
    """Choose the manifest resolution strategy.

    Args:
        manager: Package manager for the build platform.
        use_index: Resolve through the platform's file index.

    Returns:
        ManifestResolver instance.

    Raises:
        ToolNotFoundError: If an index is requested but the platform has none.
    """
    if not use_index:
        return DirectManifestResolver(manager)

    index = manager.file_index()
    if index is None:
        msg = f"No file index is available on {manager.platform.value}"
        raise ToolNotFoundError(msg)
    return IndexedManifestResolver(index)


def build_walker(
    manager: PackageManager,
    config: PlatformConfig,
    *,
    use_index: bool | None = None,
) -> ClosureWalker:
    """Create a ClosureWalker configured for a platform.

    Args:
        manager: Package manager for the build platform.
        config: Platform configuration (filters, prefix stripping, pruning).
        use_index: Override the configured ``use_file_index`` setting.

    Returns:
        Configured ClosureWalker.
    """
    if use_index is None:
        use_index = config.use_file_index

    return ClosureWalker(
        manager,
        build_resolver(manager, use_index=use_index),
        config.filters,
        prune_empty=config.prune_empty,
        strip_prefix=config.strip_prefix,
    )


def compute_plan(
    manager: PackageManager,
    config: PlatformConfig,
    seeds: Sequence[str] | None = None,
    *,
    use_index: bool | None = None,
) -> ClosureResult:
    """Compute the payload closure for a platform.

    Args:
        manager: Package manager for the build platform.
        config: Platform configuration.
        seeds: Seed packages. Defaults to the configured seeds.
        use_index: Override the configured ``use_file_index`` setting.

    Returns:
        ClosureResult for the seeds.

    Raises:
        ToolNotFoundError: If a required tool is missing.
        CommandError: If a package query fails.
        ParseError: If a package query returns malformed output.
    """
    manager.ensure_available()
    walker = build_walker(manager, config, use_index=use_index)
    effective = list(seeds) if seeds else config.effective_seeds
    logger.info("Computing closure of %s", ", ".join(effective) or "(no seeds)")
    return walker.compute(effective)


def assemble_payload(
    manager: PackageManager,
    config: PlatformConfig,
    prefix: Path,
    seeds: Sequence[str] | None = None,
    *,
    use_index: bool | None = None,
    dry_run: bool = False,
) -> tuple[ClosureResult, CopyReport]:
    """Compute the payload closure and copy it into ``prefix``.

    Args:
        manager: Package manager for the build platform.
        config: Platform configuration.
        prefix: Installation prefix to copy into.
        seeds: Seed packages. Defaults to the configured seeds.
        use_index: Override the configured ``use_file_index`` setting.
        dry_run: Only log what would be copied.

    Returns:
        Tuple of (ClosureResult, CopyReport).

    Raises:
        BundleError: On the first failing query or copy.
    """
    result = compute_plan(manager, config, seeds, use_index=use_index)
    source_root = manager.source_root()
    logger.info("Copying %d files from %s into %s", len(result.plan), source_root, prefix)
    report = execute_copy_plan(result.plan, source_root, prefix, dry_run=dry_run)
    return result, report
