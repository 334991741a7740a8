"""Dependency closure walker.

Walks the runtime dependency graph breadth-first from a set of seed
packages, filtering each package's manifest and accumulating the files
to copy into a CopyPlan.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from bundlectl.core.filters import apply_filters
from bundlectl.models.plan import ClosureResult, CopyEntry

if TYPE_CHECKING:
    from bundlectl.core.resolver import ManifestResolver
    from bundlectl.managers.base import PackageManager
    from bundlectl.models.config import FilterRule

logger = logging.getLogger(__name__)


class ClosureWalker:
    """Computes the payload copy plan for a set of seed packages.

    Each package is processed at most once per ``compute()`` call; it is
    marked processed before its dependencies are queried, which keeps the
    walk finite on cyclic graphs.

    With ``prune_empty`` enabled (the default), a package whose filtered
    manifest is empty is treated as a leaf: its dependencies are not
    enqueued. Packages that install nothing are leaves in practice, but a
    filter that is too broad will prune the subtree below it, so every
    pruned package is logged and reported in the result.

    Example:
        >>> walker = ClosureWalker(manager, DirectManifestResolver(manager), rules)
        >>> result = walker.compute(["mingw-w64-x86_64-gtk3"])
        >>> for entry in result.plan:
        ...     print(entry.source, "->", entry.destination)
    """

    def __init__(
        self,
        manager: PackageManager,
        resolver: ManifestResolver,
        rules: Sequence[FilterRule] = (),
        *,
        prune_empty: bool = True,
        strip_prefix: str = "",
    ) -> None:
        """Initialize the walker.

        Args:
            manager: Source of direct dependency queries.
            resolver: Source of raw file manifests.
            rules: Filter rules applied to every manifest.
            prune_empty: Skip the dependencies of packages with no files left.
            strip_prefix: Leading path removed from manifest paths to form
                destination paths.
        """
        self._manager = manager
        self._resolver = resolver
        self._rules = list(rules)
        self._prune_empty = prune_empty
        self._strip_prefix = strip_prefix.rstrip("/")

    def compute(self, seeds: Iterable[str]) -> ClosureResult:
        """Walk the closure of ``seeds`` and build the copy plan.

        Args:
            seeds: Seed package names. Duplicates are ignored.

        Returns:
            ClosureResult with the plan, visit order and pruned packages.

        Raises:
            CommandError: If a package query fails.
            ParseError: If a package query returns malformed output.
        """
        result = ClosureResult()
        processed: set[str] = set()
        worklist: deque[str] = deque(dict.fromkeys(seeds))

        while worklist:
            package = worklist.popleft()
            if package in processed:
                continue
            processed.add(package)
            result.processed.append(package)

            raw = self._resolver.resolve(package)
            files = apply_filters(package, raw, self._rules)

            if files:
                for path in files:
                    entry = CopyEntry(
                        package=package,
                        source=path,
                        destination=self.destination_for(path),
                    )
                    result.plan.add(entry)
            else:
                result.pruned.append(package)
                if self._prune_empty:
                    logger.info("No files to install from %s, not descending", package)
                    continue
                logger.info("No files to install from %s", package)

            for dep in self._manager.dependencies(package, direct=True):
                if dep != package and dep not in processed:
                    worklist.append(dep)

        logger.info(
            "Closure: %d packages, %d files, %d pruned",
            len(result.processed),
            len(result.plan),
            len(result.pruned),
        )
        return result

    def destination_for(self, path: str) -> str:
        """Map a manifest path to a path relative to the install prefix.

        Args:
            path: Absolute manifest path.

        Returns:
            ``path`` without ``strip_prefix`` and without its leading slash.
        """
        prefix = self._strip_prefix
        if prefix and path.startswith(prefix + "/"):
            path = path[len(prefix) :]
        return path.lstrip("/")
