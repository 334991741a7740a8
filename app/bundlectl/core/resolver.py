"""File-manifest resolvers.

Two interchangeable strategies return the same shape (a list of
absolute file paths) for a package: a direct package-database query,
or a lookup in a prebuilt file index.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bundlectl.managers.base import PackageManager
    from bundlectl.managers.index import FileIndex

logger = logging.getLogger(__name__)


class ManifestResolver(ABC):
    """Resolves the raw file manifest of a package."""

    @abstractmethod
    def resolve(self, package: str) -> list[str]:
        """Return the absolute file paths owned by a package.

        Raises:
            CommandError: If the underlying query fails.
            ParseError: If the query output cannot be parsed.
        """


class DirectManifestResolver(ManifestResolver):
    """Queries the package database for each package."""

    def __init__(self, manager: PackageManager) -> None:
        self._manager = manager

    def resolve(self, package: str) -> list[str]:
        files = self._manager.list_files(package)
        logger.debug("%s owns %d files", package, len(files))
        return files


class IndexedManifestResolver(ManifestResolver):
    """Looks packages up in a file index.

    The index is prepared on the first lookup and reused afterwards.
    """

    def __init__(self, index: FileIndex) -> None:
        self._index = index

    def resolve(self, package: str) -> list[str]:
        files = self._index.list_files(package)
        logger.debug("%s owns %d files (indexed)", package, len(files))
        return files
