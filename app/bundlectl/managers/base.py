"""Abstract base class for native package managers.

This module defines the PackageManager interface that every platform
adapter must implement: dependency queries, file manifests and package
installation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from bundlectl.core.errors import ToolNotFoundError
from bundlectl.utils.shell import command_exists

if TYPE_CHECKING:
    from bundlectl.core.platform import Platform
    from bundlectl.managers.index import FileIndex

logger = logging.getLogger(__name__)


class PackageManager(ABC):
    """Abstract base class for all native package managers.

    Every query runs a blocking subprocess and raises on failure;
    nothing is retried.

    Attributes:
        dry_run: If True, installs are logged but not executed.

    Example:
        >>> manager = PacmanManager()
        >>> manager.ensure_available()
        >>> for dep in manager.dependencies("mingw-w64-x86_64-gtk3", direct=True):
        ...     print(dep, len(manager.list_files(dep)))
    """

    # Executables that must be on PATH for this manager to work.
    required_tools: tuple[str, ...] = ()

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the manager.

        Args:
            dry_run: If True, only log installs without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if manager is in dry-run mode."""
        return self._dry_run

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Return the build platform this manager serves."""

    def is_available(self) -> bool:
        """Check if every required tool is on PATH."""
        return all(command_exists(tool) for tool in self.required_tools)

    def ensure_available(self) -> None:
        """Fail unless every required tool is on PATH.

        Raises:
            ToolNotFoundError: Naming the first missing tool.
        """
        for tool in self.required_tools:
            if not command_exists(tool):
                msg = f"Required tool not found for {self.platform.value}: {tool}"
                raise ToolNotFoundError(msg)

    @abstractmethod
    def dependencies(self, package: str, *, direct: bool = False) -> list[str]:
        """List the runtime dependencies of a package.

        Args:
            package: Package name.
            direct: Only list immediate dependencies (depth 1) instead of
                the full transitive closure.

        Returns:
            Dependency names, excluding the package itself.

        Raises:
            CommandError: If the query tool fails.
            ParseError: If the output cannot be parsed.
        """

    @abstractmethod
    def list_files(self, package: str) -> list[str]:
        """List the files owned by an installed package.

        Args:
            package: Package name.

        Returns:
            Absolute file paths. Directory entries are omitted.

        Raises:
            CommandError: If the query tool fails.
            ParseError: If the output cannot be parsed.
        """

    @abstractmethod
    def install(self, packages: list[str]) -> None:
        """Install packages.

        Args:
            packages: Package names to install.

        Raises:
            CommandError: If the installer fails.
        """

    def source_root(self) -> Path:
        """Return the filesystem root that manifest paths are relative to."""
        return Path("/")

    def file_index(self) -> FileIndex | None:
        """Return the fast file index for this platform, if there is one."""
        return None

    def _log_install(self, args: list[str]) -> bool:
        """Log an install command and report whether to actually run it."""
        if self.dry_run:
            logger.info("Dry run, would execute: %s", " ".join(args))
            return False
        logger.info("Installing: %s", " ".join(args))
        return True
