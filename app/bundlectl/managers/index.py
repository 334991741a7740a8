"""Fast file indexes for manifest resolution.

A file index maps package names to their files using a prebuilt
database instead of querying the package database one package at a time.
The index tool is installed and refreshed lazily, once per index
instance, before its first query.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from bundlectl.core.errors import ParseError
from bundlectl.utils.shell import run_checked, run_interactive_checked

if TYPE_CHECKING:
    from bundlectl.managers.base import PackageManager

logger = logging.getLogger(__name__)


class FileIndex(ABC):
    """Abstract base class for package file indexes.

    The index owns its readiness state. It is injected into the
    resolver that uses it, so one index is prepared once and shared
    for the whole run.
    """

    # Package providing the index tool.
    tool_package: str = ""

    def __init__(self, manager: PackageManager) -> None:
        """Initialize the index.

        Args:
            manager: Package manager used to install the index tool.
        """
        self._manager = manager
        self._ready = False

    @property
    def ready(self) -> bool:
        """Check if the index has been installed and refreshed."""
        return self._ready

    def ensure_ready(self) -> None:
        """Install the index tool and refresh its database, once.

        Under a dry-run manager nothing is installed or refreshed and
        queries run against the index as it already exists.

        Raises:
            CommandError: If installation or refresh fails.
        """
        if self._ready:
            return

        logger.info("Preparing file index (%s)", self.tool_package)
        self._manager.install([self.tool_package])
        if self._manager.dry_run:
            logger.info("Dry run, would execute: %s", " ".join(self._refresh_command()))
        else:
            run_interactive_checked(self._refresh_command())
        self._ready = True

    def list_files(self, package: str) -> list[str]:
        """List the files of a package according to the index.

        Args:
            package: Package name.

        Returns:
            Absolute file paths. Directory entries are omitted.

        Raises:
            CommandError: If the index query fails.
            ParseError: If an output line has an unexpected shape.
        """
        self.ensure_ready()
        result = run_checked(self._list_command(package))

        files: list[str] = []
        for line in result.lines():
            path = self._parse_line(line, package)
            if not path.endswith("/"):
                files.append(path)
        return files

    @abstractmethod
    def _refresh_command(self) -> list[str]:
        """Return the command that refreshes the index database."""

    @abstractmethod
    def _list_command(self, package: str) -> list[str]:
        """Return the command that lists a package's files."""

    @abstractmethod
    def _parse_line(self, line: str, package: str) -> str:
        """Extract the file path from one line of list output."""


class PkgfileIndex(FileIndex):
    """pkgfile index for pacman-based systems.

    ``pkgfile --list`` prints ``<repo>/<package>\\t<path>`` lines.
    """

    tool_package = "pkgfile"

    def _refresh_command(self) -> list[str]:
        return ["pkgfile", "--update"]

    def _list_command(self, package: str) -> list[str]:
        return ["pkgfile", "--list", package]

    def _parse_line(self, line: str, package: str) -> str:
        owner, sep, path = line.partition("\t")
        if not sep or not path.startswith("/"):
            msg = f"Unexpected pkgfile output for {package}: {line!r}"
            raise ParseError(msg)
        name = owner.rsplit("/", 1)[-1]
        if name != package:
            msg = f"pkgfile listed {name!r} while querying {package!r}"
            raise ParseError(msg)
        return path


class AptFileIndex(FileIndex):
    """apt-file index for Debian systems.

    ``apt-file list`` prints ``<package>: <path>`` lines.
    """

    tool_package = "apt-file"

    def _refresh_command(self) -> list[str]:
        return ["sudo", "apt-file", "update"]

    def _list_command(self, package: str) -> list[str]:
        return ["apt-file", "list", "--fixed-string", package]

    def _parse_line(self, line: str, package: str) -> str:
        name, sep, path = line.partition(": ")
        if not sep or not path.startswith("/"):
            msg = f"Unexpected apt-file output for {package}: {line!r}"
            raise ParseError(msg)
        if name != package:
            msg = f"apt-file listed {name!r} while querying {package!r}"
            raise ParseError(msg)
        return path
