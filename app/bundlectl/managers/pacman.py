"""pacman package manager implementation for MSYS2 MinGW64.

Dependencies come from pactree, manifests from ``pacman -Ql`` and the
file index from pkgfile.
"""

import logging
from pathlib import Path

from bundlectl.core.errors import ParseError
from bundlectl.core.platform import Platform
from bundlectl.managers.base import PackageManager
from bundlectl.managers.index import FileIndex, PkgfileIndex
from bundlectl.utils.shell import run_checked, run_interactive_checked

logger = logging.getLogger(__name__)


class PacmanManager(PackageManager):
    """Package manager adapter for MSYS2 (pacman, pactree, cygpath)."""

    required_tools = ("pacman", "pactree")

    def __init__(self, dry_run: bool = False) -> None:
        super().__init__(dry_run=dry_run)
        self._index: PkgfileIndex | None = None

    @property
    def platform(self) -> Platform:
        """Return MSYS2 MinGW64 as the platform."""
        return Platform.MSYS2_MINGW64

    def dependencies(self, package: str, *, direct: bool = False) -> list[str]:
        """List dependencies with ``pactree -u``.

        pactree prints the queried package first, followed by one unique
        dependency per line.
        """
        args = ["pactree", "-u"]
        if direct:
            args.extend(["-d", "1"])
        args.append(package)

        lines = run_checked(args).lines()
        if not lines:
            msg = f"pactree returned no output for {package}"
            raise ParseError(msg)

        deps: list[str] = []
        for line in lines:
            name = line.strip()
            if " " in name:
                msg = f"Unexpected pactree output for {package}: {line!r}"
                raise ParseError(msg)
            if name != package:
                deps.append(name)
        return deps

    def list_files(self, package: str) -> list[str]:
        """List files with ``pacman -Ql``, stripping the package column."""
        result = run_checked(["pacman", "-Ql", package])

        files: list[str] = []
        for line in result.lines():
            owner, sep, path = line.partition(" ")
            if not sep or owner != package or not path.startswith("/"):
                msg = f"Unexpected pacman -Ql output for {package}: {line!r}"
                raise ParseError(msg)
            if not path.endswith("/"):
                files.append(path)
        return files

    def install(self, packages: list[str]) -> None:
        """Install packages with ``pacman -S --needed``."""
        if not packages:
            return
        args = ["pacman", "-S", "--needed", "--noconfirm", *packages]
        if self._log_install(args):
            run_interactive_checked(args)

    def source_root(self) -> Path:
        """Return the MSYS2 root as a mixed-style Windows path."""
        root = run_checked(["cygpath", "-m", "/"]).stdout.strip()
        if not root:
            msg = "cygpath returned an empty MSYS2 root"
            raise ParseError(msg)
        return Path(root)

    def file_index(self) -> FileIndex:
        """Return the shared pkgfile index."""
        if self._index is None:
            self._index = PkgfileIndex(self)
        return self._index
