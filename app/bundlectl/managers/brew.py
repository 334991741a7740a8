"""Homebrew package manager implementation for macOS."""

import logging

from bundlectl.core.errors import ParseError
from bundlectl.core.platform import Platform
from bundlectl.managers.base import PackageManager
from bundlectl.utils.shell import run_checked, run_interactive_checked

logger = logging.getLogger(__name__)


class BrewManager(PackageManager):
    """Package manager adapter for Homebrew formulae.

    Homebrew has no file index; manifests always come from the Cellar.
    """

    required_tools = ("brew",)

    @property
    def platform(self) -> Platform:
        """Return macOS Homebrew as the platform."""
        return Platform.MACOS_HOMEBREW

    def dependencies(self, package: str, *, direct: bool = False) -> list[str]:
        """List dependencies with ``brew deps --installed``."""
        args = ["brew", "deps", "--installed"]
        if direct:
            args.append("--direct")
        args.append(package)

        deps: list[str] = []
        for line in run_checked(args).lines():
            name = line.strip()
            if " " in name:
                msg = f"Unexpected brew deps output for {package}: {line!r}"
                raise ParseError(msg)
            if name != package:
                deps.append(name)
        return deps

    def list_files(self, package: str) -> list[str]:
        """List files with ``brew list --formula --verbose``."""
        result = run_checked(["brew", "list", "--formula", "--verbose", package])

        files: list[str] = []
        for line in result.lines():
            if not line.startswith("/"):
                msg = f"Unexpected brew list output for {package}: {line!r}"
                raise ParseError(msg)
            files.append(line)
        return files

    def install(self, packages: list[str]) -> None:
        """Install formulae with ``brew install``."""
        if not packages:
            return
        args = ["brew", "install", *packages]
        if self._log_install(args):
            run_interactive_checked(args)
