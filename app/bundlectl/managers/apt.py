"""APT package manager implementation for Debian.

Dependencies come from apt-cache, manifests from dpkg-query and the
file index from apt-file.
"""

import logging
import re
from pathlib import Path

from bundlectl.core.errors import ParseError
from bundlectl.core.platform import Platform
from bundlectl.managers.base import PackageManager
from bundlectl.managers.index import AptFileIndex, FileIndex
from bundlectl.utils.shell import run_checked, run_interactive_checked

logger = logging.getLogger(__name__)

# Relations that pull in runtime files.
_RUNTIME_RELATIONS = frozenset({"Depends", "PreDepends"})

# Informational lines dpkg-query -L prints for diverted files.
_DIVERSION_PREFIXES = ("diverted by ", "package diverts others to: ", "locally diverted to: ")


def _add_dependency(deps: list[str], name: str, package: str) -> None:
    if name != package and name not in deps:
        deps.append(name)


class AptManager(PackageManager):
    """Package manager adapter for Debian (apt-cache, dpkg-query, apt-get)."""

    required_tools = ("apt-cache", "dpkg-query", "apt-get")

    # apt-cache depends flags restricting output to hard runtime relations
    _DEPENDS_FLAGS = (
        "--installed",
        "--no-recommends",
        "--no-suggests",
        "--no-conflicts",
        "--no-breaks",
        "--no-replaces",
        "--no-enhances",
    )

    # "  Depends: libc6" or " |Depends: <virtual>"; "|" marks an alternative.
    _RELATION_PATTERN = re.compile(r"^\s*\|?(?P<relation>[A-Za-z]+): (?P<target>\S+)$")

    # Installed provider listed beneath a virtual target: "    debconf".
    _PROVIDER_PATTERN = re.compile(r"^\s{4,}(?P<name>[^\s<>|:]+(?::[^\s:]+)?)$")

    def __init__(self, dry_run: bool = False) -> None:
        super().__init__(dry_run=dry_run)
        self._index: AptFileIndex | None = None

    @property
    def platform(self) -> Platform:
        """Return Debian as the platform."""
        return Platform.DEBIAN

    def dependencies(self, package: str, *, direct: bool = False) -> list[str]:
        """List dependencies with ``apt-cache depends``.

        Direct queries read the indented ``Depends:``/``PreDepends:``
        lines of the package block. A relation naming a virtual package
        (``<name>``) is followed by deeper-indented lines listing the
        installed packages providing it; those providers are collected in
        its place. Recursive queries read every top-level package name.
        """
        args = ["apt-cache", "depends", *self._DEPENDS_FLAGS]
        if not direct:
            args.append("--recurse")
        args.append(package)

        lines = run_checked(args).lines()
        if not lines:
            msg = f"apt-cache returned no output for {package}"
            raise ParseError(msg)

        deps: list[str] = []
        # Relation whose virtual target the following provider lines belong to
        virtual_relation: str | None = None
        for line in lines:
            if line[0].isspace() or line.startswith("|"):
                if direct:
                    virtual_relation = self._collect_relation(
                        line, package, deps, virtual_relation
                    )
                continue

            virtual_relation = None
            name = line.strip()
            if not direct and not name.startswith("<"):
                _add_dependency(deps, name, package)
        return deps

    def _collect_relation(
        self, line: str, package: str, deps: list[str], virtual_relation: str | None
    ) -> str | None:
        """Handle one indented line and return the open virtual relation, if any."""
        relation_match = self._RELATION_PATTERN.match(line)
        if relation_match:
            relation = relation_match.group("relation")
            target = relation_match.group("target")
            if relation not in _RUNTIME_RELATIONS:
                logger.debug("Ignoring %s relation of %s", relation, package)
            elif not target.startswith("<"):
                _add_dependency(deps, target, package)
            return relation if target.startswith("<") else None

        provider_match = self._PROVIDER_PATTERN.match(line)
        if provider_match and virtual_relation is not None:
            if virtual_relation in _RUNTIME_RELATIONS:
                _add_dependency(deps, provider_match.group("name"), package)
            return virtual_relation

        msg = f"Unexpected apt-cache output for {package}: {line!r}"
        raise ParseError(msg)

    def list_files(self, package: str) -> list[str]:
        """List files with ``dpkg-query -L``, dropping directories."""
        result = run_checked(["dpkg-query", "-L", package])

        files: list[str] = []
        for line in result.lines():
            if line.startswith(_DIVERSION_PREFIXES):
                continue
            if not line.startswith("/"):
                msg = f"Unexpected dpkg-query output for {package}: {line!r}"
                raise ParseError(msg)
            if line == "/." or Path(line).is_dir():
                continue
            files.append(line)
        return files

    def install(self, packages: list[str]) -> None:
        """Install packages with ``apt-get install``."""
        if not packages:
            return
        args = ["sudo", "apt-get", "install", "-y", "--no-install-recommends", *packages]
        if self._log_install(args):
            run_interactive_checked(args)

    def file_index(self) -> FileIndex:
        """Return the shared apt-file index."""
        if self._index is None:
            self._index = AptFileIndex(self)
        return self._index
