"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from bundlectl.core.platform import Platform
from bundlectl.managers.base import PackageManager


class FakePackageManager(PackageManager):
    """In-memory package manager backed by a dependency graph.

    Records every query so tests can assert on visit counts.
    """

    def __init__(
        self,
        graph: dict[str, list[str]],
        manifests: dict[str, list[str]],
        root: Path | None = None,
    ) -> None:
        super().__init__(dry_run=False)
        self.graph = graph
        self.manifests = manifests
        self.root = root or Path("/")
        self.dependency_calls: list[str] = []
        self.file_calls: list[str] = []
        self.installed: list[str] = []

    @property
    def platform(self) -> Platform:
        return Platform.DEBIAN

    def is_available(self) -> bool:
        return True

    def ensure_available(self) -> None:
        return None

    def dependencies(self, package: str, *, direct: bool = False) -> list[str]:
        self.dependency_calls.append(package)
        if direct:
            return [d for d in self.graph.get(package, []) if d != package]

        seen: list[str] = []
        stack = list(self.graph.get(package, []))
        while stack:
            dep = stack.pop(0)
            if dep == package or dep in seen:
                continue
            seen.append(dep)
            stack.extend(self.graph.get(dep, []))
        return seen

    def list_files(self, package: str) -> list[str]:
        self.file_calls.append(package)
        return list(self.manifests.get(package, []))

    def install(self, packages: list[str]) -> None:
        self.installed.extend(packages)

    def source_root(self) -> Path:
        return self.root


FakeManagerFactory = Callable[..., FakePackageManager]


@pytest.fixture
def fake_manager() -> FakeManagerFactory:
    """Factory for in-memory package managers."""

    def _make(
        graph: dict[str, list[str]],
        manifests: dict[str, list[str]],
        root: Path | None = None,
    ) -> FakePackageManager:
        return FakePackageManager(graph, manifests, root)

    return _make


@pytest.fixture
def scenario_graph() -> dict[str, list[str]]:
    """A depends on B and C; B depends on C; C is a leaf."""
    return {"A": ["B", "C"], "B": ["C"], "C": []}


@pytest.fixture
def scenario_manifests() -> dict[str, list[str]]:
    """Raw manifests for the A/B/C scenario."""
    return {"A": ["/x/a1"], "B": ["/x/b1", "/x/b2"], "C": []}


@pytest.fixture
def mock_pacman_ql_output() -> str:
    """Sample pacman -Ql output for testing."""
    return """mingw-w64-x86_64-zlib /mingw64/
mingw-w64-x86_64-zlib /mingw64/bin/
mingw-w64-x86_64-zlib /mingw64/bin/zlib1.dll
mingw-w64-x86_64-zlib /mingw64/include/zlib.h
mingw-w64-x86_64-zlib /mingw64/lib/libz.a"""


@pytest.fixture
def mock_pactree_output() -> str:
    """Sample pactree -u output for testing."""
    return """mingw-w64-x86_64-gtk3
mingw-w64-x86_64-atk
mingw-w64-x86_64-cairo
mingw-w64-x86_64-glib2"""


@pytest.fixture
def mock_pkgfile_output() -> str:
    """Sample pkgfile --list output for testing."""
    return """mingw64/mingw-w64-x86_64-zlib\t/mingw64/
mingw64/mingw-w64-x86_64-zlib\t/mingw64/bin/zlib1.dll
mingw64/mingw-w64-x86_64-zlib\t/mingw64/include/zlib.h"""


@pytest.fixture
def mock_apt_depends_output() -> str:
    """Sample apt-cache depends output (direct) for testing."""
    return """libgtk-3-0
  Depends: adwaita-icon-theme
  Depends: libatk1.0-0
 |Depends: libc6
  Depends: <default-dbus-session-bus>
  PreDepends: dpkg"""


@pytest.fixture
def mock_apt_recurse_output() -> str:
    """Sample apt-cache depends --recurse output for testing."""
    return """libgtk-3-0
  Depends: libatk1.0-0
  Depends: libc6
libatk1.0-0
  Depends: libc6
  Depends: <libglib2.0-0t64>
<libglib2.0-0t64>
libc6
  Depends: libgcc-s1
libgcc-s1"""


@pytest.fixture
def mock_dpkg_list_output() -> str:
    """Sample dpkg-query -L output for testing."""
    return """/.
/usr/lib/x86_64-linux-gnu/libz.so.1.3
/usr/share/doc/zlib1g/copyright
diverted by other-pkg to: /usr/lib/x86_64-linux-gnu/libz.so.1.3.distrib"""


@pytest.fixture
def scenario_config(tmp_path: Path) -> Path:
    """bundle.toml seeding the A/B/C scenario on Debian."""
    path = tmp_path / "bundle.toml"
    path.write_text('[native.debian]\npackages = ["A"]\n')
    return path


@pytest.fixture
def scenario_root(tmp_path: Path) -> Path:
    """Install root holding the files of the A/B/C scenario."""
    root = tmp_path / "root"
    (root / "x").mkdir(parents=True)
    for name in ("a1", "b1", "b2"):
        (root / "x" / name).write_text(name)
    return root
