"""Unit tests for PacmanManager.

Tests for the MSYS2 pacman adapter.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from bundlectl.core.errors import CommandError, ParseError, ToolNotFoundError
from bundlectl.core.platform import Platform
from bundlectl.managers.index import PkgfileIndex
from bundlectl.managers.pacman import PacmanManager
from bundlectl.utils.shell import CommandResult


def _ok(stdout: str) -> CommandResult:
    return CommandResult(stdout=stdout, stderr="", returncode=0)


class TestPacmanManager:
    """Tests for PacmanManager class."""

    @pytest.fixture
    def manager(self) -> PacmanManager:
        """Create PacmanManager instance."""
        return PacmanManager()

    def test_platform_is_msys2(self, manager: PacmanManager) -> None:
        """Manager serves MSYS2 MinGW64."""
        assert manager.platform == Platform.MSYS2_MINGW64

    def test_ensure_available_missing_pactree(self, manager: PacmanManager) -> None:
        """A missing pactree is reported by name."""
        with (
            patch("bundlectl.managers.base.command_exists") as mock_exists,
            pytest.raises(ToolNotFoundError, match="pactree"),
        ):
            mock_exists.side_effect = lambda cmd: cmd == "pacman"
            manager.ensure_available()

    def test_direct_dependencies(self, manager: PacmanManager, mock_pactree_output: str) -> None:
        """Direct queries limit pactree depth and drop the package itself."""
        with patch("bundlectl.managers.pacman.run_checked") as mock_run:
            mock_run.return_value = _ok(mock_pactree_output)

            deps = manager.dependencies("mingw-w64-x86_64-gtk3", direct=True)

        mock_run.assert_called_once_with(["pactree", "-u", "-d", "1", "mingw-w64-x86_64-gtk3"])
        assert deps == [
            "mingw-w64-x86_64-atk",
            "mingw-w64-x86_64-cairo",
            "mingw-w64-x86_64-glib2",
        ]

    def test_transitive_dependencies(self, manager: PacmanManager) -> None:
        """Without direct, pactree is unbounded."""
        with patch("bundlectl.managers.pacman.run_checked") as mock_run:
            mock_run.return_value = _ok("mingw-w64-x86_64-zlib\n")

            deps = manager.dependencies("mingw-w64-x86_64-zlib")

        mock_run.assert_called_once_with(["pactree", "-u", "mingw-w64-x86_64-zlib"])
        assert deps == []

    def test_empty_pactree_output(self, manager: PacmanManager) -> None:
        """No output at all is a parse failure."""
        with (
            patch("bundlectl.managers.pacman.run_checked", return_value=_ok("")),
            pytest.raises(ParseError, match="no output"),
        ):
            manager.dependencies("mingw-w64-x86_64-zlib", direct=True)

    def test_unexpected_pactree_line(self, manager: PacmanManager) -> None:
        """A line that is not a bare package name is a parse failure."""
        with (
            patch(
                "bundlectl.managers.pacman.run_checked",
                return_value=_ok("pkg\nerror: package 'x' not found\n"),
            ),
            pytest.raises(ParseError),
        ):
            manager.dependencies("pkg", direct=True)

    def test_query_failure_propagates(self, manager: PacmanManager) -> None:
        """A failing pactree aborts the query."""
        with (
            patch(
                "bundlectl.managers.pacman.run_checked",
                side_effect=CommandError(["pactree"], 1, "not found"),
            ),
            pytest.raises(CommandError),
        ):
            manager.dependencies("ghost", direct=True)

    def test_list_files(self, manager: PacmanManager, mock_pacman_ql_output: str) -> None:
        """pacman -Ql output is stripped of the owner column and directories."""
        with patch("bundlectl.managers.pacman.run_checked") as mock_run:
            mock_run.return_value = _ok(mock_pacman_ql_output)

            files = manager.list_files("mingw-w64-x86_64-zlib")

        mock_run.assert_called_once_with(["pacman", "-Ql", "mingw-w64-x86_64-zlib"])
        assert files == [
            "/mingw64/bin/zlib1.dll",
            "/mingw64/include/zlib.h",
            "/mingw64/lib/libz.a",
        ]

    def test_list_files_wrong_owner(self, manager: PacmanManager) -> None:
        """Lines owned by another package are a parse failure."""
        with (
            patch(
                "bundlectl.managers.pacman.run_checked",
                return_value=_ok("other-pkg /mingw64/bin/x.dll\n"),
            ),
            pytest.raises(ParseError),
        ):
            manager.list_files("mingw-w64-x86_64-zlib")

    def test_install(self, manager: PacmanManager) -> None:
        """install() runs pacman -S --needed."""
        with patch("bundlectl.managers.pacman.run_interactive_checked") as mock_run:
            manager.install(["mingw-w64-x86_64-gtk3", "mingw-w64-x86_64-perl"])

        mock_run.assert_called_once_with(
            [
                "pacman",
                "-S",
                "--needed",
                "--noconfirm",
                "mingw-w64-x86_64-gtk3",
                "mingw-w64-x86_64-perl",
            ]
        )

    def test_install_dry_run(self) -> None:
        """Dry-run installs run nothing."""
        with patch("bundlectl.managers.pacman.run_interactive_checked") as mock_run:
            PacmanManager(dry_run=True).install(["mingw-w64-x86_64-gtk3"])

        mock_run.assert_not_called()

    def test_install_nothing(self, manager: PacmanManager) -> None:
        """An empty package list runs nothing."""
        with patch("bundlectl.managers.pacman.run_interactive_checked") as mock_run:
            manager.install([])

        mock_run.assert_not_called()

    def test_source_root(self, manager: PacmanManager) -> None:
        """The MSYS2 root comes from cygpath."""
        with patch("bundlectl.managers.pacman.run_checked") as mock_run:
            mock_run.return_value = _ok("C:/msys64/\n")

            root = manager.source_root()

        mock_run.assert_called_once_with(["cygpath", "-m", "/"])
        assert root == Path("C:/msys64/")

    def test_file_index_is_shared(self, manager: PacmanManager) -> None:
        """The pkgfile index is created once per manager."""
        index = manager.file_index()

        assert isinstance(index, PkgfileIndex)
        assert manager.file_index() is index
