"""Unit tests for BrewManager.

Tests for the Homebrew adapter.
"""

from unittest.mock import patch

import pytest
from bundlectl.core.errors import ParseError
from bundlectl.core.platform import Platform
from bundlectl.managers.brew import BrewManager
from bundlectl.utils.shell import CommandResult


def _ok(stdout: str) -> CommandResult:
    return CommandResult(stdout=stdout, stderr="", returncode=0)


class TestBrewManager:
    """Tests for BrewManager class."""

    @pytest.fixture
    def manager(self) -> BrewManager:
        """Create BrewManager instance."""
        return BrewManager()

    def test_platform_is_macos(self, manager: BrewManager) -> None:
        """Manager serves macOS Homebrew."""
        assert manager.platform == Platform.MACOS_HOMEBREW

    def test_direct_dependencies(self, manager: BrewManager) -> None:
        """brew deps --direct lists immediate dependencies."""
        with patch("bundlectl.managers.brew.run_checked") as mock_run:
            mock_run.return_value = _ok("cairo\nglib\npango\n")

            deps = manager.dependencies("gtk+3", direct=True)

        mock_run.assert_called_once_with(["brew", "deps", "--installed", "--direct", "gtk+3"])
        assert deps == ["cairo", "glib", "pango"]

    def test_no_dependencies(self, manager: BrewManager) -> None:
        """A formula without dependencies yields an empty list."""
        with patch("bundlectl.managers.brew.run_checked", return_value=_ok("")):
            assert manager.dependencies("zlib", direct=True) == []

    def test_list_files(self, manager: BrewManager) -> None:
        """brew list prints absolute Cellar paths."""
        output = "/opt/homebrew/Cellar/zlib/1.3/lib/libz.1.dylib\n"
        with patch("bundlectl.managers.brew.run_checked") as mock_run:
            mock_run.return_value = _ok(output)

            files = manager.list_files("zlib")

        mock_run.assert_called_once_with(["brew", "list", "--formula", "--verbose", "zlib"])
        assert files == ["/opt/homebrew/Cellar/zlib/1.3/lib/libz.1.dylib"]

    def test_list_files_unexpected_line(self, manager: BrewManager) -> None:
        """Non-path output is a parse failure."""
        with (
            patch("bundlectl.managers.brew.run_checked", return_value=_ok("Warning: x\n")),
            pytest.raises(ParseError),
        ):
            manager.list_files("zlib")

    def test_no_file_index(self, manager: BrewManager) -> None:
        """Homebrew has no file index."""
        assert manager.file_index() is None

    def test_install_dry_run(self) -> None:
        """Dry-run installs run nothing."""
        with patch("bundlectl.managers.brew.run_interactive_checked") as mock_run:
            BrewManager(dry_run=True).install(["gtk+3"])

        mock_run.assert_not_called()
