"""Unit tests for ci commands."""

import os
from pathlib import Path
from unittest.mock import patch

from bundlectl.cli.main import app
from bundlectl.core.errors import CommandError
from typer.testing import CliRunner

runner = CliRunner()


class TestCacheOutputCommand:
    """Tests for bundlectl ci cache-output command."""

    def test_writes_github_output(self, tmp_path: Path) -> None:
        """Outputs are appended to $GITHUB_OUTPUT."""
        output_file = tmp_path / "output"

        with patch.dict(os.environ, {"GITHUB_OUTPUT": str(output_file)}):
            result = runner.invoke(app, ["--platform", "msys2-mingw64", "ci", "cache-output"])

        assert result.exit_code == 0
        assert output_file.read_text().splitlines() == ['paths="c:/cx"', "prefix=c:/cx"]

    def test_prints_without_github_output(self) -> None:
        """Without $GITHUB_OUTPUT the outputs are printed."""
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["--platform", "debian", "ci", "cache-output"])

        assert result.exit_code == 0
        assert "prefix=/home/runner/build" in result.stdout


class TestDistTarballCommand:
    """Tests for bundlectl ci dist-tarball command."""

    def test_missing_prefix(self, tmp_path: Path) -> None:
        """A missing prefix directory fails."""
        result = runner.invoke(
            app,
            ["--platform", "debian", "ci", "dist-tarball", "--prefix", str(tmp_path / "none")],
        )

        assert result.exit_code == 1
        assert "does not exist" in result.stdout + result.stderr

    def test_creates_tarball(self, tmp_path: Path) -> None:
        """The prefix is handed to the tarball helper."""
        prefix = tmp_path / "build"
        prefix.mkdir()

        with patch(
            "bundlectl.cli.commands.ci.create_dist_tarball", return_value=Path("build.tbz2")
        ) as mock_tar:
            result = runner.invoke(
                app, ["--platform", "debian", "ci", "dist-tarball", "--prefix", str(prefix)]
            )

        assert result.exit_code == 0
        mock_tar.assert_called_once_with(prefix)
        assert "Created build.tbz2" in result.stdout

    def test_tar_failure(self, tmp_path: Path) -> None:
        """A failing tar exits non-zero."""
        prefix = tmp_path / "build"
        prefix.mkdir()

        with patch(
            "bundlectl.cli.commands.ci.create_dist_tarball",
            side_effect=CommandError(["tar"], 2),
        ):
            result = runner.invoke(
                app, ["--platform", "debian", "ci", "dist-tarball", "--prefix", str(prefix)]
            )

        assert result.exit_code == 1
