"""CLI package for bundlectl.

This package contains the Typer application and all subcommands.
"""

from bundlectl.cli.main import app

__all__ = ["app"]
