"""CLI commands for bundlectl.

This package contains all subcommand implementations.
"""

from bundlectl.cli.commands import bundle, ci, deps, init, install, packages, plan

__all__ = ["bundle", "ci", "deps", "init", "install", "packages", "plan"]
