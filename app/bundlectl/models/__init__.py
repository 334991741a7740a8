"""Data models for bundlectl.

This module exports the configuration and copy plan models.
"""

from bundlectl.models.config import BundleConfig, FilterRule, PlatformConfig
from bundlectl.models.plan import ClosureResult, CopyEntry, CopyPlan, CopyReport

__all__ = [
    "BundleConfig",
    "ClosureResult",
    "CopyEntry",
    "CopyPlan",
    "CopyReport",
    "FilterRule",
    "PlatformConfig",
]
