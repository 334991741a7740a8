"""Manifest filtering.

Removes files from a package manifest according to the configured
filter rules.
"""

import logging
from collections.abc import Sequence

from bundlectl.models.config import FilterRule

logger = logging.getLogger(__name__)


def apply_filters(package: str, manifest: Sequence[str], rules: Sequence[FilterRule]) -> list[str]:
    """Filter a package manifest.

    Every rule whose package pattern matches ``package`` contributes
    exclusions. Exclusions only accumulate, so a file excluded by one rule
    stays excluded regardless of later rules. The result keeps the
    manifest order.

    Args:
        package: Package name.
        manifest: Raw manifest paths.
        rules: Filter rules to consider.

    Returns:
        The manifest minus every excluded path.
    """
    excluded: set[str] = set()

    for rule in rules:
        if not rule.applies_to(package):
            continue
        for path in manifest:
            if path not in excluded and rule.excludes(path):
                excluded.add(path)

    if excluded:
        logger.debug("Filtered %d of %d files from %s", len(excluded), len(manifest), package)

    return [path for path in manifest if path not in excluded]
