"""Configuration models for payload assembly.

This module defines the Pydantic models representing the bundle.toml
structure: per-platform package lists, closure seeds and file filter
rules.
"""

import re
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from bundlectl.core.platform import Platform


def _compile(pattern: str, what: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        msg = f"Invalid {what} pattern {pattern!r}: {e}"
        raise ValueError(msg) from e


class FilterRule(BaseModel):
    """File-exclusion rule for packages whose name matches a pattern.

    Patterns are compiled when the model is validated, so a malformed
    expression fails at configuration load time rather than mid-walk.

    Attributes:
        package: Regular expression searched against package names.
        files: Regular expressions searched against manifest paths.
            A path matching any of them is excluded.
    """

    model_config = ConfigDict(extra="forbid")

    package: Annotated[str, Field(description="Package name pattern")]
    files: Annotated[
        list[str],
        Field(default_factory=list, description="File path patterns to exclude"),
    ]

    _package_re: re.Pattern[str] = PrivateAttr()
    _files_re: re.Pattern[str] | None = PrivateAttr(default=None)

    @field_validator("package")
    @classmethod
    def validate_package_pattern(cls, v: str) -> str:
        """Validate that the package pattern compiles."""
        _compile(v, "package")
        return v

    @field_validator("files")
    @classmethod
    def validate_file_patterns(cls, v: list[str]) -> list[str]:
        """Validate that every file pattern compiles."""
        for pattern in v:
            _compile(pattern, "file")
        return v

    def model_post_init(self, __context: Any) -> None:
        """Compile the package pattern and the combined file alternation."""
        self._package_re = re.compile(self.package)
        if self.files:
            self._files_re = re.compile("|".join(f"(?:{p})" for p in self.files))

    def applies_to(self, package: str) -> bool:
        """Check if this rule applies to a package.

        Args:
            package: Package name.

        Returns:
            True if the package pattern matches anywhere in the name.
        """
        return self._package_re.search(package) is not None

    def excludes(self, path: str) -> bool:
        """Check if this rule excludes a file path.

        Args:
            path: Manifest file path.

        Returns:
            True if any file pattern matches anywhere in the path.
        """
        return self._files_re is not None and self._files_re.search(path) is not None


class PlatformConfig(BaseModel):
    """Payload configuration for one build platform.

    Attributes:
        packages: Native packages to install on the build host.
        seeds: Closure seeds. Defaults to ``packages`` when unset.
        filters: File-exclusion rules applied to each package's manifest.
        strip_prefix: Leading path removed from manifest paths to form
            destination paths (e.g. ``/mingw64``).
        prune_empty: Do not descend into the dependencies of packages
            whose filtered manifest is empty.
        use_file_index: Resolve manifests through the file index tool
            instead of the package database.
    """

    model_config = ConfigDict(extra="forbid")

    packages: Annotated[
        list[str],
        Field(default_factory=list, description="Native packages to install"),
    ]
    seeds: Annotated[
        list[str] | None,
        Field(description="Closure seed packages (default: packages)"),
    ] = None
    filters: Annotated[
        list[FilterRule],
        Field(default_factory=list, description="File exclusion rules"),
    ]
    strip_prefix: Annotated[
        str,
        Field(description="Path prefix removed from destination paths"),
    ] = ""
    prune_empty: Annotated[
        bool,
        Field(description="Skip dependencies of packages with no files"),
    ] = True
    use_file_index: Annotated[
        bool,
        Field(description="Resolve manifests via the file index tool"),
    ] = False

    @field_validator("strip_prefix")
    @classmethod
    def normalize_strip_prefix(cls, v: str) -> str:
        """Drop a trailing slash so prefix matching works on path components."""
        return v.rstrip("/")

    @property
    def effective_seeds(self) -> list[str]:
        """Seeds for the closure walk, falling back to the package list."""
        if self.seeds is not None:
            return self.seeds
        return self.packages


class BundleConfig(BaseModel):
    """Complete bundle.toml document.

    Attributes:
        native: Per-platform payload configuration.
    """

    model_config = ConfigDict(extra="forbid")

    native: Annotated[
        dict[Platform, PlatformConfig],
        Field(default_factory=dict, description="Per-platform configuration"),
    ]

    def for_platform(self, platform: Platform) -> PlatformConfig:
        """Get the configuration for a platform.

        Args:
            platform: Build platform.

        Returns:
            The configured PlatformConfig, or an empty one if the platform
            has no section.
        """
        return self.native.get(platform) or PlatformConfig()
