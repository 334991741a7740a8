"""Configuration file I/O operations.

This module provides functions for loading and saving bundle.toml
documents with proper validation using Pydantic models.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from bundlectl.core.errors import BundleError
from bundlectl.core.paths import get_config_path
from bundlectl.core.platform import Platform
from bundlectl.models.config import BundleConfig, FilterRule, PlatformConfig


class ConfigError(BundleError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when configuration content is invalid."""


def load_config(path: Path | None = None) -> BundleConfig:
    """Load and validate a configuration document from a TOML file.

    Filter patterns are compiled here, so a malformed regular expression
    is reported before any package query runs.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated BundleConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return BundleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: BundleConfig, path: Path | None = None) -> Path:
    """Save a configuration document to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        config: The BundleConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: BundleConfig) -> dict[str, Any]:
    """Convert a BundleConfig to a dictionary suitable for TOML serialization.

    Defaults are omitted so the written file stays minimal.

    Args:
        config: The BundleConfig object to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "native": {
            platform.value: _platform_to_dict(platform_config)
            for platform, platform_config in config.native.items()
        }
    }


def _platform_to_dict(config: PlatformConfig) -> dict[str, Any]:
    result: dict[str, Any] = {"packages": list(config.packages)}
    if config.seeds is not None:
        result["seeds"] = list(config.seeds)
    if config.strip_prefix:
        result["strip_prefix"] = config.strip_prefix
    if not config.prune_empty:
        result["prune_empty"] = False
    if config.use_file_index:
        result["use_file_index"] = True
    if config.filters:
        result["filters"] = [_rule_to_dict(rule) for rule in config.filters]
    return result


def _rule_to_dict(rule: FilterRule) -> dict[str, Any]:
    return {"package": rule.package, "files": list(rule.files)}


def get_package_list(config: BundleConfig, platform: Platform) -> list[str]:
    """Get the native packages configured for a platform.

    Args:
        config: Loaded configuration.
        platform: Build platform.

    Returns:
        Package names, empty when the platform has no section.
    """
    return list(config.for_platform(platform).packages)
