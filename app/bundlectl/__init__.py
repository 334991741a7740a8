"""bundlectl - Dependency closure and payload assembly for installer builds."""

__version__ = "0.1.0"
