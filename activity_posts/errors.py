from __future__ import annotations


class ConfigError(RuntimeError):
    """Raised when configuration is missing or invalid."""


class FeedError(RuntimeError):
    """Raised when a post feed file cannot be read or parsed."""


class ExportError(RuntimeError):
    """Raised when writing a report workbook fails."""
