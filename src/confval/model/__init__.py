"""Core data models for confval."""

from .entities import ConfigError, ConfigProperty, format_errors, sort_errors

__all__ = [
    "ConfigError",
    "ConfigProperty",
    "format_errors",
    "sort_errors",
]
