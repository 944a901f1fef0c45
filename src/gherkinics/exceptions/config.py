"""Configuration-related exceptions."""

from __future__ import annotations

from gherkinics.exceptions.base import GherkinicsError


class ConfigError(GherkinicsError, ValueError):
    """Raised when printer configuration is invalid."""
