"""Shared exception hierarchy for Gherkinics."""

from __future__ import annotations

from .base import GherkinicsError
from .config import ConfigError
from .reporting import MetadataParseError, RenderError, SetupError, WriteError

__all__ = [
    "ConfigError",
    "GherkinicsError",
    "MetadataParseError",
    "RenderError",
    "SetupError",
    "WriteError",
]
