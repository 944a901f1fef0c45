"""Base exception for Gherkinics."""

from __future__ import annotations


class GherkinicsError(Exception):
    """Base class for all Gherkinics errors."""
