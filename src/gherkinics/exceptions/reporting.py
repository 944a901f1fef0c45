"""Exceptions raised while building metadata and printing reports."""

from __future__ import annotations

from gherkinics.exceptions.base import GherkinicsError


class SetupError(GherkinicsError, OSError):
    """Raised when the output location cannot be prepared."""


class MetadataParseError(GherkinicsError, ValueError):
    """Raised when a scanned-unit path cannot be split into directory, name, and extension."""


class RenderError(GherkinicsError, RuntimeError):
    """Raised when a report template fails to render."""

    def __init__(self, template_name: str, message: str, *, unit_path: str | None = None) -> None:
        self.template_name = template_name
        self.unit_path = unit_path
        target = f" for {unit_path}" if unit_path is not None else ""
        super().__init__(f"Failed to render template {template_name}{target}: {message}")


class WriteError(GherkinicsError, OSError):
    """Raised when a rendered report cannot be written to disk."""
