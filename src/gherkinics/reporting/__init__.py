"""Reporting package for Gherkinics HTML output."""

from __future__ import annotations

from typing import Any

__all__ = ["HtmlPrinter", "build_unit_metadata", "copy_static_assets"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name == "HtmlPrinter":
        from .html_printer import HtmlPrinter

        return HtmlPrinter
    if name == "build_unit_metadata":
        from .metadata import build_unit_metadata

        return build_unit_metadata
    if name == "copy_static_assets":
        from .assets import copy_static_assets

        return copy_static_assets
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
