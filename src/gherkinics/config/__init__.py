"""Printer configuration model and YAML loader."""

from __future__ import annotations

from .loader import load_printer_config
from .model import PrinterConfig

__all__ = ["PrinterConfig", "load_printer_config"]
