"""Config data model for the HTML report printer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gherkinics.constants.config import DEFAULT_ASSET_DIR, DEFAULT_TEMPLATE_DIR
from gherkinics.constants.reporting import DEFAULT_OUTPUT_EXTENSION, ScanMode


@dataclass(frozen=True)
class PrinterConfig:
    """Resolved printer config."""

    output_dir: Path
    scan_root: Path
    template_dir: Path = DEFAULT_TEMPLATE_DIR
    asset_dir: Path = DEFAULT_ASSET_DIR
    cache_dir: Path | None = None
    output_extension: str = DEFAULT_OUTPUT_EXTENSION
    scan_mode: ScanMode | None = None
