"""Constants for printer configuration defaults and YAML keys."""

from __future__ import annotations

import re
from pathlib import Path
from re import Pattern

PACKAGE_ROOT: Path = Path(__file__).resolve().parent.parent
DEFAULT_TEMPLATE_DIR: Path = PACKAGE_ROOT / "templates"
DEFAULT_ASSET_DIR: Path = PACKAGE_ROOT / "resources"

CONFIG_FILENAME: str = "gherkinics.yaml"

PATH_CONFIG_KEYS: tuple[str, ...] = (
    "template_dir",
    "asset_dir",
    "output_dir",
    "scan_root",
    "cache_dir",
)
REQUIRED_CONFIG_KEYS: tuple[str, ...] = ("output_dir", "scan_root")
ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({*PATH_CONFIG_KEYS, "output_extension", "scan_mode"})

OUTPUT_EXTENSION_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z0-9]+$")
