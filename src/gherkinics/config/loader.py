"""Config loading and normalization for report printing."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from gherkinics.config.model import PrinterConfig
from gherkinics.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    OUTPUT_EXTENSION_PATTERN,
    PATH_CONFIG_KEYS,
    REQUIRED_CONFIG_KEYS,
)
from gherkinics.constants.reporting import VALID_SCAN_MODES
from gherkinics.exceptions import ConfigError


def _string_value(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value.strip()


def load_printer_config(path: Path) -> PrinterConfig:
    """Load and validate printer config from a YAML file.

    A directory is searched for ``gherkinics.yaml``. Relative paths are resolved
    against the directory holding the config file.
    """
    path = path.resolve()
    if path.is_dir():
        path = path / CONFIG_FILENAME
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown_keys = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown_keys:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown_keys)}")

    for key in REQUIRED_CONFIG_KEYS:
        if raw.get(key) is None:
            raise ConfigError(f"{key} is required")

    base_dir = path.parent
    paths: dict[str, Path] = {}
    for key in PATH_CONFIG_KEYS:
        value = _string_value(raw, key)
        if value is not None:
            paths[key] = (base_dir / Path(value).expanduser()).resolve()

    options: dict[str, Any] = {}
    output_extension = _string_value(raw, "output_extension")
    if output_extension is not None:
        output_extension = output_extension.lstrip(".")
        if not OUTPUT_EXTENSION_PATTERN.match(output_extension):
            raise ConfigError(f"output_extension must be alphanumeric, got {output_extension!r}")
        options["output_extension"] = output_extension

    scan_mode = _string_value(raw, "scan_mode")
    if scan_mode is not None:
        if scan_mode not in VALID_SCAN_MODES:
            raise ConfigError(f"scan_mode must be one of: {', '.join(sorted(VALID_SCAN_MODES))}")
        options["scan_mode"] = scan_mode

    return PrinterConfig(**paths, **options)
