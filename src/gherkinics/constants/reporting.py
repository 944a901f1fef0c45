"""Constants for report file names, templates, and atomic writing."""

from __future__ import annotations

from typing import Literal

DEFAULT_OUTPUT_EXTENSION: str = "html"
INDEX_STEM: str = "index"

INDEX_TEMPLATE: str = "index.html.j2"
FILE_FEEDBACK_TEMPLATE: str = "file_feedback.html.j2"

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".part"

PATH_SEPARATOR: str = "/"
EXTENSION_SEPARATOR: str = "."

# Label used in rendered output for unit-level (unlocated) feedback.
UNLOCATED_LABEL: int = 0

ScanMode = Literal["file", "directory"]
SCAN_MODE_FILE: ScanMode = "file"
SCAN_MODE_DIRECTORY: ScanMode = "directory"
VALID_SCAN_MODES: frozenset[str] = frozenset({SCAN_MODE_FILE, SCAN_MODE_DIRECTORY})
