"""Relative-path, naming, and hash metadata for scanned units."""

from __future__ import annotations

import hashlib
import logging
from pathlib import PurePath

from gherkinics.constants.reporting import EXTENSION_SEPARATOR, PATH_SEPARATOR
from gherkinics.exceptions import MetadataParseError
from gherkinics.feedback import SupportsGroupedFeedback
from gherkinics.model import ScannedUnitMetadata

logger = logging.getLogger(__name__)


def _as_posix(path: str | PurePath) -> str:
    if isinstance(path, PurePath):
        return path.as_posix()
    return path


def relative_unit_path(scan_root: str | PurePath, unit_path: str | PurePath, *, single_file: bool) -> str:
    """Return the report-facing path for ``unit_path``.

    Single-file scans keep the path verbatim; otherwise the scan root and one
    separator are stripped.
    """
    unit = _as_posix(unit_path)
    if single_file:
        return unit

    root = _as_posix(scan_root).rstrip(PATH_SEPARATOR)
    prefix = root + PATH_SEPARATOR
    if not unit.startswith(prefix):
        logger.warning("Scanned unit %s is outside scan root %s; keeping full path", unit, root or PATH_SEPARATOR)
        return unit
    return unit[len(prefix) :]


def split_relative_path(relative_path: str) -> tuple[str, str, str]:
    """Split ``relative_path`` into ``(directory, name, extension)``.

    The name ends at the first dot of the last segment that follows a non-dot
    character, so ``lib/a.tar.gz`` gives ``("lib", "a", "tar.gz")``. Segments
    with no such dot (``Makefile``, ``.env``) get an empty extension.
    """
    if not relative_path:
        raise MetadataParseError("Cannot derive report metadata from an empty path")

    directory, _, base = relative_path.rpartition(PATH_SEPARATOR)
    if not base:
        raise MetadataParseError(f"Cannot derive a file name from path ending in a separator: {relative_path}")

    leading = len(base) - len(base.lstrip(EXTENSION_SEPARATOR))
    stem, dot, extension = base[leading:].partition(EXTENSION_SEPARATOR)
    if not stem or not dot:
        logger.debug("No extension found in %s; using empty extension", relative_path)
        return directory, base, ""
    return directory, base[:leading] + stem, extension


def relative_path_digest(relative_path: str) -> str:
    """Stable output-file stem for a unit: SHA-1 of its relative path."""
    return hashlib.sha1(relative_path.encode("utf-8")).hexdigest()


def build_unit_metadata(
    scan_root: str | PurePath,
    unit_path: str | PurePath,
    feedback: SupportsGroupedFeedback,
    *,
    single_file: bool,
) -> ScannedUnitMetadata:
    """Derive path, naming, hash, and violation counts for one scanned unit."""
    relative_path = relative_unit_path(scan_root, unit_path, single_file=single_file)
    directory, name, extension = split_relative_path(relative_path)
    grouped = feedback.all_grouped_by_location()

    return ScannedUnitMetadata(
        source_path=_as_posix(unit_path),
        path=relative_path,
        directory=directory,
        name=name,
        extension=extension,
        hash=relative_path_digest(relative_path),
        violated_line_count=len(grouped),
        message_count=sum(len(messages) for _, messages in grouped),
    )
