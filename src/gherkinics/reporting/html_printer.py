"""HTML report printer.

Builds per-unit metadata, renders one detail page per scanned unit plus an
index page through Jinja2, and publishes the static assets those pages link to.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemBytecodeCache, FileSystemLoader, StrictUndefined, TemplateError

from gherkinics.constants.reporting import (
    DEFAULT_OUTPUT_EXTENSION,
    FILE_FEEDBACK_TEMPLATE,
    INDEX_STEM,
    INDEX_TEMPLATE,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCAN_MODE_FILE,
    VALID_SCAN_MODES,
    ScanMode,
)
from gherkinics.exceptions import ConfigError, RenderError, SetupError, WriteError
from gherkinics.feedback import GroupedFeedback, SupportsGroupedFeedback
from gherkinics.io import write_text_atomic
from gherkinics.model import LocationKey, ScannedUnitMetadata
from gherkinics.reporting.assets import AssetPublisher, copy_static_assets
from gherkinics.reporting.metadata import build_unit_metadata

if TYPE_CHECKING:
    from gherkinics.config import PrinterConfig

logger = logging.getLogger(__name__)


def _prepare_output_dir(output_dir: Path) -> None:
    if output_dir.exists() and not output_dir.is_dir():
        raise SetupError(f"The path ({output_dir}) exists but is not a directory.")
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SetupError(f"Unable to create the report directory {output_dir}: {exc}") from exc


def _sorted_feedback(feedback: SupportsGroupedFeedback) -> GroupedFeedback:
    """Normalize keys from any feeder and guarantee ascending order."""
    grouped = [(LocationKey.coerce(key), tuple(messages)) for key, messages in feedback.all_grouped_by_location()]
    return sorted(grouped, key=lambda item: item[0].sort_key())


class HtmlPrinter:
    """Render scan feedback into an index page and per-unit detail pages."""

    def __init__(
        self,
        template_dir: Path,
        asset_dir: Path,
        output_dir: Path,
        scan_root: str | PurePath,
        cache_dir: Path | None = None,
        *,
        asset_publisher: AssetPublisher = copy_static_assets,
        output_extension: str = DEFAULT_OUTPUT_EXTENSION,
        scan_mode: ScanMode | None = None,
    ) -> None:
        self.template_dir = Path(template_dir)
        self.asset_dir = Path(asset_dir)
        self.output_dir = Path(output_dir)
        self.scan_root = scan_root
        self.output_extension = output_extension
        self.scan_mode = scan_mode
        self._asset_publisher = asset_publisher

        bytecode_cache = None
        if cache_dir is not None:
            cache_path = Path(cache_dir)
            _prepare_output_dir(cache_path)
            bytecode_cache = FileSystemBytecodeCache(str(cache_path))

        self.environment = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            bytecode_cache=bytecode_cache,
        )

        _prepare_output_dir(self.output_dir)

    @classmethod
    def from_config(cls, config: PrinterConfig, *, asset_publisher: AssetPublisher = copy_static_assets) -> HtmlPrinter:
        return cls(
            config.template_dir,
            config.asset_dir,
            config.output_dir,
            config.scan_root,
            config.cache_dir,
            asset_publisher=asset_publisher,
            output_extension=config.output_extension,
            scan_mode=config.scan_mode,
        )

    def print_reports(
        self,
        unit_feedback_map: Mapping[str | PurePath, SupportsGroupedFeedback],
        *,
        scan_mode: ScanMode | None = None,
    ) -> dict[str | PurePath, ScannedUnitMetadata]:
        """Write detail pages, the index page, and static assets.

        ``scan_mode="file"`` keeps unit paths verbatim, ``"directory"`` strips
        the scan root. When neither the call nor the printer sets a mode, a map
        holding exactly one unit is treated as a single-file scan. The returned
        metadata is keyed by the paths exactly as given in ``unit_feedback_map``.
        """
        if scan_mode is None:
            scan_mode = self.scan_mode
        if scan_mode is None:
            single_file = len(unit_feedback_map) == 1
        elif scan_mode in VALID_SCAN_MODES:
            single_file = scan_mode == SCAN_MODE_FILE
        else:
            raise ConfigError(
                f"Unknown scan mode: {scan_mode}. Valid modes: {', '.join(sorted(VALID_SCAN_MODES))}"
            )
        if not self.asset_dir.is_dir():
            raise SetupError(f"Static asset directory does not exist or is not a directory: {self.asset_dir}")

        metadata_by_path: dict[str | PurePath, ScannedUnitMetadata] = {}
        feedback_by_path: dict[str | PurePath, GroupedFeedback] = {}
        for unit_path, feedback in unit_feedback_map.items():
            metadata_by_path[unit_path] = build_unit_metadata(
                self.scan_root, unit_path, feedback, single_file=single_file
            )
            feedback_by_path[unit_path] = _sorted_feedback(feedback)

        for unit_path, metadata in metadata_by_path.items():
            self._print_unit_report(metadata, feedback_by_path[unit_path])
        self._print_summary(metadata_by_path)
        self._asset_publisher(self.asset_dir, self.output_dir)

        logger.info("Wrote reports for %d scanned units to %s", len(metadata_by_path), self.output_dir)
        return metadata_by_path

    def render(self, template_name: str, variables: Mapping[str, object] | None = None) -> str:
        """Render ``template_name`` with ``variables``; failures raise ``RenderError``."""
        try:
            template = self.environment.get_template(template_name)
            return template.render(dict(variables or {}))
        except TemplateError as exc:
            raise RenderError(template_name, str(exc)) from exc

    def _output_name(self, stem: str) -> str:
        return f"{stem}.{self.output_extension}"

    def _export(self, template_name: str, output_name: str, variables: Mapping[str, object]) -> Path:
        output = self.render(template_name, variables)
        path = self.output_dir / output_name
        try:
            write_text_atomic(
                path=path,
                content=output,
                temp_prefix=REPORT_TEMP_PREFIX,
                temp_suffix=REPORT_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise WriteError(f"Unable to write report {path}: {exc}") from exc
        logger.debug("Wrote %s from template %s", path, template_name)
        return path

    def _print_summary(self, metadata_by_path: Mapping[str | PurePath, ScannedUnitMetadata]) -> Path:
        units = {
            metadata.path: metadata.to_dict()
            for metadata in sorted(metadata_by_path.values(), key=lambda item: item.path)
        }
        maximum_violated_line_count = max(
            (metadata.violated_line_count for metadata in metadata_by_path.values()),
            default=0,
        )
        return self._export(
            INDEX_TEMPLATE,
            self._output_name(INDEX_STEM),
            {
                "units": units,
                "unit_count": len(units),
                "maximum_violated_line_count": maximum_violated_line_count,
                "output_extension": self.output_extension,
                "asset_dir_name": self.asset_dir.name,
            },
        )

    def _print_unit_report(self, metadata: ScannedUnitMetadata, feedback: GroupedFeedback) -> Path:
        variables = {
            "feedback": feedback,
            "unit": metadata.to_dict(),
            "output_extension": self.output_extension,
            "asset_dir_name": self.asset_dir.name,
        }
        try:
            return self._export(FILE_FEEDBACK_TEMPLATE, self._output_name(metadata.hash), variables)
        except RenderError as exc:
            raise RenderError(FILE_FEEDBACK_TEMPLATE, str(exc.__cause__), unit_path=metadata.path) from exc
