"""Static asset publishing for rendered reports."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from gherkinics.exceptions import SetupError, WriteError

logger = logging.getLogger(__name__)

AssetPublisher = Callable[[Path, Path], None]


def copy_static_assets(asset_dir: Path, output_dir: Path) -> None:
    """Mirror ``asset_dir`` into ``output_dir/<asset_dir.name>``.

    Existing files are overwritten in place, so repeated copies converge on
    the same tree.
    """
    if not asset_dir.is_dir():
        raise SetupError(f"Static asset directory does not exist or is not a directory: {asset_dir}")

    destination = output_dir / asset_dir.name
    try:
        shutil.copytree(asset_dir, destination, dirs_exist_ok=True)
    except (shutil.Error, OSError) as exc:
        raise WriteError(f"Unable to copy static assets from {asset_dir} to {destination}: {exc}") from exc
    logger.debug("Copied static assets from %s to %s", asset_dir, destination)
