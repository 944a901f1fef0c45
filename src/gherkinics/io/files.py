"""Text write helpers with atomic persistence."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

DEFAULT_FILE_MODE: int = 0o666


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Replace ``path`` with ``content`` in one rename.

    The staged file lives beside ``path`` and gets the mode a plain ``open``
    would give it under the current umask, rather than the owner-only mode
    ``tempfile`` creates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    handle = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="",
        dir=path.parent,
        prefix=temp_prefix,
        suffix=temp_suffix,
        delete=False,
    )
    staged = Path(handle.name)
    try:
        with handle:
            handle.write(content)
        os.chmod(staged, DEFAULT_FILE_MODE & ~_current_umask())
        os.replace(staged, path)
    except BaseException:
        staged.unlink(missing_ok=True)
        raise
