"""Shared pytest fixtures for report printing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gherkinics.constants.config import DEFAULT_ASSET_DIR, DEFAULT_TEMPLATE_DIR
from gherkinics.feedback import FeedbackCollector
from gherkinics.model import Token


@pytest.fixture(scope="session")
def template_dir() -> Path:
    """Return the packaged Jinja2 template directory."""
    return DEFAULT_TEMPLATE_DIR


@pytest.fixture(scope="session")
def asset_dir() -> Path:
    """Return the packaged static asset directory."""
    return DEFAULT_ASSET_DIR


@pytest.fixture
def scan_root(tmp_path: Path) -> Path:
    """Return an empty scan root inside the test's temp directory."""
    root = tmp_path / "scan"
    root.mkdir()
    return root


@pytest.fixture
def two_unit_feedback(scan_root: Path) -> dict[str, FeedbackCollector]:
    """Feedback for ``a.txt`` (lines 1 and 3) and ``b.txt`` (no messages)."""
    first = FeedbackCollector()
    first.set_current_location(Token(3))
    first.add("Trailing whitespace")
    first.set_current_location(Token(1))
    first.add("Missing feature title")
    first.add("Step should start with Given")

    return {
        f"{scan_root.as_posix()}/a.txt": first,
        f"{scan_root.as_posix()}/b.txt": FeedbackCollector(),
    }
