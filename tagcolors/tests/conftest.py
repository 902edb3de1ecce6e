from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest


# Safety default: during pytest, never read the user's real .swift-testing
# directory.
os.environ.setdefault("SWT_TESTING_DIR", tempfile.mkdtemp(prefix="tagcolors-test-config-"))


@pytest.fixture(autouse=True)
def _reset_log_throttle():
    from tagcolors.core.logging_utils import reset_throttle

    reset_throttle()
    yield
    reset_throttle()


@pytest.fixture(autouse=True)
def _tag_colors_enabled(monkeypatch):
    monkeypatch.delenv("SWT_NO_TAG_COLORS", raising=False)


@pytest.fixture
def swift_testing_dir(tmp_path: Path) -> Path:
    """Create an empty `.swift-testing` directory."""
    d = tmp_path / ".swift-testing"
    d.mkdir()
    return d


@pytest.fixture
def write_tag_colors(swift_testing_dir: Path):
    """Write `tag-colors.json` into the temp `.swift-testing` directory."""

    def _write(content: str | bytes) -> Path:
        path = swift_testing_dir / "tag-colors.json"
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
