"""Loading tag colors from `tag-colors.json`.

The file holds a JSON object mapping tag names to colors, e.g.

    {"unit": "red", "slow": "#ff8800", "flaky": null}

A null color means "no color". It lets one configuration source cancel a color
set by another one, and is dropped here before the recorder option is built.

Loading never fails: a missing, unreadable or malformed file simply yields no
options, so a bad config file can't break a test run.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from ..logging_utils import log_throttled
from ..recorder import RecorderOption, UseTagColors
from ..tags import Color, Tag, TagColorDecodeError
from ..utils.exceptions import is_file_missing, is_permission_denied
from .paths import CURRENT_PLATFORM, swift_testing_directory_path


logger = logging.getLogger(__name__)

TAG_COLORS_FILE_NAME = "tag-colors.json"

# Disables tag color support entirely (loader returns no options).
NO_TAG_COLORS_ENV = "SWT_NO_TAG_COLORS"

_TRUTHY = {"1", "true", "yes", "on"}

_WARN_INTERVAL_S = 60.0


def tag_colors_enabled() -> bool:
    return os.environ.get(NO_TAG_COLORS_ENV, "").strip().lower() not in _TRUTHY


def tag_colors_file_path(directory_path: str) -> str:
    return f"{directory_path}{CURRENT_PLATFORM.separator}{TAG_COLORS_FILE_NAME}"


def decode_tag_colors(data: bytes | str) -> dict[Tag, Optional[Color]]:
    """Decode `tag-colors.json` contents, keeping null entries.

    All or nothing: raises TagColorDecodeError if the document is not a JSON
    object or any of its values is not a valid color.
    """

    try:
        loaded = json.loads(data)
    except (ValueError, RecursionError) as exc:
        raise TagColorDecodeError(f"Invalid JSON: {exc}") from exc

    if not isinstance(loaded, dict):
        raise TagColorDecodeError(f"Expected a JSON object, got {type(loaded).__name__}")

    out: dict[Tag, Optional[Color]] = {}
    for name, value in loaded.items():
        try:
            out[Tag(name)] = Color.decode(value)
        except TagColorDecodeError as exc:
            raise TagColorDecodeError(f"Tag {name!r}: {exc}") from exc
    return out


def read_tag_colors(directory_path: str) -> dict[Tag, Color]:
    """Read the tag color map from *directory_path*.

    Raises OSError if the file can't be read and TagColorDecodeError if it
    can't be decoded. Null entries are filtered out of the result.
    """

    data = Path(tag_colors_file_path(directory_path)).read_bytes()
    return {tag: color for tag, color in decode_tag_colors(data).items() if color is not None}


def load_tag_color_options(directory_path: str | None = None) -> list[RecorderOption]:
    """Read tag colors out of `tag-colors.json` in a given directory.

    *directory_path* defaults to the user's `.swift-testing` directory.

    Returns a list with a single UseTagColors option, or an empty list when
    tag colors are disabled, the file can't be read or decoded, or it has no
    non-null entries.
    """

    if not tag_colors_enabled():
        return []

    if directory_path is None:
        directory_path = swift_testing_directory_path()
    if not directory_path:
        logger.debug("No .swift-testing directory; not loading tag colors")
        return []

    try:
        tag_colors = read_tag_colors(directory_path)
    except TagColorDecodeError as exc:
        log_throttled(
            logger,
            f"tag_colors.decode:{directory_path}",
            interval_s=_WARN_INTERVAL_S,
            level=logging.WARNING,
            msg=f"Ignoring malformed {TAG_COLORS_FILE_NAME} in {directory_path!r}: {exc}",
        )
        return []
    except (OSError, ValueError) as exc:
        # ValueError: a path the OS can't represent, e.g. one with a NUL byte.
        _log_read_failure(directory_path, exc)
        return []

    if not tag_colors:
        return []
    return [UseTagColors(tag_colors)]


def _log_read_failure(directory_path: str, exc: Exception) -> None:
    if is_file_missing(exc):
        logger.debug("No %s in %r", TAG_COLORS_FILE_NAME, directory_path)
        return

    reason = "permission denied" if is_permission_denied(exc) else str(exc)
    log_throttled(
        logger,
        f"tag_colors.read:{directory_path}",
        interval_s=_WARN_INTERVAL_S,
        level=logging.WARNING,
        msg=f"Failed to read {TAG_COLORS_FILE_NAME} in {directory_path!r}: {reason}",
    )
