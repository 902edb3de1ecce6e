"""Tag color configuration for test result recorders.

Resolves the per-user `.swift-testing` directory and loads the optional
`tag-colors.json` file found inside it.
"""

from __future__ import annotations

from .core.config import load_tag_color_options, resolve_config_directory_path, swift_testing_directory_path
from .core.recorder import RecorderOption, UseTagColors
from .core.tags import Color, Tag, TagColorDecodeError

__all__ = [
    "Color",
    "RecorderOption",
    "Tag",
    "TagColorDecodeError",
    "UseTagColors",
    "load_tag_color_options",
    "resolve_config_directory_path",
    "swift_testing_directory_path",
]
