"""Per-user configuration: where it lives and how tag colors are loaded."""

from __future__ import annotations

from .paths import (
    SWIFT_TESTING_DIRECTORY_NAME,
    HomePlatform,
    resolve_config_directory_path,
    swift_testing_directory_path,
)
from .tag_colors import (
    TAG_COLORS_FILE_NAME,
    decode_tag_colors,
    load_tag_color_options,
    read_tag_colors,
    tag_colors_enabled,
    tag_colors_file_path,
)


__all__ = [
    "HomePlatform",
    "SWIFT_TESTING_DIRECTORY_NAME",
    "TAG_COLORS_FILE_NAME",
    "decode_tag_colors",
    "load_tag_color_options",
    "read_tag_colors",
    "resolve_config_directory_path",
    "swift_testing_directory_path",
    "tag_colors_enabled",
    "tag_colors_file_path",
]
