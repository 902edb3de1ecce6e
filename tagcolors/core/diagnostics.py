from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import (
    load_tag_color_options,
    resolve_config_directory_path,
    swift_testing_directory_path,
    tag_colors_enabled,
    tag_colors_file_path,
)
from .config.paths import CURRENT_PLATFORM
from .recorder import UseTagColors


@dataclass(frozen=True)
class TagColorsReport:
    platform: str
    resolved_directory: str
    directory: str
    file: str
    file_exists: bool
    enabled: bool
    tag_colors: dict[str, str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": self.platform,
            "resolved_directory": self.resolved_directory,
            "directory": self.directory,
            "file": self.file,
            "file_exists": self.file_exists,
            "enabled": self.enabled,
            "tag_colors": dict(self.tag_colors),
        }


def collect_report(directory_path: str | None = None) -> TagColorsReport:
    """Collect what the loader would see. Read-only."""

    directory = swift_testing_directory_path() if directory_path is None else directory_path
    file = tag_colors_file_path(directory) if directory else ""

    tag_colors: dict[str, str] = {}
    for option in load_tag_color_options(directory):
        if isinstance(option, UseTagColors):
            for tag, color in sorted(option.tag_colors.items()):
                tag_colors[str(tag)] = color.name or color.to_hex()

    return TagColorsReport(
        platform=CURRENT_PLATFORM.value,
        resolved_directory=resolve_config_directory_path(),
        directory=directory,
        file=file,
        file_exists=bool(file) and Path(file).is_file(),
        enabled=tag_colors_enabled(),
        tag_colors=tag_colors,
    )


def format_report_text(report: TagColorsReport) -> str:
    lines: list[str] = []
    lines.append(f"Platform: {report.platform}")
    lines.append(f"Resolved directory: {report.resolved_directory or '(unknown)'}")
    lines.append(f"Directory: {report.directory or '(none)'}")
    if report.file:
        lines.append(f"File: {report.file} ({'found' if report.file_exists else 'missing'})")
    if not report.enabled:
        lines.append("Tag colors: disabled")
        return "\n".join(lines)

    if not report.tag_colors:
        lines.append("Tag colors: (none)")
        return "\n".join(lines)

    lines.append("Tag colors:")
    for tag in sorted(report.tag_colors.keys()):
        lines.append(f"  {tag}: {report.tag_colors[tag]}")
    return "\n".join(lines)
