"""Options consumed by the test result recorder.

The recorder itself lives outside this package; these are plain values it
reads to configure its output.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ..tags import Color, Tag


class RecorderOption(ABC):
    """Base class for recorder configuration directives."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...


@dataclass(frozen=True, eq=True)
class UseTagColors(RecorderOption):
    """Render tags with these colors.

    The map is copied into a read-only view, so later changes to the caller's
    dict don't leak into the option.
    """

    tag_colors: Mapping[Tag, Color]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag_colors", MappingProxyType(dict(self.tag_colors)))

    def __hash__(self) -> int:
        return hash(frozenset(self.tag_colors.items()))

    def to_dict(self) -> dict[str, Any]:
        return {
            "use_tag_colors": {str(tag): color.to_hex() for tag, color in sorted(self.tag_colors.items())},
        }
