from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Tag:
    """A label a test can be marked with.

    Tags compare and hash by their raw string value, so two tags built from the
    same string are the same key in a tag color map.
    """

    raw_value: str

    def __str__(self) -> str:
        return self.raw_value
