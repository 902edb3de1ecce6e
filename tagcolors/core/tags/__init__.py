from .color import Color, TagColorDecodeError
from .tag import Tag

__all__ = ["Color", "Tag", "TagColorDecodeError"]
