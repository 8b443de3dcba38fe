"""
Anchors

Reference edges used to resolve positions within rectangles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .length import Length


class XAnchor(Enum):
    """Horizontal anchor."""

    LEFT = "left"
    RIGHT = "right"

    def offset(self, width: Length) -> Length:
        """
        Offset of this anchor from the left of an object.

        Args:
            width: Width of the object

        Returns:
            0 for LEFT, width for RIGHT
        """
        if self is XAnchor.RIGHT:
            return width
        return 0


class YAnchor(Enum):
    """Vertical anchor."""

    TOP = "top"
    BOTTOM = "bottom"

    def offset(self, height: Length) -> Length:
        """Offset of this anchor from the top of an object of the given height."""
        if self is YAnchor.BOTTOM:
            return height
        return 0


@dataclass(frozen=True)
class Anchor:
    """
    Two-dimensional anchor.

    Top-left is the default, since text in left-to-right scripts
    naturally proceeds from there.
    """

    x: XAnchor = XAnchor.LEFT
    y: YAnchor = YAnchor.TOP

    TOP_LEFT: ClassVar["Anchor"]
    TOP_RIGHT: ClassVar["Anchor"]
    BOTTOM_LEFT: ClassVar["Anchor"]
    BOTTOM_RIGHT: ClassVar["Anchor"]


Anchor.TOP_LEFT = Anchor(XAnchor.LEFT, YAnchor.TOP)
Anchor.TOP_RIGHT = Anchor(XAnchor.RIGHT, YAnchor.TOP)
Anchor.BOTTOM_LEFT = Anchor(XAnchor.LEFT, YAnchor.BOTTOM)
Anchor.BOTTOM_RIGHT = Anchor(XAnchor.RIGHT, YAnchor.BOTTOM)
