"""
Shapes

Output-independent points, sizes and rectangles in pixel space.
All three are immutable value types, so they can key dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .anchor import Anchor, XAnchor, YAnchor
from .length import Length, clamp


@dataclass(frozen=True)
class Point:
    """A two-dimensional point; coordinates may be negative for relative offsets."""

    x: Length = 0
    y: Length = 0

    def offset(self, dx: Length, dy: Length) -> Point:
        """Return this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def to_rect(self, size: Size, anchor: Anchor = Anchor.TOP_LEFT) -> Rect:
        """
        Lift this point to a rectangle.

        Args:
            size: Size of the new rectangle
            anchor: Which point of the new rectangle this point becomes

        Returns:
            Rectangle of the given size anchored at this point
        """
        top_left = self.offset(-anchor.x.offset(size.w), -anchor.y.offset(size.h))
        return Rect(top_left, size)


@dataclass(frozen=True)
class Size:
    """A two-dimensional size."""

    w: Length = 0
    h: Length = 0

    def grow(self, amount: Length) -> Size:
        """Grow both dimensions by amount; neither shrinks past 0."""
        return Size(clamp(self.w + amount), clamp(self.h + amount))

    def clamp(self) -> Size:
        """Clamp negative dimensions to zero."""
        return self.grow(0)

    def stack_vertically(self, other: Size) -> Size:
        """Maximum of both sizes horizontally, their sum vertically."""
        return Size(max(self.w, other.w), self.h + other.h)

    def stack_horizontally(self, other: Size) -> Size:
        """Sum of both sizes horizontally, their maximum vertically."""
        return Size(self.w + other.w, max(self.h, other.h))

    def is_zero(self) -> bool:
        """Whether either dimension is zero (or negative)."""
        return self.w <= 0 or self.h <= 0

    def is_normal(self) -> bool:
        """Whether both dimensions are non-negative."""
        return self.w >= 0 and self.h >= 0


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left point and its size."""

    top_left: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @classmethod
    def new(cls, x: Length, y: Length, w: Length, h: Length) -> Rect:
        """Make a rectangle with top-left at (x, y), width w and height h."""
        return cls(Point(x, y), Size(w, h))

    @classmethod
    def from_points(cls, top_left: Point, bottom_right: Point) -> Rect:
        """
        Make a rectangle spanning two points.

        If bottom_right is not below and right of top_left, the affected
        dimension collapses to zero.
        """
        size = Size(bottom_right.x - top_left.x, bottom_right.y - top_left.y).clamp()
        return cls(top_left, size)

    def x(self, dx: Length, anchor: XAnchor) -> Length:
        """Resolve an X coordinate at offset dx from the given anchor."""
        return self.top_left.x + dx + anchor.offset(self.size.w)

    def y(self, dy: Length, anchor: YAnchor) -> Length:
        """Resolve a Y coordinate at offset dy from the given anchor."""
        return self.top_left.y + dy + anchor.offset(self.size.h)

    def point(self, dx: Length, dy: Length, anchor: Anchor) -> Point:
        """Resolve a point at offset (dx, dy) from the given anchor."""
        return Point(self.x(dx, anchor.x), self.y(dy, anchor.y))

    def anchor(self, anchor: Anchor) -> Point:
        """Shorthand for the anchor point itself."""
        return self.point(0, 0, anchor)

    def grow(self, amount: Length) -> Rect:
        """Grow the rectangle by amount on each side (negative to shrink)."""
        return Rect(self.top_left.offset(-amount, -amount), self.size.grow(amount * 2))
