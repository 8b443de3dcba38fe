"""Pixel geometry: lengths, points, sizes, rectangles and anchors"""
from .length import Length, clamp
from .anchor import Anchor, XAnchor, YAnchor
from .shapes import Point, Size, Rect

__all__ = [
    "Length",
    "clamp",
    "Anchor",
    "XAnchor",
    "YAnchor",
    "Point",
    "Size",
    "Rect",
]
