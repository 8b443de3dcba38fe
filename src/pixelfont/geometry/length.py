"""
Lengths

Pixel lengths and deltas on them share one signed integer type, which
avoids converting back and forth between sizes and offsets.
"""

Length = int


def clamp(length: Length) -> Length:
    """Clamp a length to 0 if it is negative."""
    return max(length, 0)
