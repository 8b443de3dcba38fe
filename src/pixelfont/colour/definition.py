"""
Colour Definitions

True-colour RGBA definitions, stored as bytes.  Palettes and colour
identifiers live with the application; fonts only need a definition to
tint their textures with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Colour component {name} out of range: {value}")

    @classmethod
    def from_hex(cls, text: str) -> Colour:
        """
        Parse '#RRGGBB' or '#RRGGBBAA'.

        Raises:
            ValueError: If text is not a hex colour
        """
        digits = text.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Not a hex colour: {text!r}")
        components = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*components)

    def as_floats(self) -> Tuple[float, float, float, float]:
        """Components normalised to 0-1, as shaders expect them."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


WHITE = Colour(0xFF, 0xFF, 0xFF)
BLACK = Colour(0x00, 0x00, 0x00)
