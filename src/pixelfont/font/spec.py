"""
Font Specifications

A font specification pairs a font identifier with a foreground colour
identifier; the font manager keys its cache on it.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

FontId = TypeVar("FontId")
ColourId = TypeVar("ColourId")


@dataclass(frozen=True)
class FontSpec(Generic[FontId, ColourId]):
    """A font identifier plus foreground colour identifier."""

    id: FontId
    colour: ColourId


@dataclass(frozen=True)
class FontIndex:
    """
    Handle to a loaded font in a FontManager's cache.

    The default index is a sentinel meaning "unresolved".
    """

    value: int = -1

    @property
    def is_resolved(self) -> bool:
        return self.value >= 0


UNRESOLVED = FontIndex()
