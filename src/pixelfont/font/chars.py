"""
Character Table

Compiled per-character metrics: advance width plus rightward kerning.
Width and kerning share one entry so layout needs a single lookup per
character.  ASCII characters index a flat list directly; anything else goes
through a dictionary and falls back to the default entry.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple

from ..config.settings import ASCII_TABLE_SIZE
from .kerning import KerningSpec
from .width import WidthSpec


@dataclass(frozen=True)
class CharacterEntry:
    """Metrics of one character, as the left-hand side of a pair."""

    width: int = 0
    rightward_kerning: Optional[Dict[str, int]] = None  # right char -> spacing
    default_kerning: int = 0

    def kerning(self, right: str) -> int:
        """Spacing between this character and the character to its right."""
        if self.rightward_kerning is not None:
            return self.rightward_kerning.get(right, self.default_kerning)
        return self.default_kerning


class CharacterTable:
    """
    Total map from characters to their entries.

    A default-constructed table maps everything to a zeroed entry, which is
    only useful as a placeholder.
    """

    def __init__(self, default: Optional[CharacterEntry] = None) -> None:
        self.default = default if default is not None else CharacterEntry()
        self._ascii: List[CharacterEntry] = [self.default] * ASCII_TABLE_SIZE
        self._others: Dict[str, CharacterEntry] = {}

    def __getitem__(self, char: str) -> CharacterEntry:
        code = ord(char)
        if code < ASCII_TABLE_SIZE:
            return self._ascii[code]
        return self._others.get(char, self.default)

    def get(self, char: str) -> CharacterEntry:
        """Get the entry for char (the default entry if unconfigured)."""
        return self[char]

    def __setitem__(self, char: str, entry: CharacterEntry) -> None:
        code = ord(char)
        if code < ASCII_TABLE_SIZE:
            self._ascii[code] = entry
        else:
            self._others[char] = entry

    def overrides(self) -> Iterator[Tuple[str, CharacterEntry]]:
        """Iterate over characters whose entry differs from the default."""
        for code, entry in enumerate(self._ascii):
            if entry is not self.default:
                yield chr(code), entry
        yield from sorted(self._others.items())

    def kerning(self, left: str, right: str) -> int:
        """Spacing between left and right when right immediately follows left."""
        return self[left].kerning(right)


def compile_table(
    width: WidthSpec,
    grid_width: int,
    kerning: KerningSpec,
    default_spacing: int,
) -> CharacterTable:
    """
    Compile width and kerning specifications into a character table.

    Args:
        width: Class-based width overrides
        grid_width: Width of one cell in the glyph grid
        kerning: Class-based kerning specification
        default_spacing: Spacing used between characters with no kerning pair

    Returns:
        Compiled character table

    Raises:
        MissingClassError: If a kerning pair names an undefined class
        OverlyLargeOverrideError: If a width override exceeds grid_width
    """
    kerning_map = kerning.compile()
    width_map = width.into_map(grid_width)

    table = CharacterTable(CharacterEntry(grid_width, None, default_spacing))

    for char, rights in kerning_map.items():
        table[char] = replace(table[char], rightward_kerning=rights)

    for char, char_width in width_map.items():
        table[char] = replace(table[char], width=char_width)

    return table
