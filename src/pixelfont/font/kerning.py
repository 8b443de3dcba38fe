"""
Kerning

Class-based kerning, loosely modelled on OpenType class kerning: a
left-class table, a right-class table, and pairwise spacings between them.

The class names refer to the characters' positions either side of the space
being kerned, so left classes usually group characters by their right edge
and vice versa.  Pair spacings are absolute: they replace the font's default
spacing rather than adjusting it.  Pairs only apply in the direction given;
no mirrored pair is derived.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from .errors import Direction, MetricsParseError, MissingClassError

ClassTable = Dict[str, str]
PairTable = Dict[Tuple[str, str], int]
KerningMap = Dict[str, Dict[str, int]]


@dataclass
class KerningSpec:
    """A complete kerning specification."""

    left: ClassTable = field(default_factory=dict)
    right: ClassTable = field(default_factory=dict)
    pairs: PairTable = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KerningSpec":
        """
        Parse a kerning table from a metrics file.

        Pairs may be given as a nested table (left class -> right class ->
        spacing), or as a list of [left class, right class, spacing] triples.

        Raises:
            MetricsParseError: If the table has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise MetricsParseError("kerning must be a table")

        left = _parse_class_table(data.get("left", {}), Direction.LEFT)
        right = _parse_class_table(data.get("right", {}), Direction.RIGHT)
        pairs = _parse_pairs(data.get("pairs", {}))
        return cls(left=left, right=right, pairs=pairs)

    def class_table(self, direction: Direction) -> ClassTable:
        """Get the class table for one side of a pair."""
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def resolve_class(self, direction: Direction, class_name: str) -> str:
        """
        Resolve a class name to its character set.

        Raises:
            MissingClassError: If the class is not in the table for direction
        """
        try:
            return self.class_table(direction)[class_name]
        except KeyError:
            raise MissingClassError(direction, class_name) from None

    def compile(self) -> KerningMap:
        """
        Compile this specification into a left char -> right char -> spacing map.

        Raises:
            MissingClassError: If a pair refers to a missing class
        """
        kerning_pairs: KerningMap = {}
        for (left_class, right_class), length in self.pairs.items():
            lefts = self.resolve_class(Direction.LEFT, left_class)
            rights = self.resolve_class(Direction.RIGHT, right_class)
            for left_char in lefts:
                row = kerning_pairs.setdefault(left_char, {})
                for right_char in rights:
                    row[right_char] = length
        return kerning_pairs


def _parse_class_table(data: Any, direction: Direction) -> ClassTable:
    if not isinstance(data, Mapping):
        raise MetricsParseError(f"kerning.{direction.value} must be a table")
    table = {}
    for name, chars in data.items():
        if not isinstance(chars, str):
            raise MetricsParseError(
                f"kerning.{direction.value}.{name} must be a string of characters"
            )
        table[str(name)] = chars
    return table


def _parse_pairs(data: Any) -> PairTable:
    pairs: PairTable = {}
    if isinstance(data, Mapping):
        for left_class, rights in data.items():
            if not isinstance(rights, Mapping):
                raise MetricsParseError(f"kerning.pairs.{left_class} must be a table")
            for right_class, length in rights.items():
                pairs[(str(left_class), str(right_class))] = _pair_length(length)
    elif isinstance(data, (list, tuple)):
        for entry in data:
            if not isinstance(entry, (list, tuple)) or len(entry) != 3:
                raise MetricsParseError(
                    f"kerning pair must be [left, right, spacing], got {entry!r}"
                )
            left_class, right_class, length = entry
            pairs[(str(left_class), str(right_class))] = _pair_length(length)
    else:
        raise MetricsParseError("kerning.pairs must be a table or a list")
    return pairs


def _pair_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise MetricsParseError(f"kerning spacing must be an integer, got {length!r}")
    return length
