"""
Font Metrics

Grid geometry plus the compiled character table for one font. Metrics
are built once, when a font is loaded, and are read-only afterwards.

The font texture is a fixed grid of NUM_COLS columns; the glyph for a
single-byte character code c sits in column c % NUM_COLS, row c // NUM_COLS.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from pathlib import Path

from ..config.settings import BYTE_GLYPH_LIMIT, NUM_COLS
from ..geometry import Anchor, Point, Rect, Size, XAnchor
from .chars import CharacterTable, compile_table
from .errors import MetricsParseError
from .kerning import KerningSpec
from .width import WidthSpec


@dataclass
class MetricsSpec:
    """
    On-disk font metrics specification.

    Expanded into a Metrics set with into_metrics() before use.
    """

    char: Size  # Size of one grid cell, without padding
    pad: Size  # Padding between characters and lines
    width_overrides: WidthSpec = field(default_factory=WidthSpec)
    kerning: KerningSpec = field(default_factory=KerningSpec)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: Optional[Path] = None) -> MetricsSpec:
        """
        Parse a metrics specification from a decoded metrics file.

        Args:
            data: Decoded TOML or JSON document
            path: File the document came from, for error messages

        Returns:
            Parsed specification

        Raises:
            MetricsParseError: If required keys are missing or mistyped
        """
        try:
            char = _parse_size(data, "char")
            pad = _parse_size(data, "pad")
            width_overrides = WidthSpec.from_dict(data.get("width_overrides", {}))
            kerning = KerningSpec.from_dict(data.get("kerning", {}))
        except MetricsParseError as exc:
            if path is None or exc.path is not None:
                raise
            raise MetricsParseError(str(exc), path) from exc
        return cls(char=char, pad=pad, width_overrides=width_overrides, kerning=kerning)

    def into_metrics(self) -> Metrics:
        """
        Compile this specification into a full metrics set.

        Raises:
            MissingClassError: If kerning refers to an undefined class
            OverlyLargeOverrideError: If a width override is wider than the grid
        """
        table = compile_table(self.width_overrides, self.char.w, self.kerning, self.pad.w)
        return Metrics(char=self.char, pad=self.pad, table=table)


def _parse_size(data: Mapping[str, Any], key: str) -> Size:
    if not isinstance(data, Mapping):
        raise MetricsParseError("metrics document must be a table")
    if key not in data:
        raise MetricsParseError(f"missing required key {key!r}")
    value = data[key]
    if not isinstance(value, Mapping):
        raise MetricsParseError(f"{key} must be a table with w and h")
    try:
        w, h = value["w"], value["h"]
    except KeyError as exc:
        raise MetricsParseError(f"{key} is missing {exc.args[0]!r}") from None
    for name, length in (("w", w), ("h", h)):
        if isinstance(length, bool) or not isinstance(length, int):
            raise MetricsParseError(f"{key}.{name} must be an integer, got {length!r}")
    return Size(w, h)


@dataclass
class Metrics:
    """
    A font metrics set.

    The default set is all zero, and is only useful as a stand-in when a
    font's real metrics are missing.
    """

    char: Size = field(default_factory=Size)
    pad: Size = field(default_factory=Size)
    table: CharacterTable = field(default_factory=CharacterTable)

    @property
    def padded_w(self) -> int:
        """Padded width of one character."""
        return self.char.w + self.pad.w

    @property
    def padded_h(self) -> int:
        """Padded height of one character."""
        return self.char.h + self.pad.h

    def span_w(self, size: int) -> int:
        """
        Signed maximal width of a span size characters wide.

        Ignores kerning and proportional widths, so it may overestimate on
        proportional fonts; useful for aligning things to the character grid.
        """
        return self.padded_w * size

    def span_w_str(self, string: str) -> int:
        """
        Exact width of string, laid out as text rendering would lay it out.

        For multi-line strings this is the width of the widest line.
        """
        # Local import: layout depends on Metrics
        from .layout import dry_run

        return dry_run(self, string).size.w

    def span_w_char(self, char: str) -> int:
        """Width of char, including any proportional override."""
        return self.table[char].width

    def x_anchor_of_str(self, string: str, anchor: XAnchor) -> int:
        """Relative X coordinate of anchor within string."""
        if anchor is XAnchor.LEFT:
            return 0
        return anchor.offset(self.span_w_str(string))

    def span_h(self, size: int) -> int:
        """Signed maximal height of a span size characters tall."""
        return self.padded_h * size

    def text_size(self, w_chars: int, h_chars: int) -> Size:
        """Convert a size in characters into a size in pixels."""
        return Size(self.span_w(w_chars), self.span_h(h_chars))

    def glyph_top_left(self, char: str) -> Point:
        """
        Top-left of the glyph for char in the font texture.

        Characters outside the single-byte range have no grid cell and map
        to the origin.
        """
        code = ord(char)
        if code >= BYTE_GLYPH_LIMIT:
            return Point()
        return Point(code % NUM_COLS * self.padded_w, code // NUM_COLS * self.padded_h)

    def glyph_rect(self, char: str) -> Rect:
        """Source rectangle of the glyph for char in the font texture."""
        size = Size(self.table[char].width, self.char.h)
        return self.glyph_top_left(char).to_rect(size, Anchor.TOP_LEFT)
