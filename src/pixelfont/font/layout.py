"""
String Layout

Turns a string into positioned glyphs for one font.

Layout runs a small line state machine over the string:
- '\\r' moves the cursor back to the start of the line, and forgets the last
  character so no kerning applies across it.  The line's width is a running
  sum of glyph widths and kerning, so it keeps growing after a '\\r'.
- '\\n' (and the end of the string) commits the current line: its size is
  stacked under the lines before it, and a fresh line starts one padded line
  further down.
- Anything else is a glyph, advanced past the previous glyph by that glyph's
  width plus the kerning between the pair.

Glyph destinations are grouped by source rectangle, so every occurrence of
the same character in a string shares one entry and can be drawn as one
instanced batch.  Once every line is committed, each line is shifted for the
requested horizontal alignment and the per-line glyph sets are merged.

Layout cannot fail once valid Metrics exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, ItemsView, Iterator, List, Optional, Tuple

from ..geometry import Point, Rect, Size, XAnchor
from .chars import CharacterEntry
from .metrics import Metrics


class GlyphSet:
    """
    Glyph destinations grouped by source rectangle.

    Maps each source rectangle in the font texture to the list of deltas
    (relative to the string's top-left) at which that glyph is drawn.
    Iteration follows first appearance in the string.
    """

    def __init__(self, glyphs: Optional[Dict[Rect, List[Point]]] = None) -> None:
        self._glyphs: Dict[Rect, List[Point]] = glyphs if glyphs is not None else {}

    def add(self, src: Rect, delta: Point) -> None:
        """Record that the glyph at src is drawn at delta."""
        self._glyphs.setdefault(src, []).append(delta)

    def merge(self, other: GlyphSet) -> None:
        """Append every destination in other to this set."""
        for src, deltas in other.items():
            self._glyphs.setdefault(src, []).extend(deltas)

    def shifted(self, dx: int) -> GlyphSet:
        """Return a copy with every delta moved right by dx."""
        return GlyphSet({
            src: [delta.offset(dx, 0) for delta in deltas]
            for src, deltas in self._glyphs.items()
        })

    def items(self) -> ItemsView[Rect, List[Point]]:
        return self._glyphs.items()

    def placements(self) -> Iterator[Tuple[Rect, Point]]:
        """Iterate over every (source, delta) pair."""
        for src, deltas in self._glyphs.items():
            for delta in deltas:
                yield src, delta

    @property
    def instance_count(self) -> int:
        """Total number of glyph placements."""
        return sum(len(deltas) for deltas in self._glyphs.values())

    def __getitem__(self, src: Rect) -> List[Point]:
        return self._glyphs[src]

    def __contains__(self, src: object) -> bool:
        return src in self._glyphs

    def __iter__(self) -> Iterator[Rect]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlyphSet):
            return NotImplemented
        return self._glyphs == other._glyphs

    def __repr__(self) -> str:
        return f"GlyphSet({self._glyphs!r})"


@dataclass(frozen=True)
class LaidOutString:
    """
    A laid-out string.

    The default instance is the empty string, with zero bounds and no glyphs.
    """

    string: str = ""
    bounds: Rect = field(default_factory=Rect)
    glyphs: GlyphSet = field(default_factory=GlyphSet)


@dataclass
class _Line:
    """In-progress line."""

    top: int  # Y of the glyph row, relative to the string's top-left
    top_pad: int  # Padding above the glyph row
    width: int = 0  # Running sum of widths and kerning; not reset by \r
    cursor_x: int = 0
    last_entry: Optional[CharacterEntry] = None
    glyphs: Optional[GlyphSet] = None


class LayoutBuilder:
    """
    Lays out strings against one set of font metrics.

    Args:
        metrics: Font metrics to lay out against
        alignment: Horizontal alignment applied to each line
        record_glyphs: If False, only the bounds are computed (dry runs)
    """

    def __init__(
        self,
        metrics: Metrics,
        alignment: XAnchor = XAnchor.LEFT,
        record_glyphs: bool = True,
    ) -> None:
        self.metrics = metrics
        self.alignment = alignment
        self.record_glyphs = record_glyphs
        self._char_h = metrics.char.h
        self._pad_h = metrics.pad.h
        self._reset()

    def _reset(self) -> None:
        self._size = Size()
        self._lines: List[Tuple[int, GlyphSet]] = []
        self._line = self._new_line(top=0, top_pad=0)

    def _new_line(self, top: int, top_pad: int) -> _Line:
        glyphs = GlyphSet() if self.record_glyphs else None
        return _Line(top=top, top_pad=top_pad, glyphs=glyphs)

    def build(self, string: str, top_left: Point = Point()) -> LaidOutString:
        """
        Lay out string with its top-left at top_left.

        Args:
            string: String to lay out
            top_left: Top-left of the resulting bounds

        Returns:
            Laid-out string; glyph deltas are relative to top_left
        """
        if not string:
            return LaidOutString()

        self._run(string)
        glyphs = self._realign()
        return LaidOutString(string=string, bounds=Rect(top_left, self._size), glyphs=glyphs)

    def dry_run(self, string: str) -> Rect:
        """Compute the bounds string would occupy, without recording glyphs."""
        if not string:
            return Rect()

        record_glyphs = self.record_glyphs
        self.record_glyphs = False
        try:
            self._run(string)
        finally:
            self.record_glyphs = record_glyphs
        return Rect(Point(), self._size)

    def _run(self, string: str) -> None:
        self._reset()
        for char in string:
            if char == "\r":
                self._carriage_return()
            elif char == "\n":
                self._line_feed()
            else:
                self._layout_char(char)
        # Implicit line feed commits the last line
        self._line_feed()

    def _carriage_return(self) -> None:
        self._line.cursor_x = 0
        self._line.last_entry = None

    def _line_feed(self) -> None:
        line = self._line
        self._size = self._size.stack_vertically(Size(line.width, line.top_pad + self._char_h))
        if line.glyphs is not None:
            self._lines.append((line.width, line.glyphs))
        self._line = self._new_line(top=self._size.h + self._pad_h, top_pad=self._pad_h)

    def _layout_char(self, char: str) -> None:
        line = self._line
        entry = self.metrics.table[char]

        if line.last_entry is not None:
            kerning = line.last_entry.kerning(char)
            line.cursor_x += line.last_entry.width + kerning
            line.width += kerning
        line.last_entry = entry
        line.width += entry.width

        if line.glyphs is not None:
            src = self.metrics.glyph_rect(char)
            line.glyphs.add(src, Point(line.cursor_x, line.top))

    def _realign(self) -> GlyphSet:
        merged = GlyphSet()
        total_w = self._size.w
        for line_w, glyphs in self._lines:
            if self.alignment is not XAnchor.LEFT:
                dx = self.alignment.offset(total_w) - self.alignment.offset(line_w)
                if dx:
                    glyphs = glyphs.shifted(dx)
            merged.merge(glyphs)
        return merged


def layout(metrics: Metrics, string: str, start: Point = Point()) -> LaidOutString:
    """Lay out a left-aligned string whose top-left is start."""
    return LayoutBuilder(metrics).build(string, start)


def layout_with_alignment(
    metrics: Metrics,
    string: str,
    alignment: XAnchor,
    pos: Point = Point(),
) -> LaidOutString:
    """
    Lay out a string with every line aligned to alignment.

    Args:
        metrics: Font metrics
        string: String to lay out
        alignment: Horizontal alignment of each line within the bounds
        pos: Point on the top edge of the bounds that the alignment anchors to

    Returns:
        Laid-out string
    """
    builder = LayoutBuilder(metrics, alignment=alignment)
    laid_out = builder.build(string)
    if not string:
        return laid_out

    top_left = pos.offset(-alignment.offset(laid_out.bounds.size.w), 0)
    return LaidOutString(
        string=laid_out.string,
        bounds=Rect(top_left, laid_out.bounds.size),
        glyphs=laid_out.glyphs,
    )


def dry_run(metrics: Metrics, string: str) -> Rect:
    """Measure string without recording glyphs; the size matches layout()."""
    return LayoutBuilder(metrics, record_glyphs=False).dry_run(string)
