"""
Text Writer

Positioned, aligned writing of one string in one font.  The writer owns
its laid-out string and only re-lays it out when something that affects
layout (string, position, font or alignment) has changed.
"""

from __future__ import annotations

from typing import Any, Optional

from ..font.layout import LaidOutString, layout_with_alignment
from ..font.metrics import Metrics
from ..font.resource import ResourceMap
from ..font.spec import FontSpec
from ..geometry import Point, Rect, XAnchor
from ..rendering.renderer import Renderer


class Writer:
    """
    Helper for positioned writing of strings.

    Args:
        font: Font and foreground colour to write with
        pos: Point the string is anchored to
        alignment: Which horizontal edge of the string sits at pos
        string: Initial string
    """

    def __init__(
        self,
        font: FontSpec,
        pos: Point = Point(),
        alignment: XAnchor = XAnchor.LEFT,
        string: str = "",
    ) -> None:
        self.font = font
        self.pos = pos
        self.alignment = alignment
        self.string = string

        self._laid_out = LaidOutString()
        self._dirty = True

    @property
    def laid_out(self) -> LaidOutString:
        """The most recent layout (empty until layout() is called)."""
        return self._laid_out

    @property
    def bounds(self) -> Rect:
        """Bounds of the most recent layout."""
        return self._laid_out.bounds

    @property
    def needs_layout(self) -> bool:
        return self._dirty

    def set_font(self, font_id: Any) -> None:
        if font_id != self.font.id:
            self.font = FontSpec(font_id, self.font.colour)
            self._dirty = True

    def set_colour(self, colour: Any) -> None:
        # Colour doesn't affect layout
        self.font = FontSpec(self.font.id, colour)

    def move_to(self, pos: Point) -> None:
        if pos != self.pos:
            self.pos = pos
            self._dirty = True

    def align_to(self, alignment: XAnchor) -> None:
        if alignment is not self.alignment:
            self.alignment = alignment
            self._dirty = True

    def set_string(self, string: Any) -> None:
        """Set the string to write; non-strings are converted with str()."""
        string = str(string)
        if string != self.string:
            self.string = string
            self._dirty = True

    def layout(self, metrics: ResourceMap[Any, Metrics]) -> LaidOutString:
        """
        Lay out the string if anything changed since the last layout.

        Args:
            metrics: Metrics map containing the writer's font

        Returns:
            Current laid-out string
        """
        if self._dirty:
            font_metrics = metrics.get(self.font.id)
            self._laid_out = layout_with_alignment(font_metrics, self.string, self.alignment, self.pos)
            self._dirty = False
        return self._laid_out

    def render(self, renderer: Renderer, metrics: Optional[ResourceMap[Any, Metrics]] = None) -> None:
        """
        Write the string through renderer, laying it out first if needed.

        Args:
            renderer: Renderer to draw through
            metrics: Metrics map to lay out with (defaults to the renderer's)
        """
        self.layout(metrics if metrics is not None else renderer.font_metrics)
        renderer.write(self.font, self._laid_out)
