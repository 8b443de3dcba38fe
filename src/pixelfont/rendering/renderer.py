"""
Renderers

The Renderer protocol is what text composition draws through; backends
implement it.  RecordingRenderer implements it by recording each command
instead of drawing, which is handy for tests and for inspecting output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Protocol, Union

from ..font.layout import LaidOutString
from ..font.metrics import Metrics
from ..font.resource import ResourceMap
from ..font.spec import FontSpec
from ..geometry import Rect


class Renderer(Protocol):
    """Low-level rendering facilities."""

    @property
    def font_metrics(self) -> ResourceMap[Any, Metrics]:
        """Metrics for every font the renderer can draw with."""
        ...

    def write(self, font: FontSpec, laid_out: LaidOutString) -> None:
        """Draw a laid-out string in the given font."""
        ...

    def fill(self, rect: Rect, colour: Any) -> None:
        """Fill rect with a background colour."""
        ...

    def clear(self, colour: Any) -> None:
        """Clear the screen to a background colour."""
        ...

    def present(self) -> None:
        """Show everything drawn since the last present."""
        ...


@dataclass(frozen=True)
class WriteCommand:
    font: FontSpec
    laid_out: LaidOutString


@dataclass(frozen=True)
class FillCommand:
    rect: Rect
    colour: Any


@dataclass(frozen=True)
class ClearCommand:
    colour: Any


@dataclass(frozen=True)
class PresentCommand:
    pass


Command = Union[WriteCommand, FillCommand, ClearCommand, PresentCommand]


class RecordingRenderer:
    """Renderer that logs commands rather than executing them."""

    def __init__(self, font_metrics: ResourceMap[Any, Metrics]) -> None:
        self._font_metrics = font_metrics
        self.log: List[Command] = []

    @property
    def font_metrics(self) -> ResourceMap[Any, Metrics]:
        return self._font_metrics

    def write(self, font: FontSpec, laid_out: LaidOutString) -> None:
        self.log.append(WriteCommand(font, laid_out))

    def fill(self, rect: Rect, colour: Any) -> None:
        self.log.append(FillCommand(rect, colour))

    def clear(self, colour: Any) -> None:
        self.log.append(ClearCommand(colour))

    def present(self) -> None:
        self.log.append(PresentCommand())
