"""
Font Errors

Exceptions raised by the font subsystem. Compilation errors surface once,
when a font's metrics are loaded; layout itself never raises.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional


class FontError(Exception):
    """Base class for all font subsystem errors."""


class FontIoError(FontError):
    """A font file could not be read."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Cannot read font file: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MetricsParseError(FontError):
    """A metrics file was malformed."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class Direction(Enum):
    """Side of a kerning pair a class belongs to."""

    LEFT = "left"
    RIGHT = "right"


class MissingClassError(FontError):
    """A kerning pair referred to a class missing from its class table."""

    def __init__(self, direction: Direction, class_name: str) -> None:
        self.direction = direction
        self.class_name = class_name
        super().__init__(f"Missing {direction.value} kerning class: {class_name!r}")


class OverlyLargeOverrideError(FontError):
    """A width override tried to make a character wider than its grid cell."""

    def __init__(self, grid_width: int, override_width: int) -> None:
        self.grid_width = grid_width
        self.override_width = override_width
        super().__init__(
            f"Can't override a char to be larger than its grid ({grid_width} < {override_width})"
        )


class TextureLoadError(FontError):
    """The backend failed to decode or upload a font texture."""


class ColouriseError(TextureLoadError):
    """Colourisation was given texture data or a colour it does not support."""

    def __init__(self, data: Any) -> None:
        self.data = data
        super().__init__(f"Cannot colourise with a value of type {type(data).__name__}")


class UnknownFontError(FontError, LookupError):
    """A font identifier is missing from the font map."""

    def __init__(self, font_id: Any) -> None:
        self.font_id = font_id
        super().__init__(f"Unknown font: {font_id!r}")


class BadHandleError(FontError, LookupError):
    """A font index does not point into the manager's cache."""

    def __init__(self, index: Any) -> None:
        self.index = index
        super().__init__(f"Bad font handle: {index!r}")


class UnknownColourError(FontError, LookupError):
    """A colour identifier is missing from the colour map."""

    def __init__(self, colour_id: Any) -> None:
        self.colour_id = colour_id
        super().__init__(f"Unknown colour: {colour_id!r}")
