"""
Width Overrides

Class-based width overrides for proportional fonts. Each class string maps
every one of its characters to the same advance width.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .errors import MetricsParseError, OverlyLargeOverrideError


@dataclass
class WidthSpec:
    """Specification of width overrides, keyed by character class."""

    overrides: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WidthSpec":
        """
        Parse width overrides from a metrics file table.

        Args:
            data: Mapping of class strings to integer widths

        Returns:
            Parsed specification

        Raises:
            MetricsParseError: If any width is not an integer
        """
        if not isinstance(data, Mapping):
            raise MetricsParseError("width_overrides must be a table")

        overrides = {}
        for class_chars, width in data.items():
            if isinstance(width, bool) or not isinstance(width, int):
                raise MetricsParseError(
                    f"width override for {class_chars!r} must be an integer, got {width!r}"
                )
            overrides[str(class_chars)] = width
        return cls(overrides)

    def check(self, grid_width: int) -> None:
        """
        Check that every override fits inside the glyph grid.

        Raises:
            OverlyLargeOverrideError: If an override is wider than grid_width
            MetricsParseError: If an override is negative
        """
        for class_chars, override_width in self.overrides.items():
            if grid_width < override_width:
                raise OverlyLargeOverrideError(grid_width, override_width)
            if override_width < 0:
                raise MetricsParseError(
                    f"width override for {class_chars!r} is negative ({override_width})"
                )

    def expand(self) -> Dict[str, int]:
        """Expand class overrides into a per-character width map."""
        widths: Dict[str, int] = {}
        for class_chars, width in self.overrides.items():
            for char in class_chars:
                widths[char] = width
        return widths

    def into_map(self, grid_width: int) -> Dict[str, int]:
        """Check against grid_width, then expand."""
        self.check(grid_width)
        return self.expand()
