"""
pixelfont - Bitmap font layout for ModernGL

Lays out text in proportional pixel fonts (fixed-grid textures with
per-character widths and class-based kerning), and caches the textures
those fonts are drawn from.
"""

# Configuration
from .config.settings import *

# Geometry
from .geometry import Anchor, Point, Rect, Size, XAnchor, YAnchor

# Fonts
from .font import (
    Font,
    FontError,
    FontIndex,
    FontManager,
    FontMap,
    FontSpec,
    GlyphSet,
    LaidOutString,
    Metrics,
    MetricsSpec,
    ResourceMap,
    dry_run,
    layout,
    layout_with_alignment,
)

# Colour
from .colour import Colour

# Text
from .text import Writer

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Geometry
    "Anchor",
    "XAnchor",
    "YAnchor",
    "Point",
    "Size",
    "Rect",
    # Fonts
    "Font",
    "FontError",
    "FontIndex",
    "FontManager",
    "FontMap",
    "FontSpec",
    "GlyphSet",
    "LaidOutString",
    "Metrics",
    "MetricsSpec",
    "ResourceMap",
    "layout",
    "layout_with_alignment",
    "dry_run",
    # Colour
    "Colour",
    # Text
    "Writer",
]
