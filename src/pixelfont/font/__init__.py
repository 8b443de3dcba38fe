"""Fonts: metrics compilation, string layout, and cached texture management"""
from .errors import (
    BadHandleError,
    ColouriseError,
    Direction,
    FontError,
    FontIoError,
    MetricsParseError,
    MissingClassError,
    OverlyLargeOverrideError,
    TextureLoadError,
    UnknownColourError,
    UnknownFontError,
)
from .width import WidthSpec
from .kerning import KerningSpec
from .chars import CharacterEntry, CharacterTable, compile_table
from .metrics import Metrics, MetricsSpec
from .layout import GlyphSet, LaidOutString, LayoutBuilder, dry_run, layout, layout_with_alignment
from .spec import FontIndex, FontSpec
from .directory import Font
from .resource import FontMap, ResourceMap
from .manager import FontManager, Loader

__all__ = [
    # Errors
    "FontError",
    "FontIoError",
    "MetricsParseError",
    "Direction",
    "MissingClassError",
    "OverlyLargeOverrideError",
    "TextureLoadError",
    "ColouriseError",
    "UnknownFontError",
    "UnknownColourError",
    "BadHandleError",
    # Metrics
    "WidthSpec",
    "KerningSpec",
    "CharacterEntry",
    "CharacterTable",
    "compile_table",
    "Metrics",
    "MetricsSpec",
    # Layout
    "GlyphSet",
    "LaidOutString",
    "LayoutBuilder",
    "layout",
    "layout_with_alignment",
    "dry_run",
    # Resources
    "FontSpec",
    "FontIndex",
    "Font",
    "FontMap",
    "ResourceMap",
    "FontManager",
    "Loader",
]
