"""Rendering collaborators: texture loaders, glyph batching and renderers"""
from .texture_loader import FontTexture, GLTextureLoader, ImageLoader
from .glyph_batch import GlyphBatch
from .renderer import (
    ClearCommand,
    Command,
    FillCommand,
    PresentCommand,
    RecordingRenderer,
    Renderer,
    WriteCommand,
)

__all__ = [
    "ImageLoader",
    "GLTextureLoader",
    "FontTexture",
    "GlyphBatch",
    "Renderer",
    "RecordingRenderer",
    "Command",
    "WriteCommand",
    "FillCommand",
    "ClearCommand",
    "PresentCommand",
]
