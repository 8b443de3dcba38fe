"""
Texture Loaders

Loader implementations for the font manager.

ImageLoader decodes font textures with Pillow and tints them on the CPU.
GLTextureLoader uploads them to the GPU with ModernGL and leaves tinting to
the shader, carrying the tint alongside the texture.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Tuple

import moderngl
import numpy as np
from PIL import Image

from ..colour import Colour
from ..config.settings import DEFAULT_TINT, TEXTURE_FILTER
from ..font.errors import ColouriseError, FontIoError, TextureLoadError

logger = logging.getLogger(__name__)


class ImageLoader:
    """Loads font textures as RGBA Pillow images."""

    def load(self, path: Path) -> Image.Image:
        """
        Decode the texture at path.

        Args:
            path: Path to the texture image

        Returns:
            Decoded RGBA image

        Raises:
            FontIoError: If the file is missing or unreadable
            TextureLoadError: If the file is not a decodable image
        """
        path = Path(path)
        try:
            with Image.open(path) as image:
                rgba = image.convert("RGBA")
        except (FileNotFoundError, PermissionError, IsADirectoryError) as exc:
            raise FontIoError(path, exc.strerror or str(exc)) from exc
        except OSError as exc:
            raise TextureLoadError(f"Cannot decode font texture {path}: {exc}") from exc

        logger.debug("Decoded font texture %s (%dx%d)", path, *rgba.size)
        return rgba

    def colourise(self, data: Image.Image, colour: Colour) -> Image.Image:
        """
        Tint an image by multiplying each channel by colour.

        Font textures are white glyphs on transparency, so multiplying gives
        glyphs in the requested colour.

        Raises:
            ColouriseError: If data is not a Pillow image or colour is not a Colour
        """
        if not isinstance(data, Image.Image):
            raise ColouriseError(data)
        if not isinstance(colour, Colour):
            raise ColouriseError(colour)

        pixels = np.asarray(data.convert("RGBA"), dtype=np.float32)
        tint = np.array(colour.as_floats(), dtype=np.float32)
        tinted = np.clip(np.rint(pixels * tint), 0, 255).astype(np.uint8)
        return Image.fromarray(tinted)


@dataclass(frozen=True)
class FontTexture:
    """GPU font texture plus the tint to draw it with."""

    texture: moderngl.Texture
    size: Tuple[int, int]
    tint: Tuple[float, float, float, float] = DEFAULT_TINT


class GLTextureLoader:
    """
    Uploads font textures to the GPU.

    Args:
        ctx: ModernGL context
        texture_filter: "nearest" or "linear" sampling
    """

    def __init__(self, ctx: moderngl.Context, texture_filter: str = TEXTURE_FILTER) -> None:
        self.ctx = ctx
        self.texture_filter = texture_filter
        self._decoder = ImageLoader()
        self._textures: List[moderngl.Texture] = []

    def load(self, path: Path) -> FontTexture:
        """
        Decode the texture at path and upload it.

        Raises:
            FontIoError: If the file is missing or unreadable
            TextureLoadError: If decoding or uploading fails
        """
        image = self._decoder.load(path)
        try:
            texture = self.ctx.texture(image.size, 4, image.tobytes())
        except moderngl.Error as exc:
            raise TextureLoadError(f"Cannot upload font texture {path}: {exc}") from exc

        mode = moderngl.LINEAR if self.texture_filter == "linear" else moderngl.NEAREST
        texture.filter = (mode, mode)
        texture.repeat_x = False
        texture.repeat_y = False

        self._textures.append(texture)
        logger.debug("Uploaded font texture %s (%dx%d)", path, *image.size)
        return FontTexture(texture=texture, size=image.size)

    def colourise(self, data: FontTexture, colour: Colour) -> FontTexture:
        """
        Attach a tint to an uploaded texture.

        Raises:
            ColouriseError: If data is not a FontTexture or colour is not a Colour
        """
        if not isinstance(data, FontTexture):
            raise ColouriseError(data)
        if not isinstance(colour, Colour):
            raise ColouriseError(colour)
        return replace(data, tint=colour.as_floats())

    def release(self) -> None:
        """Release GPU resources."""
        for texture in self._textures:
            texture.release()
        self._textures.clear()
