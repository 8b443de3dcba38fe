"""Glyph batching: flattens laid-out strings into instance arrays for instanced quads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..font.layout import LaidOutString


@dataclass
class GlyphBatch:
    """
    Per-instance glyph data for one laid-out string.

    Instances sharing a source rectangle are contiguous, so each entry in
    runs can be issued as a single instanced draw.
    """

    src: np.ndarray  # shape (N, 4), int32: x, y, w, h in the font texture
    dst: np.ndarray  # shape (N, 2), int32: absolute top-left on screen
    runs: List[Tuple[int, int]]  # (first instance, instance count) per source rect

    @classmethod
    def from_layout(cls, laid_out: LaidOutString) -> GlyphBatch:
        """Build a batch from a laid-out string, resolving deltas against its bounds."""
        count = laid_out.glyphs.instance_count
        src = np.empty((count, 4), dtype='i4')
        dst = np.empty((count, 2), dtype='i4')
        runs: List[Tuple[int, int]] = []

        origin = laid_out.bounds.top_left
        start = 0
        for rect, deltas in laid_out.glyphs.items():
            end = start + len(deltas)
            src[start:end] = (rect.top_left.x, rect.top_left.y, rect.size.w, rect.size.h)
            dst[start:end] = [(origin.x + d.x, origin.y + d.y) for d in deltas]
            runs.append((start, len(deltas)))
            start = end

        return cls(src=src, dst=dst, runs=runs)

    def __len__(self) -> int:
        return len(self.dst)

    def uv_rects(self, texture_size: Tuple[int, int]) -> np.ndarray:
        """
        Source rectangles as normalised texture coordinates.

        Returns:
            Array of shape (N, 4), float32: u0, v0, u1, v1 with (0, 0) at the
            texture's top-left
        """
        width, height = texture_size
        scale = np.array([width, height, width, height], dtype='f4')
        corners = np.empty((len(self), 4), dtype='f4')
        corners[:, 0:2] = self.src[:, 0:2]
        corners[:, 2:4] = self.src[:, 0:2] + self.src[:, 2:4]
        return corners / scale

    def instance_data(self, texture_size: Optional[Tuple[int, int]] = None) -> np.ndarray:
        """
        Interleaved per-instance vertex data.

        Each row is (dst_x, dst_y, w, h) followed by the source rectangle:
        pixel (x, y, w, h) if texture_size is None, else UVs (u0, v0, u1, v1).
        """
        data = np.empty((len(self), 8), dtype='f4')
        data[:, 0:2] = self.dst
        data[:, 2:4] = self.src[:, 2:4]
        if texture_size is None:
            data[:, 4:8] = self.src
        else:
            data[:, 4:8] = self.uv_rects(texture_size)
        return data
