"""
Font Manager

Backend-agnostic cache of loaded font textures.

The expensive step of turning a font specification into renderable data
(decoding the texture, uploading it, tinting it) is delegated to a Loader
supplied by the backend.  The manager guarantees that each distinct
specification is loaded at most once over its lifetime.

The cache only grows: fonts are never evicted, which suits the small,
closed set of fonts a typical application uses.  The manager is not
thread-safe; callers sharing one across threads must lock around it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, Protocol, TypeVar

from .errors import BadHandleError, UnknownColourError
from .metrics import Metrics
from .resource import FontMap, ResourceMap
from .spec import UNRESOLVED, FontIndex, FontSpec

logger = logging.getLogger(__name__)

Data = TypeVar("Data")


class Loader(Protocol[Data]):
    """Backend capability for loading and tinting font textures."""

    def load(self, path: Path) -> Data:
        """Load the texture at path, raising FontError on failure."""
        ...

    def colourise(self, data: Data, colour: Any) -> Data:
        """Tint data for the given foreground colour definition."""
        ...


class FontManager(Generic[Data]):
    """
    Cached font manager.

    Args:
        fonts: Map from font identifiers to font directories
        colours: Map from colour identifiers to colour definitions
        loader: Backend loader for texture data
        metrics: Pre-loaded metrics map (loaded from fonts on first use if omitted)
    """

    def __init__(
        self,
        fonts: FontMap,
        colours: ResourceMap,
        loader: Loader[Data],
        metrics: Optional[ResourceMap[Any, Metrics]] = None,
    ) -> None:
        self.fonts = fonts
        self.colours = colours
        self.loader = loader
        self._metrics = metrics

        self._slots: Dict[FontSpec, FontIndex] = {}
        self._cache: List[Data] = []

        # Statistics
        self._stats = {
            'loads': 0,
            'cache_hits': 0,
        }

    @property
    def metrics(self) -> ResourceMap[Any, Metrics]:
        """Metrics for every font in the font map, loaded once on first access."""
        if self._metrics is None:
            self._metrics = self.fonts.load_metrics()
        return self._metrics

    def data(self, spec: FontSpec) -> Data:
        """
        Get the data for spec, loading it on first use.

        Args:
            spec: Font and foreground colour to fetch

        Returns:
            Backend data for the font in the given colour

        Raises:
            UnknownFontError: If spec.id is not in the font map
            UnknownColourError: If spec.colour is not in the colour map and it has
                no default
            FontError: If the loader fails; nothing is cached in that case
        """
        return self._cache[self.index(spec).value]

    def index(self, spec: FontSpec) -> FontIndex:
        """Get the cache index for spec, loading it on first use."""
        index = self._slots.get(spec)
        if index is not None:
            self._stats['cache_hits'] += 1
            logger.debug("Font cache hit for %r", spec)
            return index

        font = self.fonts.get(spec.id)
        try:
            colour = self.colours.get(spec.colour)
        except LookupError:
            raise UnknownColourError(spec.colour) from None

        logger.info("Loading font %r with colour %r from %s", spec.id, spec.colour, font.texture_path)
        data = self.loader.load(font.texture_path)
        data = self.loader.colourise(data, colour)

        index = FontIndex(len(self._cache))
        self._cache.append(data)
        self._slots[spec] = index
        self._stats['loads'] += 1
        return index

    def get(self, index: FontIndex) -> Data:
        """
        Get already-loaded data by index.

        Raises:
            BadHandleError: If index is unresolved or out of range
        """
        if index == UNRESOLVED or not 0 <= index.value < len(self._cache):
            raise BadHandleError(index)
        return self._cache[index.value]

    def is_loaded(self, spec: FontSpec) -> bool:
        """Whether spec has already been loaded."""
        return spec in self._slots

    def __len__(self) -> int:
        return len(self._cache)

    def get_stats(self) -> Dict[str, int]:
        """Get load and cache-hit counts."""
        stats = self._stats.copy()
        stats['cached_fonts'] = len(self._cache)
        return stats
