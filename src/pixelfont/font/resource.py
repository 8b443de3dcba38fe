"""
Resource Maps

Lookups from lightweight identifiers (usually enum members) to resources
such as font directories, metrics sets and colour definitions.

A map may carry a default resource, returned for identifiers it does not
contain; without one, unknown identifiers raise.
"""

import logging
from pathlib import Path
from typing import Dict, Generic, ItemsView, Mapping, Optional, TypeVar, Union

from .directory import Font
from .errors import UnknownFontError
from .metrics import Metrics

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class ResourceMap(Generic[K, V]):
    """Dictionary-backed resource map with an optional default."""

    def __init__(self, entries: Optional[Mapping[K, V]] = None, default=_MISSING) -> None:
        self._entries: Dict[K, V] = dict(entries) if entries is not None else {}
        self._default = default

    @property
    def has_default(self) -> bool:
        return self._default is not _MISSING

    def get(self, key: K) -> V:
        """
        Get the resource at key.

        Returns:
            The resource, or the map's default if key is absent

        Raises:
            LookupError: If key is absent and the map has no default
        """
        try:
            return self._entries[key]
        except KeyError:
            if self._default is _MISSING:
                raise self._missing(key) from None
            return self._default

    def set(self, key: K, value: V) -> None:
        self._entries[key] = value

    def items(self) -> ItemsView[K, V]:
        return self._entries.items()

    def _missing(self, key: K) -> LookupError:
        return LookupError(f"No resource for {key!r}")

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class FontMap(ResourceMap[K, Font]):
    """Map from font identifiers to font directories."""

    @classmethod
    def from_dirs(cls, dirs: Mapping[K, Union[str, Path]]) -> "FontMap[K]":
        """Build a font map from identifier -> directory path."""
        return cls({key: Font(path) for key, path in dirs.items()})

    def _missing(self, key: K) -> LookupError:
        return UnknownFontError(key)

    def load_metrics(self) -> ResourceMap[K, Metrics]:
        """
        Load the metrics of every font in the map.

        Unknown identifiers resolve to an all-zero Metrics set.

        Raises:
            FontError: If any font's metrics are missing or ill-formed
        """
        metrics = {}
        for key, font in self.items():
            logger.debug("Loading metrics for font %r from %s", key, font.directory)
            metrics[key] = font.metrics()
        return ResourceMap(metrics, default=Metrics())
