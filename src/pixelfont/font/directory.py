"""
Font Directories

A font is a directory holding a texture (font.png) and a metrics file
(metrics.toml or metrics.json).  Backends load the texture themselves, so
only its path is exposed here; the metrics file is parsed and compiled.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config.settings import METRICS_FILES, TEXTURE_FILE
from .errors import FontIoError, MetricsParseError
from .metrics import Metrics, MetricsSpec

logger = logging.getLogger(__name__)


class Font:
    """A font directory."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def __repr__(self) -> str:
        return f"Font({str(self.directory)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Font):
            return NotImplemented
        return self.directory == other.directory

    def __hash__(self) -> int:
        return hash(self.directory)

    @property
    def texture_path(self) -> Path:
        """Path to the font's texture."""
        return self.directory / TEXTURE_FILE

    @property
    def metrics_path(self) -> Optional[Path]:
        """Path to the font's metrics file, or None if there isn't one."""
        for name in METRICS_FILES:
            candidate = self.directory / name
            if candidate.is_file():
                return candidate
        return None

    def metrics_spec(self) -> MetricsSpec:
        """
        Load and parse the font's metrics file without compiling it.

        Raises:
            FontIoError: If the metrics file is missing or unreadable
            MetricsParseError: If the metrics file is malformed
        """
        path = self.metrics_path
        if path is None:
            raise FontIoError(self.directory / METRICS_FILES[0], "no metrics file found")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FontIoError(path, exc.strerror or str(exc)) from exc

        return MetricsSpec.from_dict(_decode(text, path), path)

    def metrics(self) -> Metrics:
        """
        Load, parse and compile the font's metrics.

        Raises:
            FontIoError: If the metrics file is missing or unreadable
            MetricsParseError: If the metrics file is malformed
            MissingClassError: If kerning refers to an undefined class
            OverlyLargeOverrideError: If a width override is wider than the grid
        """
        spec = self.metrics_spec()
        logger.debug("Compiling metrics for %s", self.directory)
        return spec.into_metrics()


def _decode(text: str, path: Path) -> Dict[str, Any]:
    try:
        if path.suffix == ".json":
            return json.loads(text)
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise MetricsParseError(str(exc), path) from exc
