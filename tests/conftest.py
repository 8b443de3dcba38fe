"""Shared fixtures for font tests"""

import json
from pathlib import Path

import pytest
from PIL import Image

from pixelfont.font import KerningSpec, MetricsSpec, WidthSpec
from pixelfont.geometry import Size


BIG_FONT_TOML = """\
[char]
w = 9
h = 9

[pad]
w = 1
h = 1

[width_overrides]
iI = 1
"""


def make_big_font():
    """9x9 cells, 1px padding, 'i' and 'I' narrowed to 1px."""
    return MetricsSpec(
        char=Size(9, 9),
        pad=Size(1, 1),
        width_overrides=WidthSpec({"iI": 1}),
    ).into_metrics()


def make_kerned_font():
    """8x8 cells, 1px horizontal padding, round-round pairs tightened by one."""
    return MetricsSpec(
        char=Size(8, 8),
        pad=Size(1, 0),
        kerning=KerningSpec(
            left={"round": "ob"},
            right={"round": "oc", "tall": "l"},
            pairs={("round", "round"): -1, ("round", "tall"): 0},
        ),
    ).into_metrics()


@pytest.fixture
def big_font():
    return make_big_font()


@pytest.fixture
def kerned_font():
    return make_kerned_font()


def write_font_dir(root: Path, name: str, metrics_text: str, metrics_file: str = "metrics.toml",
                   texture_size=(320, 80)) -> Path:
    """Create a font directory with a white texture and the given metrics file."""
    font_dir = root / name
    font_dir.mkdir(parents=True)
    (font_dir / metrics_file).write_text(metrics_text, encoding="utf-8")
    Image.new("RGBA", texture_size, (255, 255, 255, 255)).save(font_dir / "font.png")
    return font_dir


@pytest.fixture
def big_font_dir(tmp_path):
    return write_font_dir(tmp_path, "big", BIG_FONT_TOML)


@pytest.fixture
def json_font_dir(tmp_path):
    metrics = {
        "char": {"w": 8, "h": 8},
        "pad": {"w": 1, "h": 0},
        "kerning": {
            "left": {"round": "ob"},
            "right": {"round": "oc"},
            "pairs": [["round", "round", -1]],
        },
    }
    return write_font_dir(tmp_path, "kerned", json.dumps(metrics), metrics_file="metrics.json")


class FakeLoader:
    """Loader that records calls instead of touching files."""

    def __init__(self, fail_with=None):
        self.loaded = []
        self.colourised = []
        self.fail_with = fail_with

    def load(self, path):
        self.loaded.append(Path(path))
        if self.fail_with is not None:
            raise self.fail_with
        return {"path": Path(path)}

    def colourise(self, data, colour):
        self.colourised.append(colour)
        return dict(data, colour=colour)


@pytest.fixture
def fake_loader():
    return FakeLoader()
