"""Tests for the cached font manager"""

import pytest

from pixelfont.colour import WHITE, Colour
from pixelfont.font import (
    BadHandleError,
    FontError,
    FontIndex,
    FontIoError,
    FontManager,
    FontMap,
    FontSpec,
    ResourceMap,
    UnknownColourError,
    UnknownFontError,
)
from pixelfont.geometry import Size

from conftest import FakeLoader

RED = Colour(0xFF, 0x00, 0x00)


@pytest.fixture
def colours():
    return ResourceMap({"white": WHITE, "red": RED}, default=WHITE)


@pytest.fixture
def fonts(big_font_dir, json_font_dir):
    return FontMap.from_dirs({"big": big_font_dir, "kerned": json_font_dir})


def test_data_loads_once(fonts, colours, fake_loader):
    """Test repeated requests for one spec invoke the loader exactly once"""
    manager = FontManager(fonts, colours, fake_loader)
    spec = FontSpec("big", "white")

    results = [manager.data(spec) for _ in range(5)]

    assert len(fake_loader.loaded) == 1
    assert all(result is results[0] for result in results)
    assert results[0]["path"] == fonts.get("big").texture_path
    assert results[0]["colour"] == WHITE


def test_distinct_specs_load_separately(fonts, colours, fake_loader):
    """Test each font/colour combination gets its own slot"""
    manager = FontManager(fonts, colours, fake_loader)

    first = manager.index(FontSpec("big", "white"))
    second = manager.index(FontSpec("big", "red"))
    third = manager.index(FontSpec("kerned", "white"))

    assert [first, second, third] == [FontIndex(0), FontIndex(1), FontIndex(2)]
    assert fake_loader.colourised == [WHITE, RED, WHITE]
    assert len(manager) == 3


def test_unknown_colour_uses_default(fonts, colours, fake_loader):
    """Test colour lookups fall back to the colour map's default"""
    manager = FontManager(fonts, colours, fake_loader)

    assert manager.data(FontSpec("big", "chartreuse"))["colour"] == WHITE


def test_unknown_colour_without_default(fonts, fake_loader):
    """Test missing colours fail with a font error when there is no default"""
    manager = FontManager(fonts, ResourceMap({}), fake_loader)

    with pytest.raises(UnknownColourError) as excinfo:
        manager.data(FontSpec("big", "nope"))

    assert isinstance(excinfo.value, FontError)
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.colour_id == "nope"
    assert fake_loader.loaded == []
    assert len(manager) == 0


def test_get_by_index(fonts, colours, fake_loader):
    """Test handles trade back in for the cached data"""
    manager = FontManager(fonts, colours, fake_loader)
    spec = FontSpec("big", "red")
    index = manager.index(spec)

    assert index.is_resolved
    assert manager.get(index) is manager.data(spec)


@pytest.mark.parametrize("index", [FontIndex(), FontIndex(0), FontIndex(7)])
def test_bad_handles(fonts, colours, fake_loader, index):
    """Test unresolved and out-of-range handles are rejected"""
    manager = FontManager(fonts, colours, fake_loader)

    assert not FontIndex().is_resolved
    with pytest.raises(BadHandleError):
        manager.get(index)


def test_unknown_font(fonts, colours, fake_loader):
    """Test unknown font ids fail without loading or caching anything"""
    manager = FontManager(fonts, colours, fake_loader)

    with pytest.raises(UnknownFontError):
        manager.data(FontSpec("huge", "white"))

    assert fake_loader.loaded == []
    assert len(manager) == 0


def test_loader_failure_is_not_cached(fonts, colours):
    """Test a failed load propagates and is tried afresh next time"""
    loader = FakeLoader(fail_with=FontIoError(fonts.get("big").texture_path))
    manager = FontManager(fonts, colours, loader)
    spec = FontSpec("big", "white")

    with pytest.raises(FontIoError):
        manager.data(spec)
    assert not manager.is_loaded(spec)

    loader.fail_with = None
    manager.data(spec)

    assert len(loader.loaded) == 2
    assert manager.is_loaded(spec)


def test_metrics_loaded_lazily_once(fonts, colours, fake_loader, monkeypatch):
    """Test metrics are loaded from the font map on first access only"""
    manager = FontManager(fonts, colours, fake_loader)
    calls = []
    real_load_metrics = fonts.load_metrics

    def counting_load_metrics():
        calls.append(1)
        return real_load_metrics()

    monkeypatch.setattr(fonts, "load_metrics", counting_load_metrics)

    assert manager.metrics.get("big").char == Size(9, 9)
    assert manager.metrics.get("kerned").char == Size(8, 8)
    assert len(calls) == 1


def test_supplied_metrics_are_used(fonts, colours, fake_loader, big_font):
    """Test pre-loaded metrics bypass the font map"""
    metrics = ResourceMap({"big": big_font})
    manager = FontManager(fonts, colours, fake_loader, metrics=metrics)

    assert manager.metrics is metrics


def test_stats(fonts, colours, fake_loader):
    """Test load and hit statistics"""
    manager = FontManager(fonts, colours, fake_loader)
    spec = FontSpec("big", "white")
    manager.data(spec)
    manager.data(spec)
    manager.data(spec)

    stats = manager.get_stats()
    assert stats['loads'] == 1
    assert stats['cache_hits'] == 2
    assert stats['cached_fonts'] == 1
