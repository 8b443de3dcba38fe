"""Tests for the positioned text writer"""

import pytest

from pixelfont.font import FontSpec, ResourceMap
from pixelfont.geometry import Point, Rect, XAnchor
from pixelfont.rendering import RecordingRenderer, WriteCommand
from pixelfont.text import Writer


@pytest.fixture
def metrics(big_font, kerned_font):
    return ResourceMap({"big": big_font, "kerned": kerned_font})


def test_writer_starts_dirty():
    """Test a new writer needs layout and has empty bounds"""
    writer = Writer(FontSpec("big", "white"))

    assert writer.needs_layout
    assert writer.bounds == Rect()


def test_right_aligned_writer(metrics):
    """Test right-aligned writers end at their position"""
    writer = Writer(FontSpec("big", "white"), Point(100, 0), XAnchor.RIGHT, "ab")

    writer.layout(metrics)

    assert writer.bounds == Rect.new(81, 0, 19, 9)
    assert not writer.needs_layout


def test_layout_is_cached(metrics):
    """Test unchanged writers reuse their previous layout"""
    writer = Writer(FontSpec("big", "white"), string="abc")
    first = writer.layout(metrics)

    assert writer.layout(metrics) is first


@pytest.mark.parametrize(
    "change",
    [
        lambda w: w.set_string("xyz"),
        lambda w: w.set_string(42),
        lambda w: w.move_to(Point(1, 1)),
        lambda w: w.align_to(XAnchor.RIGHT),
        lambda w: w.set_font("kerned"),
    ],
)
def test_changes_mark_dirty(metrics, change):
    """Test layout-affecting changes trigger a new layout"""
    writer = Writer(FontSpec("big", "white"), string="abc")
    writer.layout(metrics)

    change(writer)

    assert writer.needs_layout


@pytest.mark.parametrize(
    "change",
    [
        lambda w: w.set_string("abc"),
        lambda w: w.move_to(Point()),
        lambda w: w.align_to(XAnchor.LEFT),
        lambda w: w.set_font("big"),
        lambda w: w.set_colour("red"),
    ],
)
def test_no_op_changes_stay_clean(metrics, change):
    """Test unchanged values and colour changes keep the layout"""
    writer = Writer(FontSpec("big", "white"), string="abc")
    writer.layout(metrics)

    change(writer)

    assert not writer.needs_layout


def test_set_colour_updates_font_spec():
    """Test colour changes keep the font id"""
    writer = Writer(FontSpec("big", "white"))
    writer.set_colour("red")

    assert writer.font == FontSpec("big", "red")


def test_set_string_converts_to_str(metrics):
    """Test non-string values are written via str()"""
    writer = Writer(FontSpec("big", "white"))
    writer.set_string(12)

    assert writer.layout(metrics).string == "12"


def test_render_writes_through_renderer(metrics):
    """Test rendering lays out and issues one write command"""
    renderer = RecordingRenderer(metrics)
    writer = Writer(FontSpec("big", "white"), Point(2, 3), string="hi")

    writer.render(renderer)

    assert renderer.log == [WriteCommand(FontSpec("big", "white"), writer.laid_out)]
    assert writer.bounds.top_left == Point(2, 3)


def test_render_relayouts_after_font_change(metrics):
    """Test switching fonts re-measures the string"""
    renderer = RecordingRenderer(metrics)
    writer = Writer(FontSpec("big", "white"), string="oo")
    writer.render(renderer)
    writer.set_font("kerned")
    writer.render(renderer)

    assert [command.laid_out.bounds.size.w for command in renderer.log] == [19, 15]
