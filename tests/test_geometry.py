"""Tests for pixel geometry"""

from dataclasses import fields

from pixelfont.geometry import Anchor, Point, Rect, Size, XAnchor, YAnchor, clamp


def test_anchor_offsets():
    """Test anchors resolve to the correct edge"""
    assert XAnchor.LEFT.offset(320) == 0
    assert XAnchor.RIGHT.offset(320) == 320
    assert YAnchor.TOP.offset(240) == 0
    assert YAnchor.BOTTOM.offset(240) == 240


def test_default_anchor_is_top_left():
    """Test the default anchor agrees with the default X and Y anchors"""
    assert Anchor() == Anchor.TOP_LEFT
    assert Anchor() == Anchor(XAnchor.LEFT, YAnchor.TOP)


def test_anchor_constants_are_not_fields():
    """Test the named anchors are class constants, not dataclass fields"""
    assert [f.name for f in fields(Anchor)] == ["x", "y"]
    assert Anchor.TOP_RIGHT == Anchor(XAnchor.RIGHT, YAnchor.TOP)
    assert Anchor.BOTTOM_LEFT == Anchor(XAnchor.LEFT, YAnchor.BOTTOM)
    assert Anchor.BOTTOM_RIGHT == Anchor(XAnchor.RIGHT, YAnchor.BOTTOM)


def test_clamp():
    """Test negative lengths clamp to zero"""
    assert clamp(5) == 5
    assert clamp(0) == 0
    assert clamp(-5) == 0


def test_point_offset():
    """Test offsetting points, including into negative coordinates"""
    p = Point(0, 0)
    q = p.offset(0, 10)
    r = q.offset(-4, 2)

    assert p == Point(0, 0)
    assert q == Point(0, 10)
    assert r == Point(-4, 12)


def test_point_to_rect():
    """Test lifting a point to a rect at different anchors"""
    p = Point(4, 8)
    s = Size(10, 2)

    assert p.to_rect(s, Anchor.TOP_LEFT) == Rect(p, s)
    assert p.to_rect(s, Anchor.BOTTOM_RIGHT).top_left == Point(-6, 6)


def test_size_grow_clamps():
    """Test growing sizes never makes them negative"""
    assert Size(40, 20).grow(2) == Size(42, 22)
    assert Size(42, 22).grow(-2) == Size(40, 20)
    assert Size().grow(-1) == Size()
    assert Size(-5, 10).clamp().is_normal()


def test_size_stacking():
    """Test vertical and horizontal stacking"""
    assert Size(42, 10).stack_vertically(Size(20, 22)) == Size(42, 32)
    assert Size(42, 10).stack_horizontally(Size(20, 22)) == Size(62, 22)


def test_size_predicates():
    """Test zero and normal checks"""
    assert Size(0, 10).is_zero()
    assert Size(10, 0).is_zero()
    assert not Size(10, 10).is_zero()
    assert Size(5, 0).is_normal()
    assert not Size(-5, 10).is_normal()


def test_rect_from_points():
    """Test a rect built from two points has them as its corners"""
    tl = Point(20, 45)
    br = Point(55, 70)
    rect = Rect.from_points(tl, br)

    assert rect.anchor(Anchor.TOP_LEFT) == tl
    assert rect.anchor(Anchor.BOTTOM_RIGHT) == br
    assert rect.anchor(Anchor.TOP_RIGHT) == Point(55, 45)


def test_rect_from_inverted_points_collapses():
    """Test inverted corners produce a zero-size rect"""
    rect = Rect.from_points(Point(10, 10), Point(0, 0))
    assert rect.size == Size(0, 0)


def test_rect_grow():
    """Test growing a rect moves its top-left out"""
    rect = Rect.new(10, 10, 20, 20).grow(2)
    assert rect == Rect.new(8, 8, 24, 24)


def test_rect_is_hashable_by_value():
    """Test rects with equal fields share a dictionary key"""
    table = {Rect.new(1, 2, 3, 4): "a"}
    assert table[Rect.new(1, 2, 3, 4)] == "a"
