import pytest

from spacepirates.geometry import FloatRect


def test_overlapping_rectangles_intersect():
    assert FloatRect(0, 0, 10, 10).intersects(FloatRect(5, 5, 10, 10))


def test_rectangles_sharing_an_edge_do_not_intersect():
    assert not FloatRect(0, 0, 10, 10).intersects(FloatRect(10, 0, 10, 10))


def test_disjoint_rectangles_do_not_intersect():
    assert not FloatRect(0, 0, 10, 10).intersects(FloatRect(50, 50, 5, 5))


def test_contained_rectangle_intersects():
    assert FloatRect(0, 0, 100, 100).intersects(FloatRect(40, 40, 1, 1))


@pytest.mark.parametrize(
    "a, b",
    [
        (FloatRect(0, 0, 10, 10), FloatRect(5, 5, 10, 10)),
        (FloatRect(0, 0, 10, 10), FloatRect(10, 0, 10, 10)),
        (FloatRect(-5, -5, 3, 3), FloatRect(0, 0, 1, 1)),
    ],
)
def test_intersection_is_symmetric(a, b):
    assert a.intersects(b) == b.intersects(a)


def test_negative_size_is_normalised():
    assert FloatRect(10, 10, -10, -10).intersects(FloatRect(5, 5, 1, 1))


def test_right_and_bottom():
    rect = FloatRect(1, 2, 3, 4)
    assert (rect.right, rect.bottom) == (4, 6)