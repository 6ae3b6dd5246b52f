import pytest

from cubeworld.geometry import AABB


def _centre(box):
    return tuple((a + b) / 2 for a, b in zip(box.min, box.max))


def test_components_are_coerced_to_float_tuples():
    box = AABB([0, 1, 2], [3, 4, 5])
    assert box.min == (0.0, 1.0, 2.0)
    assert isinstance(box.max, tuple)


def test_wrong_component_count_is_rejected():
    with pytest.raises(ValueError):
        AABB((0, 0), (1, 1, 1))


def test_translate_round_trip():
    box = AABB((0.5, 1.0, -2.0), (1.5, 3.0, 0.0))
    moved = box.translate((4.0, -1.0, 2.5))
    assert moved != box
    assert moved.translate((-4.0, 1.0, -2.5)) == box


def test_translate_keeps_size():
    box = AABB((0, 0, 0), (0.2, 1.6, 0.2))
    moved = box.translate((10, 20, 30))
    assert moved.size() == pytest.approx(box.size())
    assert moved.min == (10.0, 20.0, 30.0)


def test_scale_keeps_centre_and_multiplies_size():
    box = AABB((1, 2, 3), (3, 6, 4))
    scaled = box.scale(2)
    assert _centre(scaled) == pytest.approx(_centre(box))
    assert scaled.size() == pytest.approx(tuple(2 * s for s in box.size()))


def test_scale_per_axis():
    box = AABB((0, 0, 0), (2, 2, 2))
    scaled = box.scale((1, 2, 0.5))
    assert scaled.size()[0] == pytest.approx(box.size()[0])
    assert scaled.size()[1] == pytest.approx(2 * box.size()[1])
    assert scaled.size()[2] == pytest.approx(0.5 * box.size()[2])
    assert _centre(scaled) == pytest.approx(_centre(box))


def test_intersects_overlapping_and_symmetric():
    a = AABB((0, 0, 0), (2, 2, 2))
    b = AABB((1, 1, 1), (3, 3, 3))
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_boxes_intersect():
    a = AABB((0, 0, 0), (1, 1, 1))
    b = a.translate((1, 0, 0))
    assert a.intersects(b)


def test_separated_on_one_axis_do_not_intersect():
    a = AABB((0, 0, 0), (1, 1, 1))
    b = a.translate((0, 0, 1.5))
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_depth_of_partial_overlap():
    a = AABB((0, 0, 0), (2, 2, 2))
    b = AABB((1, 1, 1), (3, 3, 3))
    assert a.depth(b) == pytest.approx((1.0, 1.0, 1.0))
    assert b.depth(a) == pytest.approx(a.depth(b))


def test_depth_of_contained_box_is_its_size():
    outer = AABB((0, 0, 0), (4, 4, 4))
    inner = AABB((1, 1, 1), (2, 3, 1.5))
    assert outer.depth(inner) == pytest.approx(inner.size())


def test_size_is_max_minus_min():
    box = AABB((-1, -2, -3), (1, 2, 3))
    assert box.size() == pytest.approx(tuple(b - a for a, b in zip(box.min, box.max)))
    assert all(s > 0 for s in box.size())