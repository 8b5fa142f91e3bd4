import math
import statistics

import pytest

from widgetlab.vector import TAU, Vector2D, mean, smallest_angle_between, weighted_mean


def test_default_is_origin():
    assert Vector2D() == Vector2D(0.0, 0.0)


def test_add_sub_round_trip():
    a = Vector2D(1.5, -2.25)
    b = Vector2D(3.0, 7.0)
    assert (a + b) - b == a


def test_negation_cancels():
    v = Vector2D(3.5, -1.25)
    assert v + (-v) == Vector2D()


def test_mul_div_round_trip():
    v = Vector2D(1.5, -3.0)
    assert (v * 4.0) / 4.0 == v
    assert 2.0 * v == v * 2.0


def test_mul_rejects_non_numbers():
    with pytest.raises(TypeError):
        Vector2D(1.0, 2.0) * "a"


def test_magnitude_pythagorean():
    v = Vector2D(3.0, 4.0)
    assert v.magnitude() == 5.0
    assert v.magnitude_squared() == pytest.approx(v.magnitude() ** 2)


def test_clamp_shrinks_long_vector():
    v = Vector2D(30.0, 40.0)
    clamped = v.clamp_magnitude(10.0)
    assert clamped.magnitude() == pytest.approx(10.0)
    assert clamped.angle() == pytest.approx(v.angle())


def test_clamp_keeps_short_vector():
    v = Vector2D(1.0, 1.0)
    assert v.clamp_magnitude(100.0) == v


@pytest.mark.parametrize("angle", [0.5, -2.0, 3.0, 0.0])
def test_from_polar_round_trip(angle):
    v = Vector2D.from_polar(angle, 7.0)
    assert v.magnitude() == pytest.approx(7.0)
    assert v.angle() == pytest.approx(angle)


def test_angle_of_y_axis():
    assert Vector2D(0.0, 1.0).angle() == pytest.approx(math.pi / 2)


@pytest.mark.parametrize(
    "source,target",
    [(0.0, 1.0), (1.0, 0.0), (0.0, 10.0), (-5.0, 5.0), (3.0, -3.0), (100.0, 0.25)],
)
def test_smallest_angle_range_and_equivalence(source, target):
    result = smallest_angle_between(source, target)
    assert -math.pi <= result < math.pi
    turns = (source + result - target) / TAU
    assert turns == pytest.approx(round(turns), abs=1e-9)


def test_smallest_angle_half_turn_is_negative_pi():
    assert smallest_angle_between(0.0, math.pi) == pytest.approx(-math.pi)


def test_smallest_angle_same_angle_is_zero():
    assert smallest_angle_between(1.0, 1.0) == 0.0


def test_weighted_mean_empty_is_none():
    assert weighted_mean([]) is None


def test_weighted_mean_zero_weight_is_none():
    assert weighted_mean([(Vector2D(1.0, 1.0), 0.0), (Vector2D(2.0, 2.0), 0.0)]) is None


def test_weighted_mean_vectors():
    result = weighted_mean([(Vector2D(0.0, 0.0), 2.0), (Vector2D(4.0, 2.0), 2.0)])
    assert result == Vector2D(2.0, 1.0)


def test_weighted_mean_floats():
    assert weighted_mean([(2.0, 1.0), (4.0, 3.0)]) == pytest.approx(3.5)


def test_weighted_mean_single_item_is_value():
    v = Vector2D(5.0, -3.0)
    result = weighted_mean([(v, 9.0)])
    assert result.x == pytest.approx(v.x)
    assert result.y == pytest.approx(v.y)


def test_mean_empty_is_none():
    assert mean([]) is None


def test_mean_floats_matches_statistics():
    values = [1.0, 2.5, -4.0, 10.0, 3.25]
    assert mean(values) == pytest.approx(statistics.mean(values))


def test_mean_symmetric_vectors_is_origin():
    result = mean([Vector2D(1.0, 2.0), Vector2D(-1.0, -2.0), Vector2D(3.0, 0.0), Vector2D(-3.0, 0.0)])
    assert result.x == pytest.approx(0.0)
    assert result.y == pytest.approx(0.0)