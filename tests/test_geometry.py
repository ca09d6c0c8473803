import math

import numpy as np
import pytest

from surfpatch.core.domain.exceptions import DegenerateGeometryError
from surfpatch.core.utils.geometry import (
    dot,
    magnitude,
    squared_distance,
    subtract,
    vector_angle_compatible,
)


def _unit(degrees):
    radians = math.radians(degrees)
    return (math.cos(radians), math.sin(radians), 0.0)


def test_squared_distance():
    assert squared_distance((0.0, 0.0, 0.0), (1.0, 2.0, 2.0)) == pytest.approx(9.0)
    assert squared_distance((1.0, 1.0, 1.0), (1.0, 1.0, 1.0)) == 0.0


def test_vector_helpers():
    assert np.allclose(subtract((3.0, 2.0, 1.0), (1.0, 1.0, 1.0)), (2.0, 1.0, 0.0))
    assert dot((1.0, 2.0, 3.0), (4.0, -5.0, 6.0)) == pytest.approx(12.0)
    assert magnitude((3.0, 4.0, 0.0)) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "angle, expected",
    [(0, True), (90, True), (119, True), (121, False), (180, False)],
)
def test_angle_threshold_is_120_degrees(angle, expected):
    assert vector_angle_compatible(_unit(0), _unit(angle)) is expected


def test_angle_test_ignores_vector_length():
    assert vector_angle_compatible((10.0, 0.0, 0.0), (0.01, 0.01, 0.0))
    assert not vector_angle_compatible((10.0, 0.0, 0.0), (-0.01, 0.001, 0.0))


def test_angle_test_is_symmetric():
    rng = np.random.RandomState(7)
    for _ in range(50):
        first, second = rng.normal(size=3), rng.normal(size=3)
        assert vector_angle_compatible(first, second) == vector_angle_compatible(
            second, first
        )


def test_zero_vector_is_degenerate():
    with pytest.raises(DegenerateGeometryError):
        vector_angle_compatible((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    with pytest.raises(DegenerateGeometryError):
        vector_angle_compatible((1.0, 0.0, 0.0), (0.0, 0.0, 0.0))
