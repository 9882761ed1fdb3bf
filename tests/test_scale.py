import numpy as np
import pytest

from geometry.errors import DegenerateThickness, InvalidScaleParameters
from geometry.ops.scale import (
    ScaleParameters, scale_to_chord, normalize_thickness, scale_loop, max_thickness,
)
from geometry.profile import frozen_array

LOOP = frozen_array([(0, 0), (0.5, 0.2), (1, 0), (0.5, -0.1)])


def test_chord_only():
    out = scale_loop(LOOP, ScaleParameters(chord_width=100))
    np.testing.assert_allclose(out, [[0, 0], [50, 20], [100, 0], [50, -10]])


def test_chord_and_thickness():
    out = scale_loop(LOOP, ScaleParameters(chord_width=100, thickness=40))
    np.testing.assert_allclose(out, [[0, 0], [50, 40], [100, 0], [50, -20]])
    assert max_thickness(out) == pytest.approx(40.0, abs=1e-4)


def test_thickness_leaves_x_untouched():
    chorded = scale_to_chord(LOOP, 250)
    out = normalize_thickness(chorded, 12)
    np.testing.assert_array_equal(out[:, 0], chorded[:, 0])
    assert max_thickness(out) == pytest.approx(12.0, abs=1e-4)


def test_chord_scaling_composes():
    once = scale_to_chord(LOOP, 6)
    twice = scale_to_chord(scale_to_chord(LOOP, 2), 3)
    np.testing.assert_allclose(once, twice)


def test_input_not_mutated_or_aliased():
    before = LOOP.copy()
    out = scale_loop(LOOP, ScaleParameters(chord_width=10, thickness=3))
    np.testing.assert_array_equal(LOOP, before)
    assert not np.shares_memory(out, LOOP)
    assert not out.flags.writeable


def test_degenerate_thickness():
    flat_below = frozen_array([(0, 0), (0.5, -0.1), (1, 0)])
    with pytest.raises(DegenerateThickness):
        scale_loop(flat_below, ScaleParameters(chord_width=100, thickness=10))


def test_zero_thickness_skips_normalization():
    flat_below = frozen_array([(0, 0), (0.5, -0.1), (1, 0)])
    out = scale_loop(flat_below, ScaleParameters(chord_width=100, thickness=0))
    np.testing.assert_allclose(out, [[0, 0], [50, -10], [100, 0]])


@pytest.mark.parametrize("chord, thickness", [(0, 0), (-5, 0), (10, -1), (1.5, 0), (10, 2.0), (True, 0)])
def test_invalid_parameters(chord, thickness):
    with pytest.raises(InvalidScaleParameters):
        ScaleParameters(chord_width=chord, thickness=thickness)
