import numpy as np
import pytest

from pava.core.direction import Direction
from pava.core.errors import CenterIndexError, EmptyInputError, LengthMismatchError
from pava.core.regression import regress, regress_radial
from pava.data.synthetic import make_shape


@pytest.fixture
def sample():
    values = np.array([3.0, 5.0, 2.0, 1.0, 1.5, 0.5, 2.0, 4.0, 3.0, 6.0])
    weights = np.array([1.0, 2.0, 1.0, 1.0, 0.5, 1.0, 1.0, 3.0, 1.0, 1.0])
    return values, weights


def test_center_zero_is_plain_regression(sample):
    values, weights = sample
    radial = regress_radial(values, weights, 0, Direction.INCREASING)
    plain = regress(values, weights, Direction.INCREASING)
    np.testing.assert_array_equal(radial.values, plain.values)
    np.testing.assert_array_equal(radial.weights, plain.weights)


def test_center_end_uses_complement(sample):
    values, weights = sample
    radial = regress_radial(values, weights, len(values), Direction.INCREASING)
    plain = regress(values, weights, Direction.DECREASING)
    np.testing.assert_array_equal(radial.values, plain.values)
    np.testing.assert_array_equal(radial.weights, plain.weights)


def test_arms_are_fit_independently(sample):
    values, weights = sample
    center = 5
    res = regress_radial(values, weights, center, Direction.INCREASING)
    left = regress(values[:center], weights[:center], Direction.DECREASING)
    right = regress(values[center:], weights[center:], Direction.INCREASING)
    np.testing.assert_array_equal(res.values, np.concatenate([left.values, right.values]))
    np.testing.assert_array_equal(res.weights, np.concatenate([left.weights, right.weights]))
    assert len(res) == len(values)


def test_valley_shape():
    values, weights = make_shape("valley", n=60, slope=1.0, noise=3.0, seed=7)
    center = 30
    res = regress_radial(values, weights, center, Direction.INCREASING)
    assert np.all(np.diff(res.values[:center]) <= 0)
    assert np.all(np.diff(res.values[center:]) >= 0)


def test_peak_shape():
    values, weights = make_shape("valley", n=40, slope=-1.0, noise=2.0, seed=3)
    center = 20
    res = regress_radial(values, weights, center, Direction.DECREASING)
    assert np.all(np.diff(res.values[:center]) >= 0)
    assert np.all(np.diff(res.values[center:]) <= 0)


def test_center_element_belongs_to_right_arm():
    # left arm [5, 1] is already decreasing; right arm [0, 4] already increasing
    values = [5.0, 1.0, 0.0, 4.0]
    res = regress_radial(values, [1.0] * 4, 2, Direction.INCREASING)
    np.testing.assert_array_equal(res.values, values)

    # with center 1 the 1.0 joins the right arm and pools with 0.0
    res = regress_radial(values, [1.0] * 4, 1, Direction.INCREASING)
    np.testing.assert_allclose(res.values, [5.0, 0.5, 0.5, 4.0])
    np.testing.assert_allclose(res.weights, [1.0, 2.0, 2.0, 1.0])


def test_boundary_discontinuity_is_kept():
    values = [0.0, 0.0, 10.0, 10.0]
    res = regress_radial(values, [1.0] * 4, 2, Direction.INCREASING)
    np.testing.assert_array_equal(res.values, values)


@pytest.mark.parametrize("center", [-1, 5, 100])
def test_center_out_of_range(center):
    with pytest.raises(CenterIndexError):
        regress_radial([1.0, 2.0, 3.0, 4.0], [1.0] * 4, center, Direction.INCREASING)


@pytest.mark.parametrize("center", [1.5, "2", None, True])
def test_center_must_be_integer(center):
    with pytest.raises(CenterIndexError):
        regress_radial([1.0, 2.0, 3.0], [1.0] * 3, center, Direction.INCREASING)


def test_numpy_integer_center():
    res = regress_radial([2.0, 1.0, 3.0], [1.0] * 3, np.int64(1), Direction.INCREASING)
    assert len(res) == 3


def test_radial_preconditions():
    with pytest.raises(EmptyInputError):
        regress_radial([], [], 0, Direction.INCREASING)
    with pytest.raises(LengthMismatchError):
        regress_radial([1.0, 2.0], [1.0], 1, Direction.INCREASING)
    with pytest.raises(TypeError):
        regress_radial([1.0], [1.0], 0, None)
