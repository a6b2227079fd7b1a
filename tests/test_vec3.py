import numpy as np
import pytest

from oklab_mixer.oklab import CONE_TO_LMS, LMS_TO_CONE
from oklab_mixer.vec3 import lerp, mat3, multiply, power, vec3


def test_multiply_row_major():
    m = mat3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert np.array_equal(multiply(m, vec3(1, 0, 0)), [1, 4, 7])
    assert np.array_equal(multiply(m, vec3(1, 1, 1)), [6, 15, 24])


def test_power_elementwise():
    assert np.allclose(power(vec3(8, 27, 0), 1 / 3), [2, 3, 0])
    assert np.allclose(power(vec3(2, 3, 4), 3), [8, 27, 64])


def test_power_negative_base_fractional_is_nan():
    out = power(vec3(-8, 8, 1), 1 / 3)
    assert np.isnan(out[0])
    assert np.allclose(out[1:], [2, 1])


def test_lerp_unbounded():
    a, b = vec3(0, 1, 2), vec3(2, 3, 4)
    assert np.allclose(lerp(a, b, 0.5), [1, 2, 3])
    assert np.allclose(lerp(a, b, 2.0), [4, 5, 6])
    assert np.allclose(lerp(a, b, -1.0), [-2, -1, 0])


def test_inputs_not_mutated():
    a, b = vec3(0.1, 0.2, 0.3), vec3(0.4, 0.5, 0.6)
    before = (a.copy(), b.copy())
    lerp(a, b, 0.3)
    power(a, 1 / 3)
    multiply(CONE_TO_LMS, b)
    assert np.array_equal(a, before[0]) and np.array_equal(b, before[1])


def test_mat3_shape_checked():
    with pytest.raises(ValueError):
        mat3([[1, 2], [3, 4]])


def test_constant_matrices_read_only():
    with pytest.raises(ValueError):
        CONE_TO_LMS[0, 0] = 1.0


def test_constant_matrices_are_inverses():
    assert np.allclose(LMS_TO_CONE @ CONE_TO_LMS, np.eye(3), atol=1e-6)
    assert CONE_TO_LMS[0, 0] == 0.4121656120
    assert LMS_TO_CONE[2, 2] == 1.7068625689
