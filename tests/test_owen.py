import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st
from scipy.special import owens_t as scipy_owens_t

from nctcdf import ConvergenceError, owen_t

precision = 1e-6


@pytest.mark.parametrize("fx", [-5.0, -1.0, 0.5, 1.0, 10.0])
def test_zero_h(fx):
    assert abs(owen_t(0.0, fx) - math.atan(fx) / (2 * math.pi)) < precision


@pytest.mark.parametrize("x", [-3.0, 0.1, 1.0, 5.0])
def test_zero_a(x):
    assert owen_t(x, 0.0) == 0.0


@pytest.mark.parametrize("x", [15.5, -20.0])
def test_large_h(x):
    assert owen_t(x, 1.0) == 0.0


@given(st.floats(-3, 3), st.floats(-2, 2))
def test_owen_t_scipy(h, a):
    assert abs(owen_t(h, a) - scipy_owens_t(h, a)) < precision


@given(st.floats(-5, 5), st.floats(-3, 3))
def test_symmetry(h, a):
    assert owen_t(-h, a) == owen_t(h, a)
    assert owen_t(h, -a) == -owen_t(h, a)


def test_truncated_range():
    # log(1 + 36) + 18 >= 15, so the upper limit is found by Newton iteration
    np.testing.assert_allclose(owen_t(1.0, 6.0), scipy_owens_t(1.0, 6.0), atol=1e-4)
    np.testing.assert_allclose(owen_t(1.0, -6.0), scipy_owens_t(1.0, -6.0), atol=1e-4)


def test_truncation_iteration_cap():
    with pytest.raises(ConvergenceError):
        owen_t(1.0, 6.0, max_iter=1)

    # Without truncation the cap is never consulted
    assert owen_t(1.0, 0.5, max_iter=0) == owen_t(1.0, 0.5)


@pytest.mark.parametrize("h", [0.3, 1.0, -2.0])
def test_infinite_a(h):
    np.testing.assert_allclose(owen_t(h, math.inf), scipy_owens_t(h, math.inf), atol=1e-8)
    np.testing.assert_allclose(owen_t(h, -math.inf), scipy_owens_t(h, -math.inf), atol=1e-8)
