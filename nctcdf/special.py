import math
import warnings

import numpy as np

from .backends import elementwise, like, to_numpy
from .constants import LARGE_DF
from .gamma import log_gamma
from .normal import normal_cdf
from .noncentral_t import noncentral_t_cdf
from .owen import owen_t
from .result import ApproximationWarning


def _check_no_grad(*args):
    # The scalar kernels are not differentiable
    assert not any(getattr(a, "requires_grad", False) for a in args)


def _gammaln_or_nan(x: float) -> float:
    result = log_gamma(x)
    return result.value if result.ok else math.nan


def gammaln(x):
    """Elementwise ln(Gamma(x)); nan where x <= 0 or x >= 1e30."""
    _check_no_grad(x)
    return like(elementwise(_gammaln_or_nan, x), x)


def gamma(x):
    """Elementwise Gamma(x), via `gammaln`."""
    _check_no_grad(x)
    return like(np.exp(elementwise(_gammaln_or_nan, x)), x)


def norm_cdf(x, upper: bool = False):
    """Cumulative distribution function of N(0, 1)"""
    _check_no_grad(x)
    return like(elementwise(lambda z: normal_cdf(z, upper), x), x)


def owens_t(h, a):
    """Elementwise Owen's T-function T(h, a)."""
    _check_no_grad(h, a)
    return like(elementwise(owen_t, h, a), h)


def ncdf_t(x, df, delta):
    """
    Calculate the CDF of the noncentral t-distribution.

    Parameters:
    -----------
    x : torch.Tensor or np.ndarray
        The point at which to evaluate the CDF
    df : int, torch.Tensor or np.ndarray
        Degrees of freedom. Must hold integral values of at least 1.
    delta : float, torch.Tensor or np.ndarray
        Noncentrality parameter

    Returns:
    --------
    torch.Tensor or np.ndarray
        The CDF value(s), in the array type of `x`
    """
    _check_no_grad(x, df, delta)

    df_np = to_numpy(df)
    if not np.all(np.mod(df_np, 1) == 0):
        raise ValueError("Degrees of freedom must be integers")

    if np.any(df_np > LARGE_DF):
        warnings.warn(
            f"Normal approximation used where degrees of freedom exceed {LARGE_DF}.",
            ApproximationWarning,
            stacklevel=2,
        )

    result = elementwise(
        lambda st, n, d: noncentral_t_cdf(st, int(n), d).value, x, df_np, delta
    )
    return like(result, x)
