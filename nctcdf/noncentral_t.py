"""
Lower tail of the noncentral Student t-distribution, after BE Cooper,
Algorithm AS 5: The Integral of the Non-Central T-Distribution, Applied
Statistics 17(2), 1968, p. 193.
"""
import math
from dataclasses import dataclass
from functools import partial, reduce

from .backends import absolute
from .constants import LARGE_DF
from .gamma import log_gamma
from .normal import normal_cdf
from .owen import owen_t
from .result import ConvergenceError, NoncentralTStatus, Result

# Exponential terms whose argument magnitude exceeds this are dropped
EMIN = 12.5

# 1 / sqrt(2 pi), 1 / (2 pi), sqrt(2 pi)
G1 = 0.3989422804
G2 = 0.1591549431
G3 = 2.5066282746


@dataclass(frozen=True)
class _SeriesState:
    """Running terms of the AS 5 series after the step for `fk - 2`."""

    ak: float
    fk: float
    fmkm1: float
    fmkm2: float
    total: float


def _advance(state: _SeriesState, _k: int, *, b: float, da: float, odd: bool) -> _SeriesState:
    fk = state.fk
    fkm1 = fk - 1.0

    fmkm2 = b * (da * state.ak * state.fmkm1 + state.fmkm2) * fkm1 / fk
    ak = 1.0 / (state.ak * fkm1)
    fmkm1 = b * (da * ak * fmkm2 + state.fmkm1) * fk / (fk + 1.0)

    return _SeriesState(
        ak=1.0 / (ak * fk),
        fk=fk + 2.0,
        fmkm1=fmkm1,
        fmkm2=fmkm2,
        total=state.total + (fmkm1 if odd else fmkm2),
    )


def _large_df(st: float, f: float, d: float) -> float:
    # Exact mean and variance of the noncentral t, matched to a normal
    mean_ratio = math.exp(log_gamma(0.5 * (f - 1.0)).value - log_gamma(0.5 * f).value)
    a = math.sqrt(0.5 * f) * mean_ratio * d
    return normal_cdf((st - a) / math.sqrt(f * (1.0 + d * d) / (f - 2.0) - a * a))


def _exact(st: float, idf: int, d: float) -> float:
    f = float(idf)
    odd = idf % 2 == 1

    a = st / math.sqrt(f)
    b = f / (f + st * st)
    rb = math.sqrt(b)
    da = d * a
    drb = d * rb

    if idf == 1:
        return normal_cdf(drb, upper=True) + 2.0 * owen_t(drb, a)

    if absolute(drb) < EMIN:
        fmkm2 = a * rb * math.exp(-0.5 * drb * drb) * normal_cdf(a * drb) * G1
    else:
        fmkm2 = 0.0

    fmkm1 = b * da * fmkm2
    if absolute(d) < EMIN:
        fmkm1 += b * a * G2 * math.exp(-0.5 * d * d)

    seed = _SeriesState(
        ak=1.0,
        fk=2.0,
        fmkm1=fmkm1,
        fmkm2=fmkm2,
        total=fmkm1 if odd else fmkm2,
    )

    # Each step depends on the previous one, so k must increase
    state = reduce(partial(_advance, b=b, da=da, odd=odd), range(2, idf - 1, 2), seed)

    if odd:
        return normal_cdf(drb, upper=True) + 2.0 * (state.total + owen_t(drb, a))
    return normal_cdf(d, upper=True) + state.total * G3


def noncentral_t_cdf(st: float, df: int, d: float) -> Result:
    """
    Calculate the lower tail P(T <= st) of the noncentral t-distribution.

    Parameters:
    -----------
    st : float
        The point at which to evaluate the CDF
    df : int
        Degrees of freedom, at least 1
    d : float
        Noncentrality parameter

    Returns:
    --------
    Result
        The CDF value. The status is LARGE_DF_APPROXIMATION when df exceeds
        100 and a normal approximation was used, and CONVERGENCE_FAILURE
        (with a nan value) when Owen's T-function could not be evaluated.
    """
    if df < 1:
        raise ValueError(f"Degrees of freedom must be at least 1, got {df}")

    if LARGE_DF < df:
        return Result(_large_df(st, float(df), d), NoncentralTStatus.LARGE_DF_APPROXIMATION)

    try:
        value = _exact(st, df, d)
    except ConvergenceError:
        return Result(math.nan, NoncentralTStatus.CONVERGENCE_FAILURE)

    return Result(value, NoncentralTStatus.OK)
