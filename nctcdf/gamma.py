"""
Logarithm of the gamma function.

Allan Macleod, Algorithm AS 245: A Robust and Reliable Algorithm for the
Logarithm of the Gamma Function, Applied Statistics 38(2), 1989, pp. 397-402.
"""
import math

from .result import LogGammaStatus, Result

# ln(sqrt(2 pi))
ALR2PI = 0.918938533204673

# Stirling correction is negligible above this
XLGE = 510000.0

# Arguments at or above this are rejected outright
XLGST = 1.0e30

# Rational approximation coefficients. Each of R1-R3 holds the five numerator
# coefficients (constant term first) followed by the four lower coefficients
# of a monic quartic denominator.
R1 = (
    -2.66685511495,
    -24.4387534237,
    -21.9698958928,
    11.1667541262,
    3.13060547623,
    0.607771387771,
    11.9400905721,
    31.4690115749,
    15.2346874070,
)
R2 = (
    -78.3359299449,
    -142.046296688,
    137.519416416,
    78.6994924154,
    4.16438922228,
    47.0668766060,
    313.399215894,
    263.505074721,
    43.3400022514,
)
R3 = (
    -2.12159572323e05,
    2.30661510616e05,
    2.74647644705e04,
    -4.02621119975e04,
    -2.29660729780e03,
    -1.16328495004e05,
    -1.46025937511e05,
    -2.42357409629e04,
    -5.70691009324e02,
)
R4 = (
    0.279195317918525,
    0.4917317610505968,
    0.0692910599291889,
    3.350343815022304,
    6.012459259764103,
)


def _quartic_ratio(r: tuple, y: float) -> float:
    num = (((r[4] * y + r[3]) * y + r[2]) * y + r[1]) * y + r[0]
    den = (((y + r[8]) * y + r[7]) * y + r[6]) * y + r[5]
    return num / den


def log_gamma(x: float) -> Result:
    """Compute ln(Gamma(x)) for x > 0.

    Parameters:
    x : float, the argument of the gamma function

    Returns:
    result : Result, with status NON_POSITIVE_INPUT if x <= 0 and
        ARGUMENT_TOO_LARGE if x >= 1e30. The value is 0.0 in both cases.
    """
    if XLGST <= x:
        return Result(0.0, LogGammaStatus.ARGUMENT_TOO_LARGE)
    if x <= 0.0:
        return Result(0.0, LogGammaStatus.NON_POSITIVE_INPUT)

    if x < 1.5:
        if x < 0.5:
            value = -math.log(x)
            y = x + 1.0

            # x is below machine epsilon
            if y == 1.0:
                return Result(value, LogGammaStatus.OK)
        else:
            value = 0.0
            y = x
            x = (x - 0.5) - 0.5

        value += x * _quartic_ratio(R1, y)

    elif x < 4.0:
        y = (x - 1.0) - 1.0
        value = y * _quartic_ratio(R2, x)

    elif x < 12.0:
        value = _quartic_ratio(R3, x)

    else:
        y = math.log(x)
        value = x * (y - 1.0) - 0.5 * y + ALR2PI

        if x <= XLGE:
            x1 = 1.0 / x
            x2 = x1 * x1
            value += (
                x1
                * ((R4[2] * x2 + R4[1]) * x2 + R4[0])
                / ((x2 + R4[4]) * x2 + R4[3])
            )

    return Result(value, LogGammaStatus.OK)
