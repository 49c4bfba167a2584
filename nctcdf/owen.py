"""
Owen's T-function

    T(h, a) = 1/(2 pi) * integral_0^a exp(-h^2 (1 + x^2) / 2) / (1 + x^2) dx

evaluated by Gaussian quadrature, following JC Young and C Minder, Algorithm
AS 76 (Applied Statistics 23(3), 1974) with Remark AS R30 (MA Porter and
DJ Winstanley, Applied Statistics 28(1), 1979).
"""
import math

from .backends import absolute
from .constants import NEWTON_MAX_ITER, TWO_PI_INV
from .normal import normal_cdf
from .result import ConvergenceError

# |x| or |fx| below this is treated as zero
TV1 = 1.0e-35

# |x| above this makes T vanish
TV2 = 15.0

# Exponent beyond which the integrand is truncated
TV3 = 15.0

# Newton convergence tolerance
TV4 = 1.0e-05

# Five-point Gauss-Legendre nodes (offsets from 0.5) and weights on [0, 1]
U = (0.0744372, 0.2166977, 0.3397048, 0.4325317, 0.4869533)
W = (0.1477621, 0.1346334, 0.1095432, 0.0747257, 0.0333357)


def _truncation_point(xs: float, fx: float, max_iter: int) -> tuple[float, float]:
    """Solve xs * t^2 + TV3 - log(1 + t^2) = 0 for t by Newton's method, starting at fx / 2.

    Returns the root and its square.
    """
    x1 = 0.5 * fx
    fxs = x1 * x1

    for _ in range(max_iter):
        rt = fxs + 1.0
        x2 = x1 + (xs * fxs + TV3 - math.log(rt)) / (2.0 * x1 * (1.0 / rt - xs))
        fxs = x2 * x2

        if absolute(x2 - x1) < TV4:
            return x2, fxs
        x1 = x2

    raise ConvergenceError(
        f"Owen T truncation point for fx={fx!r} did not converge in {max_iter} iterations"
    )


def owen_t(x: float, fx: float, max_iter: int = NEWTON_MAX_ITER) -> float:
    """Owen's T-function T(x, fx).

    Args:
        x: The `h` argument; T decays like exp(-x^2 / 2).
        fx: The upper limit of integration `a`.
        max_iter: Cap on the Newton steps used to truncate a very wide
            integration range. `ConvergenceError` is raised when it is hit.
    """
    if absolute(x) < TV1:
        return TWO_PI_INV * math.atan(fx)

    if TV2 < absolute(x):
        return 0.0

    if absolute(fx) < TV1:
        return 0.0

    # T(h, +-inf) = +-Phi(-|h|) / 2
    if math.isinf(fx):
        return math.copysign(0.5 * normal_cdf(absolute(x), upper=True), fx)

    xs = -0.5 * x * x
    x2 = fx
    fxs = fx * fx

    # Shrink the upper limit where the integrand is negligible
    if TV3 <= math.log(1.0 + fxs) - xs * fxs:
        x2, fxs = _truncation_point(xs, fx, max_iter)

    rt = 0.0
    for u, w in zip(U, W):
        r1 = 1.0 + fxs * (0.5 + u) ** 2
        r2 = 1.0 + fxs * (0.5 - u) ** 2
        rt += w * (math.exp(xs * r1) / r1 + math.exp(xs * r2) / r2)

    return rt * x2 * TWO_PI_INV
