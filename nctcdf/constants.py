"""
Thresholds and tunables shared across nctcdf.
"""

import os
from typing import Final


def env_int(name: str, default: int) -> int:
    """Read a positive integer setting from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


# Degrees of freedom above which the noncentral t CDF falls back to a normal
# approximation
LARGE_DF: Final[int] = 100

# 1 / (2 pi), to the precision the Owen T quadrature weights were fitted with
TWO_PI_INV: Final[float] = 0.159155

# Upper bound on Newton steps when truncating the Owen T integration range
NEWTON_MAX_ITER: Final[int] = env_int("NCTCDF_NEWTON_MAX_ITER", 100)
