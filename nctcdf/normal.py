"""Standard normal integral after David Hill, Algorithm AS 66, Applied Statistics 22(3), 1973."""
import math

# Beyond LTONE only the upper tail is still representable; beyond UTZERO neither is
LTONE = 7.0
UTZERO = 18.66

# Boundary between the two approximations
CON = 1.28

P = 0.398942280444
Q = 0.39990348504
R = 0.398942280385

A1 = 5.75885480458
A2 = 2.62433121679
A3 = 5.92885724438
B1 = -29.8213557807
B2 = 48.6959930692

C1 = -0.000000038052
C2 = 0.000398064794
C3 = -0.151679116635
C4 = 4.8385912808
C5 = 0.742380924027
C6 = 3.99019417011
D1 = 1.00000615302
D2 = 1.98615381364
D3 = 5.29330324926
D4 = -15.1508972451
D5 = 30.789933034


def normal_cdf(x: float, upper: bool = False) -> float:
    """Integral of the N(0, 1) density over (-inf, x], or over [x, inf) if `upper`."""
    up = upper
    z = x
    if z < 0.0:
        up = not up
        z = -z

    if LTONE < z and (not up or UTZERO < z):
        return 0.0 if up else 1.0

    y = 0.5 * z * z

    if z <= CON:
        value = 0.5 - z * (P - Q * y / (y + A1 + B1 / (y + A2 + B2 / (y + A3))))
    else:
        value = (
            R
            * math.exp(-y)
            / (
                z + C1 + D1 / (
                    z + C2 + D2 / (
                        z + C3 + D3 / (
                            z + C4 + D4 / (
                                z + C5 + D5 / (z + C6)
                            )
                        )
                    )
                )
            )
        )

    if not up:
        value = 1.0 - value

    return value
