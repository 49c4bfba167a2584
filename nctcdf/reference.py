"""
Tabulated values of the noncentral Student t CDF, as produced by Mathematica's
NoncentralStudentTDistribution (Abramowitz & Stegun, Handbook of Mathematical
Functions; Wolfram, The Mathematica Book, 4th ed.).
"""
from typing import Iterator, NamedTuple


class ReferenceValue(NamedTuple):
    df: int
    noncentrality: float
    x: float
    expected_cdf: float


REFERENCE_VALUES: tuple[ReferenceValue, ...] = tuple(
    ReferenceValue(*row)
    for row in [
        (1, 0.0, 3.00, 0.8975836176504333),
        (2, 0.0, 3.00, 0.9522670169),
        (3, 0.0, 3.00, 0.9711655571887813),
        (1, 0.5, 3.00, 0.8231218864),
        (2, 0.5, 3.00, 0.9049021510),
        (3, 0.5, 3.00, 0.9363471834),
        (1, 1.0, 3.00, 0.7301025986),
        (2, 1.0, 3.00, 0.8335594263),
        (3, 1.0, 3.00, 0.8774010255),
        (1, 2.0, 3.00, 0.5248571617),
        (2, 2.0, 3.00, 0.6293856597),
        (3, 2.0, 3.00, 0.6800271741),
        (1, 4.0, 3.00, 0.20590131975),
        (2, 4.0, 3.00, 0.2112148916),
        (3, 4.0, 3.00, 0.2074730718),
        (15, 7.0, 15.00, 0.9981130072),
        (20, 7.0, 15.00, 0.9994873850),
        (25, 7.0, 15.00, 0.9998391562),
        (1, 1.0, 0.05, 0.168610566972),
        (2, 1.0, 0.05, 0.16967950985),
        (3, 1.0, 0.05, 0.1701041003),
        (10, 2.0, 4.00, 0.9247683363),
        (10, 3.0, 4.00, 0.7483139269),
        (10, 4.0, 4.00, 0.4659802096),
        (10, 2.0, 5.00, 0.9761872541),
        (10, 3.0, 5.00, 0.8979689357),
        (10, 4.0, 5.00, 0.7181904627),
        (10, 2.0, 6.00, 0.9923658945),
        (10, 3.0, 6.00, 0.9610341649),
        (10, 4.0, 6.00, 0.8688007350),
    ]
)


def reference_values() -> Iterator[ReferenceValue]:
    """Iterate over the tabulated (df, noncentrality, x, expected_cdf) rows.

    Every call starts again from the first row.
    """
    return iter(REFERENCE_VALUES)
