"""
Proportionality test for coefficient vectors.

Two vectors are proportional when a single non-zero ratio maps one onto the
other. The scan works index by index:

- both entries near zero: the index is ignored
- exactly one entry near zero: not proportional
- both entries non-zero: the ratio this[i] / other[i] must match the first
  ratio found (within EPSILON)

If no index ever had both entries non-zero, the vectors are reported as not
proportional. Two all-zero vectors are therefore not similar.
"""

from typing import Sequence

from .constants import EPSILON


def coefficients_proportional(
    this: Sequence[float],
    other: Sequence[float],
    eps: float = EPSILON,
) -> bool:
    """
    Check whether two coefficient vectors are scalar multiples of each other.

    Args:
        this: Coefficients of the first entity
        other: Coefficients of the second entity, same length
        eps: Absolute tolerance for zero tests and ratio comparison

    Returns:
        True if a non-zero ratio was found and every non-zero pair matches it
    """
    if len(this) != len(other):
        return False

    ratio = 0.0
    ratio_found = False

    for a, b in zip(this, other):
        a_nonzero = abs(a) > eps
        b_nonzero = abs(b) > eps

        if a_nonzero != b_nonzero:
            return False

        if a_nonzero:
            current = a / b
            if not ratio_found:
                ratio = current
                ratio_found = True
            elif abs(ratio - current) > eps:
                return False

    return ratio_found
