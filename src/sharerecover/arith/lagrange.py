"""
Lagrange interpolation at x = 0 over the rationals.

Given k points (x_i, y_i) of an integer polynomial of degree k - 1, the
constant term is recovered as:

    P(0) = sum_{i} y_i * L_i(0)

    L_i(0) = product_{j != i} (0 - x_j) / (x_i - x_j)
           = product_{j != i} (-x_j) / (x_i - x_j)

Unlike finite-field Shamir reconstruction there is no modulus: every term
is an exact Fraction, and the final sum must come out integral. A
non-integral sum means the points do not lie on one integer polynomial of
degree k - 1.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from .rational import Fraction, ONE, ZERO, add_fraction, mul_fraction
from ..errors import DuplicateXCoordinate, InsufficientShares


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """
    One evaluation of the secret polynomial.

    Attributes:
        x: The x-coordinate (non-negative evaluation point)
        y: The y-coordinate (polynomial value at x)
    """

    x: int
    y: int

    def __post_init__(self):
        if self.x < 0:
            raise ValueError(f"Share x must be non-negative, got {self.x}")


def evaluate_polynomial(coefficients: Sequence[int], x: int) -> int:
    """
    Evaluate an integer polynomial at x using Horner's method.

    Args:
        coefficients: [a_0, a_1, ..., a_{t-1}], constant term first
        x: Point at which to evaluate

    Returns:
        f(x), exact
    """
    result = 0
    for coeff in reversed(coefficients):
        result = result * x + coeff
    return result


def check_distinct_x(shares: Sequence[Share]) -> None:
    """
    Raise DuplicateXCoordinate for the first repeated x value.

    A repeated x would make some (x_i - x_j) factor zero.
    """
    seen: set[int] = set()
    for share in shares:
        if share.x in seen:
            raise DuplicateXCoordinate(share.x)
        seen.add(share.x)


def lagrange_basis_at_zero(shares: Sequence[Share], i: int) -> Fraction:
    """
    Compute L_i(0) for the i-th share.

    Each factor (-x_j) / (x_i - x_j) is folded in with a reducing
    multiplication, so intermediate integers stay as small as the value
    itself allows. Factors are taken in list order.
    """
    x_i = shares[i].x
    basis = ONE

    for j, share_j in enumerate(shares):
        if j == i:
            continue
        delta = x_i - share_j.x
        if delta == 0:
            raise DuplicateXCoordinate(x_i)
        basis = mul_fraction(basis, Fraction.of(-share_j.x, delta))

    return basis


def interpolate_at_zero(shares: Sequence[Share]) -> int:
    """
    Recover P(0) from exactly the given shares.

    All supplied shares are used; pick the subset before calling.

    Args:
        shares: Points with pairwise-distinct x values

    Returns:
        The constant term as an integer

    Raises:
        InsufficientShares: If shares is empty
        DuplicateXCoordinate: If two shares have the same x
        NonIntegerResult: If the interpolated value is not an integer
    """
    if not shares:
        raise InsufficientShares(available=0, required=1)

    check_distinct_x(shares)

    total = ZERO

    for i, share_i in enumerate(shares):
        basis = lagrange_basis_at_zero(shares, i)
        term = mul_fraction(Fraction(share_i.y), basis)
        total = add_fraction(total, term)
        logger.debug("x=%d: L(0)=%s, term=%s, total=%s", share_i.x, basis, term, total)

    return total.to_int()
