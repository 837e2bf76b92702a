"""
Share selection and secret recovery.

The default rule takes the k shares with the smallest x values. For a
consistent share set any k-subset gives the same constant term, so the
choice only matters when some share is corrupted; cross_check() detects
that case by comparing every k-subset.
"""

import itertools
import logging
from typing import Any, Mapping, Optional, Sequence

from .shares import ShareSet
from ..arith.lagrange import Share, check_distinct_x, interpolate_at_zero
from ..errors import InconsistentShares, InsufficientShares


logger = logging.getLogger(__name__)


def select_shares(shares: Sequence[Share], k: int) -> list[Share]:
    """
    Pick the first k shares by ascending x.

    Raises:
        InsufficientShares: If fewer than k shares are available
        DuplicateXCoordinate: If the chosen shares repeat an x value
    """
    if len(shares) < k:
        raise InsufficientShares(available=len(shares), required=k)

    selected = sorted(shares, key=lambda s: s.x)[:k]
    check_distinct_x(selected)
    return selected


def cross_check(
    shares: Sequence[Share], k: int, limit: Optional[int] = None
) -> int:
    """
    Interpolate every k-subset and require them all to agree.

    Subsets are visited in combinations order over the x-sorted shares, so
    the first subset is always the default selection.

    Args:
        shares: All available shares
        k: Threshold
        limit: Stop after this many subsets (None for all)

    Returns:
        The agreed constant term

    Raises:
        InsufficientShares: If fewer than k shares are available
        InconsistentShares: If two subsets give different values
        NonIntegerResult: If some subset does not interpolate to an integer
    """
    if len(shares) < k:
        raise InsufficientShares(available=len(shares), required=k)

    if limit is not None and limit < 1:
        raise ValueError(f"Subset limit must be at least 1, got {limit}")

    ordered = sorted(shares, key=lambda s: s.x)
    check_distinct_x(ordered)

    reference: Optional[tuple[tuple[int, ...], int]] = None
    checked = 0

    for subset in itertools.combinations(ordered, k):
        if limit is not None and checked >= limit:
            break

        xs = tuple(s.x for s in subset)
        value = interpolate_at_zero(subset)
        checked += 1

        if reference is None:
            reference = (xs, value)
        elif value != reference[1]:
            raise InconsistentShares(reference, (xs, value), checked=checked)

    logger.info("Cross-checked %d subsets of size %d", checked, k)
    return reference[1]


def recover_from_share_set(
    share_set: ShareSet, cross_validate: bool = False, limit: Optional[int] = None
) -> int:
    """Recover the constant term from an already decoded ShareSet."""
    if cross_validate:
        return cross_check(share_set.shares, share_set.k, limit=limit)

    selected = select_shares(share_set.shares, share_set.k)
    logger.info(
        "Interpolating with k=%d shares at x=%s",
        share_set.k,
        [s.x for s in selected],
    )
    return interpolate_at_zero(selected)


def recover_secret(
    data: Mapping[str, Any],
    cross_validate: bool = False,
    limit: Optional[int] = None,
) -> int:
    """
    Recover the constant term c = P(0) from an external share collection.

    Args:
        data: Mapping with a "keys" entry and one record per share
        cross_validate: Require every k-subset to agree instead of using
            only the first k shares by x
        limit: Maximum number of subsets to compare when cross-validating

    Returns:
        The recovered secret

    Example:
        >>> recover_secret({
        ...     "keys": {"n": 4, "k": 3},
        ...     "1": {"base": "10", "value": "4"},
        ...     "2": {"base": "2", "value": "111"},
        ...     "3": {"base": "10", "value": "12"},
        ...     "6": {"base": "4", "value": "213"},
        ... })
        3
    """
    share_set = ShareSet.from_dict(data)
    return recover_from_share_set(share_set, cross_validate=cross_validate, limit=limit)
