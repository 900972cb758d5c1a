"""Structural equality of significant-value sequences."""

from collections.abc import Sequence
from typing import Any

from equatable.core.protocol import effective_mode
from equatable.core.shape import classify, significant_values_of, unwrap
from equatable.domain.types import ComparisonMode, Shape
from equatable.util.logging import get_logger

logger = get_logger(__name__)


def values_equal(
    a: Sequence[Any] | None,
    b: Sequence[Any] | None,
    mode: ComparisonMode = ComparisonMode.DEEP,
) -> bool:
    """Compare two significant-value sequences position by position.

    A missing sequence stands for "no object": two missing sequences are
    equal, one missing sequence never equals a present one. Otherwise the
    sequences must have the same length and be pairwise equal in order.

    Args:
        a: First sequence, or None
        b: Second sequence, or None
        mode: DEEP recurses into nested groupings, FLAT uses natural equality

    Returns:
        True if every position is equal
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        logger.debug(f"Sequence lengths differ: {len(a)} != {len(b)}")
        return False

    for index, (left, right) in enumerate(zip(a, b)):
        if not elements_equal(left, right, mode):
            logger.debug(f"Significant values differ at index {index}")
            return False
    return True


def elements_equal(
    left: Any, right: Any, mode: ComparisonMode = ComparisonMode.DEEP
) -> bool:
    """Compare two significant values.

    Value objects always dispatch through their own significant values and
    are never equal to a value object of another concrete type. In DEEP
    mode two ordered groupings (sequences or mappings, in any combination)
    are unwrapped and compared recursively. Everything else falls back to
    natural equality.
    """
    if left is right:
        return True
    if left is None or right is None:
        return False

    left_shape = classify(left)
    right_shape = classify(right)

    if left_shape is Shape.VALUE_OBJECT and right_shape is Shape.VALUE_OBJECT:
        if type(left) is not type(right):
            return False
        return values_equal(
            significant_values_of(left),
            significant_values_of(right),
            effective_mode(left),
        )

    if (
        mode is ComparisonMode.DEEP
        and left_shape.is_ordered_grouping
        and right_shape.is_ordered_grouping
    ):
        return values_equal(
            unwrap(left, left_shape), unwrap(right, right_shape), mode
        )

    # Sets land here: their iteration order is not stable between equal
    # sets, so there is no ordered descent and natural set equality applies
    return bool(left == right)
