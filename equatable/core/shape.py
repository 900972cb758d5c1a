"""Container introspection for significant values.

Every value is classified into a single Shape before the comparator or the
hasher look at it. Ordered groupings (sequences and mappings) unwrap into
an element sequence that is fed back into the same algorithm.
"""

from collections.abc import Collection, Mapping, Sequence, Set
from typing import Any

from equatable.core.protocol import Equatable
from equatable.domain.error import InvalidSignificantValuesError
from equatable.domain.types import Shape

# Iterable, but never groupings
TEXT_TYPES = (str, bytes, bytearray, memoryview)


def classify(value: Any) -> Shape:
    """Classify a significant value.

    Args:
        value: Any significant value

    Returns:
        The value's shape
    """
    if value is None:
        return Shape.NULL
    if isinstance(value, (*TEXT_TYPES, type)):
        return Shape.SCALAR
    if isinstance(value, Equatable):
        return Shape.VALUE_OBJECT
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, Set):
        return Shape.SET
    if isinstance(value, Collection):
        return Shape.SEQUENCE
    return Shape.SCALAR


def unwrap(value: Any, shape: Shape) -> Sequence[Any] | None:
    """Unwrap a grouping or value object into its element sequence.

    Mappings unwrap into their ``(key, value)`` items in iteration order.

    Args:
        value: Value previously classified as ``shape``
        shape: Result of ``classify(value)``

    Returns:
        Ordered element sequence (None only for a value object without values)

    Raises:
        ValueError: If the shape has no element sequence
    """
    if shape is Shape.SEQUENCE:
        return value if isinstance(value, Sequence) else tuple(value)
    if shape is Shape.MAPPING:
        return tuple(value.items())
    if shape is Shape.VALUE_OBJECT:
        return significant_values_of(value)
    raise ValueError(f"{shape.value} values have no element sequence")


def significant_values_of(value: Equatable) -> Sequence[Any] | None:
    """Fetch and check a value object's significant values.

    Raises:
        InvalidSignificantValuesError: If the declared values are not a sequence
    """
    values = value.significant_values()
    if values is None:
        return None
    if isinstance(values, TEXT_TYPES) or not isinstance(values, Sequence):
        raise InvalidSignificantValuesError(
            type(value).__name__, type(values).__name__
        )
    return values
