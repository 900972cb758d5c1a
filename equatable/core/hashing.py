"""Order-sensitive hashing of significant-value sequences.

The hash is a multiplicative fold: the accumulator starts at HASH_SEED and
every element contributes ``acc * HASH_MULTIPLIER + contribution``, kept to
63 bits. Sequences that ``values_equal`` judges equal under a mode hash
identically under that mode.
"""

from collections.abc import Sequence
from typing import Any

from equatable.core.protocol import effective_mode
from equatable.core.shape import classify, significant_values_of, unwrap
from equatable.domain.types import ComparisonMode, Shape

HASH_SEED = 17
HASH_MULTIPLIER = 31
# Keeps the result a non-negative Py_ssize_t so hash() returns it unchanged
HASH_MASK = (1 << 63) - 1


def hash_values(
    values: Sequence[Any] | None, mode: ComparisonMode = ComparisonMode.DEEP
) -> int:
    """Fold a significant-value sequence into a single hash.

    Args:
        values: Sequence to hash, or None for "no object"
        mode: Comparison mode the hash has to agree with

    Returns:
        Non-negative 63-bit hash (0 for a missing sequence)
    """
    if values is None:
        return 0

    acc = HASH_SEED
    for value in values:
        acc = (acc * HASH_MULTIPLIER + element_hash(value, mode)) & HASH_MASK
    return acc


def element_hash(value: Any, mode: ComparisonMode = ComparisonMode.DEEP) -> int:
    """Contribution of a single significant value."""
    shape = classify(value)

    if shape is Shape.NULL:
        return 0
    if shape is Shape.VALUE_OBJECT:
        return hash_values(significant_values_of(value), effective_mode(value))
    if shape is Shape.SEQUENCE:
        return hash_values(unwrap(value, shape), mode)
    if shape is Shape.MAPPING:
        if mode is ComparisonMode.FLAT:
            # Natural mapping equality ignores insertion order
            return hash(
                frozenset(
                    (element_hash(key, mode), element_hash(item, mode))
                    for key, item in value.items()
                )
            )
        return hash_values(unwrap(value, shape), mode)
    if shape is Shape.SET:
        # Set iteration order is not stable between equal sets, so no ordered fold
        return hash(frozenset(value))
    if isinstance(value, (bytearray, memoryview)):
        return hash(bytes(value))
    return hash(value)
