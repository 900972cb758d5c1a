"""Structural comparator: equality, hashing and stringification."""

from equatable.core.base import BaseEquatable
from equatable.core.comparator import elements_equal, values_equal
from equatable.core.hashing import (
    HASH_MASK,
    HASH_MULTIPLIER,
    HASH_SEED,
    element_hash,
    hash_values,
)
from equatable.core.protocol import Equatable, effective_mode
from equatable.core.shape import classify, significant_values_of, unwrap
from equatable.core.stringify import SEPARATOR, stringify_values

__all__ = [
    # Contract
    "Equatable",
    "BaseEquatable",
    "effective_mode",
    # Equality
    "values_equal",
    "elements_equal",
    # Hashing
    "hash_values",
    "element_hash",
    "HASH_SEED",
    "HASH_MULTIPLIER",
    "HASH_MASK",
    # Stringification
    "stringify_values",
    "SEPARATOR",
    # Introspection
    "classify",
    "unwrap",
    "significant_values_of",
]
