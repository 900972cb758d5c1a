"""Structural equality, hashing and string forms for value objects."""

from equatable.core import (
    BaseEquatable,
    Equatable,
    hash_values,
    stringify_values,
    values_equal,
)
from equatable.domain.types import ComparisonMode, Shape

__all__ = [
    "BaseEquatable",
    "Equatable",
    "ComparisonMode",
    "Shape",
    "values_equal",
    "hash_values",
    "stringify_values",
]
