"""Enumerations shared by the comparator and its configuration."""

from enum import Enum


class ComparisonMode(str, Enum):
    """How two significant-value sequences are compared.

    DEEP descends into nested groupings and value objects.
    FLAT relies solely on each element's natural equality.
    """

    DEEP = "deep"
    FLAT = "flat"


class Shape(str, Enum):
    """Classification of a single significant value."""

    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    VALUE_OBJECT = "value_object"

    @property
    def is_ordered_grouping(self) -> bool:
        """Whether values of this shape unwrap into an ordered element sequence."""
        return self in (Shape.SEQUENCE, Shape.MAPPING)
