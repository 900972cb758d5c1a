"""Abstract base for value objects with structural semantics."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from equatable.core.comparator import values_equal
from equatable.core.hashing import hash_values
from equatable.core.protocol import effective_mode
from equatable.core.shape import significant_values_of
from equatable.core.stringify import stringify_values
from equatable.domain.types import ComparisonMode


class BaseEquatable(ABC):
    """Base class deriving ``==``, ``hash()`` and ``str()`` from significant values.

    Subclasses list the values that define them in ``significant_values()``;
    anything left out (a password hash, a cache, a counter) takes no part in
    equality, hashing or the string form. The values are recomputed on every
    call, so mutating a field changes the result immediately. Mutating an
    instance while it sits in a set or dict key breaks that container, as
    with any hashable mutable object.

    Instances are only ever equal to instances of the same concrete class.
    """

    # None defers to the configured default (Settings.comparison.mode)
    comparison_mode: ClassVar[ComparisonMode | None] = None

    @abstractmethod
    def significant_values(self) -> Sequence[Any] | None:
        """Ordered values that define this object."""
        ...

    @abstractmethod
    def stringify_enabled(self) -> bool | None:
        """Whether ``str()`` renders the significant values (None: unspecified)."""
        ...

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if other.__class__ is not self.__class__:
            return NotImplemented
        return values_equal(
            significant_values_of(self),
            significant_values_of(other),
            effective_mode(self),
        )

    def __hash__(self) -> int:
        return hash_values(significant_values_of(self), effective_mode(self))

    def __str__(self) -> str:
        return stringify_values(
            significant_values_of(self),
            enabled=self.stringify_enabled(),
            fallback=object.__repr__(self),
        )
