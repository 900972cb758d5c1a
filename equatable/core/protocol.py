"""The contract a value object fulfils to take part in structural comparison."""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from equatable.config import get_settings
from equatable.domain.types import ComparisonMode


@runtime_checkable
class Equatable(Protocol):
    """Value object protocol.

    Implementations supply their ordered significant values and a tri-state
    flag deciding whether the textual form is derived from those values.
    """

    def significant_values(self) -> Sequence[Any] | None:
        ...

    def stringify_enabled(self) -> bool | None:
        ...


def effective_mode(value: Equatable) -> ComparisonMode:
    """Comparison mode a value object is compared and hashed under.

    A class may pin ``comparison_mode``; otherwise the configured default
    applies.
    """
    pinned = getattr(type(value), "comparison_mode", None)
    if pinned is not None:
        return ComparisonMode(pinned)
    return get_settings().comparison.mode
