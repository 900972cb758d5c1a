"""Textual representation derived from significant values."""

from collections.abc import Sequence
from typing import Any

SEPARATOR = ", "


def stringify_values(
    values: Sequence[Any] | None, *, enabled: bool | None, fallback: str
) -> str:
    """Render significant values, or the fallback when stringify is off.

    Only an explicit ``True`` derives the text from the values; ``False``
    and ``None`` (unspecified) both return ``fallback`` untouched.

    Args:
        values: Significant values, or None
        enabled: Tri-state stringify flag
        fallback: Text used when stringify is not enabled

    Returns:
        Rendered text
    """
    if enabled is not True:
        return fallback
    if values is None:
        return ""
    return SEPARATOR.join(str(value) for value in values)
