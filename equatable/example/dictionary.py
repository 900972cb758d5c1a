"""Value object holding a single mapping."""

from typing import Any

from equatable.example.common import EquatableModel


class DictionaryHolder(EquatableModel):
    """Compared by the entries of its mapping."""

    entries: dict[Any, Any] | None = None

    def significant_values(self) -> list[object]:
        return [self.entries]

    def stringify_enabled(self) -> bool | None:
        return True
