"""Person value object."""

from equatable.example.common import EquatableModel


class Person(EquatableModel):
    """A person identified by name and age."""

    name: str | None = None
    age: int = 0

    def significant_values(self) -> list[object]:
        return [self.name, self.age]

    def stringify_enabled(self) -> bool | None:
        return True
