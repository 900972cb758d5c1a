"""Product value object.

Stock quantity changes constantly and says nothing about which product
this is, so it is left out of the significant values.
"""

from decimal import Decimal

from pydantic import Field

from equatable.example.common import EquatableModel


class Product(EquatableModel):
    """Catalogue product."""

    name: str | None = None
    price: Decimal = Decimal("0")
    quantity: int = Field(default=0, ge=0)
    category: str | None = None
    description: str | None = None
    tags: list[str] | None = None

    def significant_values(self) -> list[object]:
        return [self.name, self.price, self.category, self.description, self.tags]

    def stringify_enabled(self) -> bool | None:
        return True
