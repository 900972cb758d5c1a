"""Console demo of the example value objects."""

from decimal import Decimal

from equatable.example.dictionary import DictionaryHolder
from equatable.example.person import Person
from equatable.example.product import Product
from equatable.util.logging import get_logger

logger = get_logger(__name__)


def run_demo() -> list[str]:
    """Run the comparisons and return one output line per result.

    Returns:
        Lines in the order they should be printed
    """
    lines: list[str] = []

    person = Person(name="John", age=30)
    person2 = Person(name="John", age=30)
    person3 = Person(name="Jane", age=25)

    lines.append(str(person == person2))  # True
    lines.append(str(person == person3))  # False
    lines.append(str(person))  # John, 30

    # Quantity is not significant
    product = Product(
        name="Pipette",
        price=Decimal("12.50"),
        quantity=4,
        category="lab",
        tags=["glass", "10ml"],
    )
    restocked = product.model_copy(update={"quantity": 40}, deep=True)
    lines.append(str(product == restocked))  # True
    lines.append(str(hash(product) == hash(restocked)))  # True

    holder = DictionaryHolder(entries={"Key1": "Value1", "Key2": "Value2"})
    same = DictionaryHolder(entries={"Key1": "Value1", "Key2": "Value2"})
    changed = DictionaryHolder(entries={"Key1": "Value1", "Key2": "Value3"})
    lines.append(str(holder == same))  # True
    lines.append(str(holder == changed))  # False

    logger.debug(f"Demo produced {len(lines)} lines")
    return lines
