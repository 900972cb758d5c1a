"""Example value objects built on EquatableModel."""

from equatable.example.common import EquatableModel
from equatable.example.dictionary import DictionaryHolder
from equatable.example.person import Person
from equatable.example.product import Product

__all__ = [
    "EquatableModel",
    "Person",
    "Product",
    "DictionaryHolder",
]
