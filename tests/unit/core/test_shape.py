"""Unit tests for significant value classification and unwrapping."""

from collections import OrderedDict, deque

import pytest
from pydantic import BaseModel

from equatable.core import classify, significant_values_of, unwrap
from equatable.domain.error import DomainError, InvalidSignificantValuesError
from equatable.domain.types import Shape
from equatable.example import Person
from tests.model import PlainRecord, Record


class Point(BaseModel):
    x: int
    y: int


class TestClassify:
    """Tests for classify()."""

    def test_none_is_null(self):
        assert classify(None) is Shape.NULL

    @pytest.mark.parametrize(
        "value", ["text", "", b"raw", bytearray(b"raw"), memoryview(b"raw")]
    )
    def test_text_and_bytes_are_scalars(self, value):
        """Strings iterate but must never be treated as groupings."""
        assert classify(value) is Shape.SCALAR

    @pytest.mark.parametrize("value", [0, 3.5, True, 2j, object()])
    def test_plain_values_are_scalars(self, value):
        assert classify(value) is Shape.SCALAR

    def test_value_object_class_is_scalar(self):
        assert classify(Person) is Shape.SCALAR

    def test_pydantic_model_without_protocol_is_scalar(self):
        """Models iterate over their fields but are not collections."""
        assert classify(Point(x=1, y=2)) is Shape.SCALAR

    @pytest.mark.parametrize("value", [[1], (1,), deque([1]), range(3), []])
    def test_sequences(self, value):
        assert classify(value) is Shape.SEQUENCE

    @pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict(a=1)])
    def test_mappings(self, value):
        assert classify(value) is Shape.MAPPING

    @pytest.mark.parametrize("value", [set(), {1, 2}, frozenset({1})])
    def test_sets(self, value):
        assert classify(value) is Shape.SET

    def test_value_objects(self):
        assert classify(Person(name="John", age=30)) is Shape.VALUE_OBJECT
        assert classify(Record([1])) is Shape.VALUE_OBJECT
        assert classify(PlainRecord([1])) is Shape.VALUE_OBJECT

    def test_ordered_groupings(self):
        assert Shape.SEQUENCE.is_ordered_grouping
        assert Shape.MAPPING.is_ordered_grouping
        assert not Shape.SET.is_ordered_grouping
        assert not Shape.SCALAR.is_ordered_grouping
        assert not Shape.VALUE_OBJECT.is_ordered_grouping


class TestUnwrap:
    """Tests for unwrap()."""

    def test_list_is_returned_as_is(self):
        values = [1, 2, 3]
        assert unwrap(values, Shape.SEQUENCE) is values

    def test_registered_sequence_is_returned_as_is(self):
        values = deque([1, 2])
        assert unwrap(values, Shape.SEQUENCE) is values

    def test_non_indexable_collection_becomes_tuple(self):
        values = {"a": 1, "b": 2}.values()

        assert classify(values) is Shape.SEQUENCE
        assert unwrap(values, Shape.SEQUENCE) == (1, 2)

    def test_mapping_unwraps_to_items_in_iteration_order(self):
        mapping = {"b": 2, "a": 1}
        assert unwrap(mapping, Shape.MAPPING) == (("b", 2), ("a", 1))

    def test_value_object_unwraps_to_significant_values(self):
        assert unwrap(Person(name="Jane", age=25), Shape.VALUE_OBJECT) == ["Jane", 25]

    @pytest.mark.parametrize("shape", [Shape.SCALAR, Shape.SET, Shape.NULL])
    def test_shapes_without_elements_raise(self, shape):
        with pytest.raises(ValueError):
            unwrap(1, shape)


class TestSignificantValuesOf:
    """Tests for significant_values_of()."""

    def test_returns_declared_sequence(self):
        assert significant_values_of(Record((1, "a"))) == (1, "a")

    def test_missing_sequence_is_allowed(self):
        assert significant_values_of(Record(None)) is None

    @pytest.mark.parametrize("values", ["abc", {1, 2}, {"a": 1}, 42])
    def test_non_sequence_raises(self, values):
        with pytest.raises(InvalidSignificantValuesError) as exc_info:
            significant_values_of(Record(values))

        assert "Record.significant_values()" in str(exc_info.value)
        assert exc_info.value.received == type(values).__name__

    def test_error_is_domain_and_type_error(self):
        error = InvalidSignificantValuesError("Record", "str")
        assert isinstance(error, DomainError)
        assert isinstance(error, TypeError)
