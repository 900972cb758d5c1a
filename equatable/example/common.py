"""Base model for the example value objects."""

from pydantic import BaseModel, ConfigDict

from equatable.core import BaseEquatable


class EquatableModel(BaseEquatable, BaseModel):
    """Pydantic model whose equality, hash and string form are structural.

    Models stay mutable: significant values are read from the current field
    state on every comparison.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # Allow nested value objects of any kind
        validate_assignment=True,
    )
