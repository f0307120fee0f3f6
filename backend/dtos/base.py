"""
Base DTO configuration.

All DTOs exchange camelCase JSON keys (``stockQuantity``, ``archiveDate``)
while keeping snake_case attribute names in Python. Snake_case keys are
accepted on input as well.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel

# Monetary amounts: Decimal in Python, a JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base class for request and response DTOs."""

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def require_not_blank(value: str) -> str:
    """Reject empty or whitespace-only strings."""
    if value is None or not value.strip():
        raise ValueError("must not be blank")
    return value
