"""
Good Request DTOs

DTOs for good-related API requests.
"""

from decimal import Decimal

from pydantic import Field, field_validator

from domain.value_objects import GoodType
from dtos.base import CamelModel, require_not_blank


class GoodRequestDto(CamelModel):
    """
    Request DTO for creating or updating a good.

    Used by both POST /api/goods and PUT /api/goods/{id}; an update
    overwrites every field listed here.
    """

    name: str = Field(description="Good name")
    type: str = Field(description="Good type: ELECTRONICS, CLOTHING, BOOKS or OTHER")
    description: str = Field(description="Good description")
    price: Decimal = Field(
        gt=0,
        max_digits=12,
        decimal_places=2,
        description="Unit price, at most 10 integer and 2 fraction digits"
    )
    stock_quantity: int = Field(ge=0, le=99999, description="Units in stock")

    @field_validator("name", "description")
    @classmethod
    def validate_not_blank(cls, v):
        return require_not_blank(v)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        """Reject unknown good types instead of silently dropping them."""
        if GoodType.from_string(v) is None:
            raise ValueError(f"Unknown good type '{v}', expected one of {GoodType.values()}")
        return v

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Samsung",
                "type": "ELECTRONICS",
                "description": "Samsung description",
                "price": 1000.99,
                "stockQuantity": 1
            }
        }
