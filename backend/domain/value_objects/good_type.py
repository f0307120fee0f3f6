"""
GoodType Value Object

Catalogue category of a good.
"""

from enum import Enum
from typing import Optional


class GoodType(str, Enum):
    """Category of a good."""

    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    BOOKS = "BOOKS"
    OTHER = "OTHER"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["GoodType"]:
        """
        Create GoodType from its string value.

        Returns:
            GoodType instance, or None if the value is not a known type
        """
        for good_type in cls:
            if good_type.value == value:
                return good_type
        return None

    @classmethod
    def values(cls) -> list[str]:
        return [good_type.value for good_type in cls]

    def __str__(self) -> str:
        return self.value
