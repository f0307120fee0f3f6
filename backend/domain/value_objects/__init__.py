"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- UserRole: Role of a user account (USER, ADMIN)
- GoodType: Catalogue category of a good
"""

from .good_type import GoodType
from .user_role import UserRole

__all__ = [
    "GoodType",
    "UserRole",
]
