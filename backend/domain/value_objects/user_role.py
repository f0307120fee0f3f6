"""
UserRole Value Object

Role assigned to a user account.
"""

from enum import Enum
from typing import Optional


class UserRole(str, Enum):
    """Role of a user in the system."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["UserRole"]:
        """
        Create UserRole from its string value.

        Args:
            value: String representation (exact, case-sensitive)

        Returns:
            UserRole instance, or None if the value does not match any role
        """
        for role in cls:
            if role.value == value:
                return role
        return None

    @classmethod
    def values(cls) -> list[str]:
        return [role.value for role in cls]

    def __str__(self) -> str:
        return self.value
