"""
User Request DTOs

DTOs for user-related API requests.
"""

from pydantic import EmailStr, Field, field_validator

from domain.value_objects import UserRole
from dtos.base import CamelModel, require_not_blank


class UserRequestDto(CamelModel):
    """
    Request DTO for creating or updating a user.

    The password is write-only: it is stored but never returned.
    """

    name: str = Field(description="Display name")
    login: str = Field(max_length=50, description="Unique login, at most 50 characters")
    password: str = Field(min_length=5, description="Password, at least 5 characters")
    email: EmailStr = Field(description="Unique email address")
    role: str = Field(description="Role: USER or ADMIN")

    @field_validator("name", "login")
    @classmethod
    def validate_not_blank(cls, v):
        return require_not_blank(v)

    @field_validator("role")
    @classmethod
    def validate_role(cls, v):
        """Reject unknown roles instead of silently dropping them."""
        if UserRole.from_string(v) is None:
            raise ValueError(f"Unknown role '{v}', expected one of {UserRole.values()}")
        return v

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Test User",
                "login": "testuser",
                "password": "testpassword123",
                "email": "testuser@example.com",
                "role": "USER"
            }
        }
