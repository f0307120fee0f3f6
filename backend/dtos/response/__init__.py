"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.

Benefits:
- Hide internal database structure (passwords, timestamps, join tables)
- Control exactly what data is exposed
- Version API responses independently
"""

from .good_response import GoodResponseDto
from .payment_response import PaymentResponseDto
from .user_response import UserResponseDto

__all__ = [
    "GoodResponseDto",
    "PaymentResponseDto",
    "UserResponseDto",
]
