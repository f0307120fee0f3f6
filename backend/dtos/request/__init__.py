"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

Benefits:
- Validation at API boundary
- Independent of database schema
- Clear API documentation
- Type safety
"""

from .good_request import GoodRequestDto
from .payment_request import PaymentRequestDto
from .user_request import UserRequestDto

__all__ = [
    "GoodRequestDto",
    "PaymentRequestDto",
    "UserRequestDto",
]
