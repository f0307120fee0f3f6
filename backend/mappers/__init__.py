"""
Mapping layer between SQLAlchemy models and DTOs.

Mappers copy business fields only. Server-managed fields (ids, timestamps,
date of purchase) and relationship collections are never written from a
request DTO; the services maintain associations through the model helpers.
"""

from .good_mapper import GoodMapper
from .payment_mapper import PaymentMapper
from .user_mapper import UserMapper

__all__ = [
    "GoodMapper",
    "PaymentMapper",
    "UserMapper",
]
