"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .good_repository import GoodRepository
from .payment_repository import PaymentRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "GoodRepository",
    "PaymentRepository",
    "UserRepository",
]
