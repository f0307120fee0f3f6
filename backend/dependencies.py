"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns: tests override get_db and every service
below picks up the test session.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from mappers import GoodMapper, PaymentMapper, UserMapper
from repositories import GoodRepository, PaymentRepository, UserRepository
from services.interfaces import IGoodService, IPaymentService, IUserService
from services.good_service import GoodService
from services.payment_service import PaymentService
from services.user_service import UserService

# Mappers are stateless and shared by all requests
_good_mapper = GoodMapper()
_payment_mapper = PaymentMapper(_good_mapper)
_user_mapper = UserMapper(_payment_mapper)


def get_good_repository(db: Session = Depends(get_db)) -> GoodRepository:
    """
    Factory function for creating GoodRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        GoodRepository instance
    """
    return GoodRepository(db)


def get_payment_repository(db: Session = Depends(get_db)) -> PaymentRepository:
    """
    Factory function for creating PaymentRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        PaymentRepository instance
    """
    return PaymentRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session (injected)

    Returns:
        UserRepository instance
    """
    return UserRepository(db)


def get_good_service(good_repo: GoodRepository = Depends(get_good_repository)) -> IGoodService:
    """
    Factory function for creating GoodService instances.

    Returns:
        IGoodService: Good service implementation
    """
    return GoodService(good_repo, _good_mapper)


def get_payment_service(
    payment_repo: PaymentRepository = Depends(get_payment_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    good_repo: GoodRepository = Depends(get_good_repository)
) -> IPaymentService:
    """
    Factory function for creating PaymentService instances.

    All three repositories share the request's database session, since
    FastAPI caches get_db within a request.

    Returns:
        IPaymentService: Payment service implementation
    """
    return PaymentService(payment_repo, user_repo, good_repo, _payment_mapper)


def get_user_service(user_repo: UserRepository = Depends(get_user_repository)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Returns:
        IUserService: User service implementation
    """
    return UserService(user_repo, _user_mapper)
