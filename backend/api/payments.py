"""
Payments API endpoints
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from constants import HTTPStatus
from dependencies import get_payment_service
from dtos.request import PaymentRequestDto
from dtos.response import PaymentResponseDto
from services.interfaces import IPaymentService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/payments", response_model=PaymentResponseDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create payment")
def create_payment(request: PaymentRequestDto, service: IPaymentService = Depends(get_payment_service)):
    """
    Create a payment for an existing user.

    Returns 404 if the user or one of the referenced goods does not exist.
    """
    return service.create_payment(request)


@router.get("/payments/user/{user_id}", response_model=List[PaymentResponseDto])
@handle_api_errors("List user payments")
def get_payments_by_user_id(user_id: UUID, service: IPaymentService = Depends(get_payment_service)):
    """List the payments currently owned by a user."""
    return service.get_payments_by_user_id(user_id)


@router.get("/payments/{payment_id}", response_model=PaymentResponseDto)
@handle_api_errors("Get payment")
def get_payment_by_id(payment_id: int, service: IPaymentService = Depends(get_payment_service)):
    """Get a payment with its goods."""
    return service.get_payment_by_id(payment_id)


@router.put("/payments/{payment_id}", response_model=PaymentResponseDto)
@handle_api_errors("Update payment")
def update_payment_by_id(
    payment_id: int,
    request: PaymentRequestDto,
    service: IPaymentService = Depends(get_payment_service)
):
    """Overwrite the amount and goods of a payment. userId is ignored."""
    return service.update_payment_by_id(payment_id, request)


@router.delete("/payments/archive/{payment_id}", response_model=PaymentResponseDto)
@handle_api_errors("Archive payment")
def archive_payment_by_id(payment_id: int, service: IPaymentService = Depends(get_payment_service)):
    """Archive a payment and unlink its goods."""
    return service.archive_payment_by_id(payment_id)
