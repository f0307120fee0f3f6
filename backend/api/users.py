"""
Users API endpoints
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from constants import HTTPStatus
from dependencies import get_user_service
from dtos.request import UserRequestDto
from dtos.response import UserResponseDto
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/users", response_model=UserResponseDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create user")
def create_user(request: UserRequestDto, service: IUserService = Depends(get_user_service)):
    """Create a user. The password is stored but never returned."""
    return service.create_user(request)


@router.get("/users/{user_id}", response_model=UserResponseDto)
@handle_api_errors("Get user")
def get_user_by_id(
    user_id: UUID,
    include_payments: bool = Query(False, alias="includePayments", description="Include the user's payments"),
    service: IUserService = Depends(get_user_service)
):
    """Get a user, optionally with payments."""
    return service.get_user_by_id(user_id, include_payments)


@router.put("/users/{user_id}", response_model=UserResponseDto)
@handle_api_errors("Update user")
def update_user_by_id(user_id: UUID, request: UserRequestDto, service: IUserService = Depends(get_user_service)):
    """Overwrite name, login, password, email and role of a user."""
    return service.update_user_by_id(user_id, request)


@router.delete("/users/archive/{user_id}", response_model=UserResponseDto)
@handle_api_errors("Archive user")
def archive_user_by_id(user_id: UUID, service: IUserService = Depends(get_user_service)):
    """Archive a user and detach its payments."""
    return service.archive_user_by_id(user_id)
