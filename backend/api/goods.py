"""
Goods API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends

from constants import HTTPStatus
from dependencies import get_good_service
from dtos.request import GoodRequestDto
from dtos.response import GoodResponseDto
from services.interfaces import IGoodService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/goods", response_model=GoodResponseDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create good")
def create_good(request: GoodRequestDto, service: IGoodService = Depends(get_good_service)):
    """Create a good."""
    return service.create_good(request)


@router.get("/goods/archived", response_model=List[GoodResponseDto])
@handle_api_errors("List archived goods")
def get_archived_goods(service: IGoodService = Depends(get_good_service)):
    """List all archived goods."""
    return service.get_archived_goods()


@router.get("/goods/{good_id}", response_model=GoodResponseDto)
@handle_api_errors("Get good")
def get_good_by_id(good_id: int, service: IGoodService = Depends(get_good_service)):
    """Get a good by id."""
    return service.get_good_by_id(good_id)


@router.put("/goods/{good_id}", response_model=GoodResponseDto)
@handle_api_errors("Update good")
def update_good_by_id(good_id: int, request: GoodRequestDto, service: IGoodService = Depends(get_good_service)):
    """Overwrite all business fields of a good."""
    return service.update_good_by_id(good_id, request)


@router.delete("/goods/archive/{good_id}", response_model=GoodResponseDto)
@handle_api_errors("Archive good")
def archive_good_by_id(good_id: int, service: IGoodService = Depends(get_good_service)):
    """Archive (soft-delete) a good. Returns the good with its archive date."""
    return service.archive_good_by_id(good_id)
