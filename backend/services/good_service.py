"""
Good Service

Business logic for goods: create, read, update and archive.
"""

from datetime import datetime
from typing import List, Optional
import logging

from constants import EntityNames
from dtos.request import GoodRequestDto
from dtos.response import GoodResponseDto
from exceptions import NotFoundError
from mappers import GoodMapper
from models import Good
from repositories import GoodRepository
from services.interfaces import IGoodService

logger = logging.getLogger(__name__)


class GoodService(IGoodService):
    """Service for good-related business logic."""

    def __init__(self, good_repo: GoodRepository, good_mapper: Optional[GoodMapper] = None):
        """
        Initialize GoodService.

        Args:
            good_repo: Good repository
            good_mapper: Good mapper (a default instance is created if omitted)
        """
        self.good_repo = good_repo
        self.good_mapper = good_mapper or GoodMapper()

    def create_good(self, request: GoodRequestDto) -> GoodResponseDto:
        logger.info(f"Creating good: {request.name!r} ({request.type})")

        good = self.good_mapper.to_good(request)
        self.good_repo.save(good)

        logger.info(f"Good created with id={good.id}")
        return self.good_mapper.to_good_response_dto(good)

    def get_good_by_id(self, good_id: int) -> GoodResponseDto:
        logger.info(f"Getting good id={good_id}")

        good = self._find_good_or_not_found(good_id)
        logger.debug(f"Good found: {good!r}")

        return self.good_mapper.to_good_response_dto(good)

    def update_good_by_id(self, good_id: int, request: GoodRequestDto) -> GoodResponseDto:
        logger.info(f"Updating good id={good_id}")

        good = self._find_good_or_not_found(good_id)
        self.good_mapper.update_good_from_dto(request, good)
        self.good_repo.save(good)

        logger.info(f"Good id={good_id} updated")
        return self.good_mapper.to_good_response_dto(good)

    def archive_good_by_id(self, good_id: int) -> GoodResponseDto:
        logger.info(f"Archiving good id={good_id}")

        good = self._find_good_or_not_found(good_id)
        if good.archive_date is None:
            good.archive_date = datetime.utcnow()
            self.good_repo.save(good)
            logger.info(f"Good id={good_id} archived at {good.archive_date}")
        else:
            logger.info(f"Good id={good_id} already archived at {good.archive_date}")

        return self.good_mapper.to_good_response_dto(good)

    def get_archived_goods(self) -> List[GoodResponseDto]:
        goods = self.good_repo.find_all_archived()
        logger.debug(f"Found {len(goods)} archived good(s)")
        return [self.good_mapper.to_good_response_dto(good) for good in goods]

    def _find_good_or_not_found(self, good_id: int) -> Good:
        logger.debug(f"Looking up good id={good_id}")

        good = self.good_repo.get_by_id(good_id)
        if good is None:
            logger.error(f"Good id={good_id} not found")
            raise NotFoundError(EntityNames.GOOD, good_id)
        return good
