"""
Good mapper.
"""

from typing import Iterable, List, Optional

from domain.value_objects import GoodType
from dtos.request.good_request import GoodRequestDto
from dtos.response.good_response import GoodResponseDto
from models import Good


def enum_value(member) -> Optional[str]:
    """String value of an enum member, or None."""
    return member.value if member is not None else None


class GoodMapper:
    """Maps between Good models and good DTOs."""

    def to_good_response_dto(self, good: Good) -> GoodResponseDto:
        return GoodResponseDto(
            id=good.id,
            name=good.name,
            type=enum_value(good.type),
            description=good.description,
            price=good.price,
            stock_quantity=good.stock_quantity,
            archive_date=good.archive_date,
        )

    def to_good_response_dtos(self, goods: Iterable[Good]) -> List[GoodResponseDto]:
        """
        Map a collection of goods.

        Input order is irrelevant; output is sorted by id so responses are stable.
        """
        dtos = [self.to_good_response_dto(good) for good in goods]
        return sorted(dtos, key=lambda dto: (dto.id is None, dto.id or 0))

    def to_good(self, request: GoodRequestDto) -> Good:
        """Build a transient Good from a request. id and timestamps stay unset."""
        good = Good()
        self.update_good_from_dto(request, good)
        return good

    def update_good_from_dto(self, request: GoodRequestDto, good: Good) -> None:
        """Overwrite the business fields of an existing Good."""
        good.name = request.name
        good.type = GoodType.from_string(request.type)
        good.description = request.description
        good.price = request.price
        good.stock_quantity = request.stock_quantity

    def to_good_from_response(self, dto: GoodResponseDto) -> Good:
        """
        Reverse mapping of a response DTO.

        Returns a detached Good carrying the DTO's id and archive date; it is
        never added to a session by the mapper.
        """
        return Good(
            id=dto.id,
            name=dto.name,
            type=GoodType.from_string(dto.type),
            description=dto.description,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
            archive_date=dto.archive_date,
        )
