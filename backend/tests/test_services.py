"""
Tests for the service layer: lookups, association bookkeeping and archiving.
"""

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from dtos.request import GoodRequestDto, PaymentRequestDto, UserRequestDto
from exceptions import NotFoundError, ValidationError
from mappers import GoodMapper
from services.good_service import GoodService
from services.payment_service import PaymentService
from services.user_service import UserService


@pytest.fixture
def good_service(good_repo):
    return GoodService(good_repo)


@pytest.fixture
def payment_service(payment_repo, user_repo, good_repo):
    return PaymentService(payment_repo, user_repo, good_repo)


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


def _good_request(**fields):
    defaults = dict(name="Samsung", type="ELECTRONICS", description="Samsung description",
                    price=Decimal("1000.99"), stock_quantity=1)
    defaults.update(fields)
    return GoodRequestDto(**defaults)


def _payment_request(user_id, goods, amount="500"):
    mapper = GoodMapper()
    return PaymentRequestDto(
        user_id=user_id,
        total_purchase_amount=Decimal(amount),
        goods=[mapper.to_good_response_dto(good) for good in goods],
    )


class TestGoodService:

    def test_create_echoes_fields(self, good_service):
        request = _good_request()

        response = good_service.create_good(request)

        assert response.id is not None
        assert response.archive_date is None
        assert response.name == request.name
        assert response.type == request.type
        assert response.description == request.description
        assert response.price == request.price
        assert response.stock_quantity == request.stock_quantity

    def test_get_unknown_good_raises_not_found(self, good_service):
        with pytest.raises(NotFoundError) as exc_info:
            good_service.get_good_by_id(9999)
        assert "9999" in exc_info.value.message

    def test_update_overwrites_fields(self, good_service):
        created = good_service.create_good(_good_request())

        updated = good_service.update_good_by_id(created.id, _good_request(name="Galaxy", stock_quantity=0))

        assert updated.id == created.id
        assert updated.name == "Galaxy"
        assert updated.stock_quantity == 0

    def test_update_unknown_good_raises_not_found(self, good_service):
        with pytest.raises(NotFoundError):
            good_service.update_good_by_id(9999, _good_request())

    def test_archive_is_monotonic(self, good_service):
        created = good_service.create_good(_good_request())

        archived = good_service.archive_good_by_id(created.id)
        assert archived.archive_date is not None

        assert good_service.get_good_by_id(created.id).archive_date == archived.archive_date
        assert good_service.archive_good_by_id(created.id).archive_date == archived.archive_date

    def test_archived_good_can_still_be_updated(self, good_service):
        created = good_service.create_good(_good_request())
        archived = good_service.archive_good_by_id(created.id)

        updated = good_service.update_good_by_id(created.id, _good_request(name="Still here"))

        assert updated.name == "Still here"
        assert updated.archive_date == archived.archive_date

    def test_get_archived_goods(self, good_service):
        active = good_service.create_good(_good_request(name="Active"))
        archived = good_service.create_good(_good_request(name="Archived"))
        good_service.archive_good_by_id(archived.id)

        ids = [good.id for good in good_service.get_archived_goods()]

        assert ids == [archived.id]
        assert active.id not in ids


class TestPaymentService:

    def test_create_links_user_and_goods(self, payment_service, make_user, make_good, payment_repo):
        user = make_user()
        g1, g2 = make_good(), make_good()

        response = payment_service.create_payment(_payment_request(user.id, [g1, g2]))

        assert response.id is not None
        assert response.user_id == UUID(user.id)
        assert sorted(good.id for good in response.goods) == sorted([g1.id, g2.id])

        payment = payment_repo.get_by_id(response.id)
        assert payment.goods == {g1, g2}
        assert payment in g1.payments
        assert payment in g2.payments
        assert payment in user.payments

    def test_create_with_unknown_user_raises_not_found(self, payment_service, make_good, payment_repo):
        with pytest.raises(NotFoundError) as exc_info:
            payment_service.create_payment(_payment_request(uuid4(), [make_good()]))

        assert exc_info.value.details["entity"] == "User"
        assert payment_repo.count() == 0

    def test_create_with_unknown_good_raises_not_found(self, payment_service, make_user, make_good, payment_repo):
        missing = make_good()
        missing_dto = GoodMapper().to_good_response_dto(missing).model_copy(update={"id": 9999})
        request = PaymentRequestDto(user_id=make_user().id, total_purchase_amount=Decimal("1"), goods=[missing_dto])

        with pytest.raises(NotFoundError) as exc_info:
            payment_service.create_payment(request)

        assert exc_info.value.details == {"entity": "Good", "id": "9999"}
        assert payment_repo.count() == 0

    def test_good_without_id_raises_validation_error(self, payment_service, make_user, make_good, payment_repo):
        good_dto = GoodMapper().to_good_response_dto(make_good()).model_copy(update={"id": None})
        request = PaymentRequestDto(user_id=make_user().id, total_purchase_amount=Decimal("1"), goods=[good_dto])

        with pytest.raises(ValidationError) as exc_info:
            payment_service.create_payment(request)

        assert exc_info.value.details == {"invalid_fields": {"goods": "id is required"}}
        assert payment_repo.count() == 0

    def test_update_with_good_without_id_raises_validation_error(self, payment_service, make_user, make_good):
        good = make_good()
        created = payment_service.create_payment(_payment_request(make_user().id, [good]))
        good_dto = GoodMapper().to_good_response_dto(good).model_copy(update={"id": None})
        request = PaymentRequestDto(user_id=uuid4(), total_purchase_amount=Decimal("1"), goods=[good_dto])

        with pytest.raises(ValidationError):
            payment_service.update_payment_by_id(created.id, request)

        assert [g.id for g in payment_service.get_payment_by_id(created.id).goods] == [good.id]

    def test_get_unknown_payment_raises_not_found(self, payment_service):
        with pytest.raises(NotFoundError):
            payment_service.get_payment_by_id(9999)

    def test_update_replaces_goods_and_keeps_owner(self, payment_service, make_user, make_good, payment_repo):
        owner, other = make_user(), make_user()
        g1, g2, g3 = make_good(), make_good(), make_good()
        created = payment_service.create_payment(_payment_request(owner.id, [g1, g2]))

        updated = payment_service.update_payment_by_id(
            created.id, _payment_request(other.id, [g2, g3], amount="750.50")
        )

        assert updated.user_id == UUID(owner.id)
        assert updated.total_purchase_amount == Decimal("750.50")
        assert [good.id for good in updated.goods] == sorted([g2.id, g3.id])

        payment = payment_repo.get_by_id(created.id)
        assert payment not in g1.payments
        assert payment in g2.payments
        assert payment in g3.payments

    def test_archive_unlinks_every_good(self, payment_service, make_user, make_good, payment_repo):
        g1, g2 = make_good(), make_good()
        created = payment_service.create_payment(_payment_request(make_user().id, [g1, g2]))

        archived = payment_service.archive_payment_by_id(created.id)

        assert archived.archive_date is not None
        assert archived.goods == []
        payment = payment_repo.get_by_id(created.id)
        assert payment.goods == set()
        assert payment not in g1.payments
        assert payment not in g2.payments

    def test_archive_twice_keeps_first_date(self, payment_service, make_user, make_good):
        created = payment_service.create_payment(_payment_request(make_user().id, [make_good()]))

        first = payment_service.archive_payment_by_id(created.id)
        second = payment_service.archive_payment_by_id(created.id)

        assert first.archive_date is not None
        assert second.archive_date == first.archive_date
        assert payment_service.get_payment_by_id(created.id).archive_date == first.archive_date

    def test_get_payments_by_user_id(self, payment_service, make_user, make_good):
        user = make_user()
        first = payment_service.create_payment(_payment_request(user.id, [make_good()]))
        second = payment_service.create_payment(_payment_request(user.id, []))

        payments = payment_service.get_payments_by_user_id(UUID(user.id))

        assert [p.id for p in payments] == [first.id, second.id]

    def test_get_payments_of_unknown_user_raises_not_found(self, payment_service):
        with pytest.raises(NotFoundError):
            payment_service.get_payments_by_user_id(uuid4())


class TestUserService:

    def _request(self, **fields):
        defaults = dict(name="Test User", login="testuser", password="testpassword123",
                        email="testuser@example.com", role="USER")
        defaults.update(fields)
        return UserRequestDto(**defaults)

    def test_create_stores_password_but_hides_it(self, user_service, user_repo):
        response = user_service.create_user(self._request())

        assert response.id is not None
        assert response.role == "USER"
        assert not hasattr(response, "password")
        assert user_repo.get_by_id(response.id).password == "testpassword123"

    def test_get_unknown_user_raises_not_found(self, user_service):
        with pytest.raises(NotFoundError):
            user_service.get_user_by_id(uuid4())

    def test_include_payments(self, user_service, payment_service, make_good):
        user = user_service.create_user(self._request())
        payment = payment_service.create_payment(_payment_request(user.id, [make_good()]))

        assert user_service.get_user_by_id(user.id).payments == []
        with_payments = user_service.get_user_by_id(user.id, include_payments=True)
        assert [p.id for p in with_payments.payments] == [payment.id]

    def test_update_overwrites_business_fields(self, user_service, user_repo):
        user = user_service.create_user(self._request())

        updated = user_service.update_user_by_id(
            user.id, self._request(name="Admin", login="admin", password="new-password", role="ADMIN")
        )

        assert updated.id == user.id
        assert updated.login == "admin"
        assert updated.role == "ADMIN"
        assert user_repo.get_by_id(user.id).password == "new-password"

    def test_archive_detaches_payments(self, user_service, payment_service, payment_repo, make_good):
        user = user_service.create_user(self._request())
        created = payment_service.create_payment(_payment_request(user.id, [make_good()]))

        archived = user_service.archive_user_by_id(user.id)

        assert archived.archive_date is not None
        assert archived.payments == []
        assert user_service.get_user_by_id(user.id, include_payments=True).payments == []

        payment = payment_repo.get_by_id(created.id)
        assert payment.user is None
        assert payment.archive_date is None
        assert payment_service.get_payment_by_id(created.id).user_id is None

    def test_archive_twice_keeps_first_date(self, user_service):
        user = user_service.create_user(self._request())

        first = user_service.archive_user_by_id(user.id)
        second = user_service.archive_user_by_id(user.id)

        assert first.archive_date is not None
        assert second.archive_date == first.archive_date
        assert user_service.get_user_by_id(user.id).archive_date == first.archive_date
