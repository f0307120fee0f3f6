"""
Tests for repository queries and save semantics.
"""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from exceptions import ConflictError
from models import Payment


class TestBaseRepository:

    def test_save_assigns_id_and_timestamps(self, make_good):
        good = make_good(name="Samsung")

        assert good.id is not None
        assert good.created_at is not None
        assert good.updated_at is not None
        assert good.archive_date is None

    def test_save_updates_existing_row(self, make_good, good_repo):
        good = make_good()
        good.stock_quantity = 42
        good_repo.save(good)

        assert good_repo.get_by_id(good.id).stock_quantity == 42
        assert good_repo.count() == 1

    def test_get_by_id_returns_none_on_miss(self, good_repo, payment_repo, user_repo):
        assert good_repo.get_by_id(9999) is None
        assert payment_repo.get_by_id(9999) is None
        assert user_repo.get_by_id(uuid4()) is None

    def test_get_all_and_count(self, make_good, good_repo):
        assert good_repo.get_all() == []
        assert good_repo.count() == 0

        goods = [make_good(), make_good(), make_good()]

        assert set(good_repo.get_all()) == set(goods)
        assert good_repo.count() == 3

    def test_find_all_archived(self, make_good, good_repo):
        make_good()
        archived = make_good()
        archived.archive_date = datetime.utcnow()
        good_repo.save(archived)

        assert good_repo.find_all_archived() == [archived]

    def test_exists(self, make_good, good_repo):
        good = make_good()
        assert good_repo.exists(good.id)
        assert not good_repo.exists(good.id + 1)


class TestUserRepository:

    def test_get_by_uuid_or_string(self, make_user, user_repo):
        from uuid import UUID
        user = make_user()

        assert user_repo.get_by_id(UUID(user.id)) is user
        assert user_repo.get_by_id(user.id) is user
        assert user_repo.exists(UUID(user.id))

    def test_get_by_login_and_email(self, make_user, user_repo):
        user = make_user(login="alice", email="alice@example.com")

        assert user_repo.get_by_login("alice") is user
        assert user_repo.get_by_email("alice@example.com") is user
        assert user_repo.get_by_login("bob") is None

    def test_duplicate_login_raises_conflict(self, make_user, user_repo):
        make_user(login="alice")

        with pytest.raises(ConflictError):
            make_user(login="alice")

        # The session is still usable after the rollback
        assert user_repo.get_by_login("alice") is not None


class TestGoodRepository:

    def test_get_by_name(self, make_good, good_repo):
        good = make_good(name="Samsung")

        assert good_repo.get_by_name("Samsung") is good
        assert good_repo.get_by_name("Apple") is None

    def test_get_by_ids_skips_unknown(self, make_good, good_repo):
        first, second = make_good(), make_good()

        assert good_repo.get_by_ids([second.id, first.id, 9999]) == [first, second]
        assert good_repo.get_by_ids([]) == []


class TestPaymentRepository:

    def test_get_by_user_id(self, make_user, make_good, payment_repo):
        owner, other = make_user(), make_user()
        good = make_good()

        payment = Payment(total_purchase_amount=Decimal("300"))
        owner.add_payment(payment)
        payment.add_good(good)
        payment_repo.save(payment)

        found = payment_repo.get_by_user_id(owner.id)
        assert found == [payment]
        assert found[0].goods == {good}
        assert found[0].date_of_purchase is not None
        assert payment_repo.get_by_user_id(other.id) == []
