import os
import sys
import tempfile
from pathlib import Path

# Keep the app's data directory and database out of the user's home
os.environ.setdefault("DEMOCRUD_DATA_DIR", tempfile.mkdtemp(prefix="democrud-tests-"))
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db, set_sqlite_pragma
from domain.value_objects import GoodType, UserRole
from models import Good, User
from repositories import GoodRepository, PaymentRepository, UserRepository


@pytest.fixture
def engine():
    """In-memory database shared by every connection of a test"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", set_sqlite_pragma)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def user_repo(db_session):
    return UserRepository(db_session)


@pytest.fixture
def good_repo(db_session):
    return GoodRepository(db_session)


@pytest.fixture
def payment_repo(db_session):
    return PaymentRepository(db_session)


@pytest.fixture
def make_user(user_repo):
    """Persist a user; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "name": "Test User",
            "login": f"testuser{n}",
            "password": "testpassword123",
            "email": f"testuser{n}@example.com",
            "role": UserRole.USER,
        }
        fields.update(overrides)
        return user_repo.save(User(**fields))

    return _make_user


@pytest.fixture
def make_good(good_repo):
    """Persist a good; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make_good(**overrides):
        counter["n"] += 1
        fields = {
            "name": f"Test Good {counter['n']}",
            "type": GoodType.OTHER,
            "description": f"Test Description {counter['n']}",
            "price": Decimal("1000.00"),
            "stock_quantity": 1,
        }
        fields.update(overrides)
        return good_repo.save(Good(**fields))

    return _make_good


@pytest.fixture
def client(engine):
    """TestClient whose requests use the in-memory test database"""
    from fastapi.testclient import TestClient
    from main import app

    SessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
