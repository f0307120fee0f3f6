from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import DATABASE_URL, DATA_DIR, SQL_ECHO, is_sqlite

if is_sqlite():
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        DATABASE_URL,
        connect_args={'check_same_thread': False},
        echo=SQL_ECHO,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        echo=SQL_ECHO,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600
    )


def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enforce foreign keys on SQLite connections (off by default)."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


if is_sqlite():
    event.listen(engine, "connect", set_sqlite_pragma)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
