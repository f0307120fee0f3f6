from database import engine, Base
from sqlalchemy import inspect
import logging

import models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ('users', 'goods', 'payments', 'payment_goods')


def init_database(bind=None):
    """
    Create any missing tables.

    Existing tables are left untouched; there is no migration step.

    Args:
        bind: Engine or connection to use (defaults to the application engine)
    """
    bind = bind or engine
    existing = set(inspect(bind).get_table_names())
    missing = [table for table in REQUIRED_TABLES if table not in existing]

    Base.metadata.create_all(bind=bind)

    if missing:
        logger.info(f"✅ Created tables: {', '.join(missing)}")
    else:
        logger.info("Database schema up to date")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
