"""Create the countries table and list what the database holds.

Usage: country-currency-setup-db
"""
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
import logging
import sys

from . import models
from .config import Settings, configure_logging
from .database import create_db_engine

logger = logging.getLogger(__name__)


def setup_database(settings: Settings) -> list:
    engine = create_db_engine(settings)
    try:
        models.Base.metadata.create_all(bind=engine)
        return inspect(engine).get_table_names()
    finally:
        engine.dispose()


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    try:
        tables = setup_database(settings)
    except SQLAlchemyError:
        logger.exception("Database setup failed")
        sys.exit(1)
    logger.info("Database setup completed, tables: %s", ", ".join(tables))


if __name__ == "__main__":
    main()
