from fastapi import FastAPI
import logging

from . import models
from .config import Settings, configure_logging
from .database import create_db_engine, make_session_factory
from .errors import register_error_handlers
from .routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API around its own engine and session factory.

    Run with ``uvicorn country_currency.main:create_app --factory``.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings)
    models.Base.metadata.create_all(bind=engine)

    app = FastAPI(title="Country Currency API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    register_error_handlers(app)
    app.include_router(router)

    logger.info("Country Currency API ready (refresh strategy: %s, limit: %d)",
                settings.refresh_strategy.value, settings.refresh_limit)
    return app
