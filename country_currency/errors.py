from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class CountryAPIError(Exception):
    status_code = 500
    error = "Internal server error"

    def __init__(self, details=None):
        super().__init__(details or self.error)
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class UpstreamUnavailable(CountryAPIError):
    status_code = 503
    error = "External data source unavailable"

    def __init__(self, provider: str):
        super().__init__(f"Could not fetch data from {provider} API")
        self.provider = provider


class NotFound(CountryAPIError):
    status_code = 404
    error = "Country not found"


class ValidationError(CountryAPIError):
    status_code = 400
    error = "Validation failed"


class InternalError(CountryAPIError):
    status_code = 500
    error = "Internal server error"


async def country_api_error_handler(request: Request, exc: CountryAPIError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=InternalError(str(exc)).to_dict())


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(CountryAPIError, country_api_error_handler)
    app.add_exception_handler(SQLAlchemyError, unexpected_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
