"""Exception handlers that complete Protean's FastAPI error mapping."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError
from protean.integrations.fastapi import register_exception_handlers

from delivery.errors import RatingNotAllowed

logger = structlog.get_logger(__name__)


async def _rating_not_allowed(request: Request, exc: RatingNotAllowed) -> JSONResponse:
    return JSONResponse(status_code=403, content={"error": exc.messages})


async def _version_conflict(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("Concurrent modification rejected", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=409,
        content={"error": "The resource was modified by another request. Please retry."},
    )


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred."})


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to responses.

    ObjectNotFoundError → 404 and ValidationError → 400 come from Protean;
    ineligible ratings, version conflicts and anything unexpected are added here.
    """
    register_exception_handlers(app)
    app.add_exception_handler(RatingNotAllowed, _rating_not_allowed)
    app.add_exception_handler(ExpectedVersionError, _version_conflict)
    app.add_exception_handler(Exception, _unexpected_error)
