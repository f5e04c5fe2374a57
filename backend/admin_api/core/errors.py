"""
Exception handlers.

AppException subclasses are HTTPExceptions and render as {"detail": ...}
through FastAPI's default handler. DependencyBlockedError adds the list of
blocking dependency kinds. Storage errors that escape a service are the
outermost boundary: they are logged and answered with a generic 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shared.config.logging import admin_api_logger as logger
from shared.utils.exceptions import DependencyBlockedError


async def dependency_blocked_handler(request: Request, exc: DependencyBlockedError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "blocking": exc.blocking},
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Unhandled storage error",
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal error occurred. Please try again."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DependencyBlockedError, dependency_blocked_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
