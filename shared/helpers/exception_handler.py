import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.core.errors import DomainError, ErrorCode
from shared.helpers.json_response_helper import error_payload

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        if exc.http_status >= 500:
            logger.error(f"❌ {request.method} {request.url.path}: {exc}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        return JSONResponse(
            content=error_payload(exc.message, exc.code.value),
            status_code=exc.http_status
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            content=error_payload(str(exc.detail), str(exc.status_code)),
            status_code=exc.status_code or 400
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            content=error_payload(str(exc.errors()), ErrorCode.INVALID_INPUT.value),
            status_code=422
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"❌ Database error on {request.method} {request.url.path}")
        return JSONResponse(
            content=error_payload("Database error", ErrorCode.STORE_FAILURE.value),
            status_code=500
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"❌ Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            content=error_payload("Internal server error", ErrorCode.STORE_FAILURE.value),
            status_code=500
        )
