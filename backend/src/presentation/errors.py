"""
Exception handlers - the single place where failures become HTTP responses.

Every error escaping a route goes through DomainErrorTranslator:
- ClientError  → {"status": "fail", "message": ...} with its status code
- anything else → logged, then a generic 500 that leaks no internals
"""

from logging import getLogger
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.exceptions import ClientError, DomainError, DomainErrorTranslator

logger = getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "terjadi kegagalan pada server kami"


def fail_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )


def error_response(request: Request, exc: Exception) -> JSONResponse:
    translated = DomainErrorTranslator.translate(exc)

    if isinstance(translated, ClientError):
        logger.info(
            f"[CLIENT ERROR {translated.status_code}] {request.method} "
            f"{request.url.path}: {exc}"
        )
        return fail_response(translated.status_code, translated.message)

    logger.error(
        f"[INTERNAL ERROR] {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return error_response(request, exc)

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        return error_response(request, exc)

    # Body that is not a JSON object
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.info(f"[VALIDATION ERROR] {exc.errors()}")
        return fail_response(
            status.HTTP_400_BAD_REQUEST, "payload harus berupa objek JSON"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return fail_response(exc.status_code, str(exc.detail))

    # Last resort; Starlette still re-raises these to the server after responding
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        return error_response(request, exc)
