from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from currency_converter.services.amounts import AmountFormatError
from currency_converter.services.rates.table import RateUnavailableError

logger = logging.getLogger("currency_converter.errors")


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        detail = exc.detail
        if detail in (None, "Not Found"):
            detail = f"No route for {request.method} {request.url.path}"
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "not_found", "detail": detail},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def amount_format_handler(request: Request, exc: AmountFormatError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "invalid_amount",
            "detail": exc.message,
            "currency": exc.currency,
        },
    )


def rate_unavailable_handler(request: Request, exc: RateUnavailableError):  # type: ignore
    logger.warning("conversion refused: %s", exc, extra={"currency": exc.currency})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "error": "rates_unavailable",
            "detail": f"Exchange rate unavailable for {exc.currency}: {exc.reason}",
            "currency": exc.currency,
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
