"""Error Handlers — map catalogue errors to the JSON error envelope.

Invariants:
    - Every handled error is logged with error_code and path extras (see observability._EXTRA_KEYS)
    - TrainShopError → its own to_response() with its http_status; 4xx logged as warning, 5xx as error
    - Bad query/body parameters (unknown scale, negative price, ...) → 400 VALIDATION_ERROR,
      same envelope as a domain ValidationError plus per-field details
    - Anything else → 500 INTERNAL_ERROR, message never includes exception text

Design Decisions:
    - Request validation reuses core ValidationError so clients parse one envelope shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from trainshop.core.errors import ErrorSeverity, TrainShopError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TrainShopError, trainshop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _log(request: Request, code: str, http_status: int, message: str, **kwargs) -> None:
    log = logger.warning if http_status < 500 else logger.error
    log(
        f"{request.method} {request.url.path} → {http_status} {code}: {message}",
        extra={"error_code": code, "path": request.url.path},
        **kwargs,
    )


async def trainshop_error_handler(request: Request, exc: TrainShopError):
    _log(request, exc.code, exc.http_status, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    first_field = details[0]["field"] if details else ""
    error = ValidationError("Invalid request data", first_field)
    _log(
        request, error.code, error.http_status,
        f"{len(details)} invalid field(s), first: {first_field}",
    )

    content = error.to_response()
    content["error"]["details"] = details
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def unhandled_error_handler(request: Request, exc: Exception):
    _log(
        request, "INTERNAL_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR,
        type(exc).__name__, exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )
