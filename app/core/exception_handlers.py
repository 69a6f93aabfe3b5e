"""Error responses for the search API.

Every error body has the shape {"error": CODE, "message": str} with optional
"details" (client errors only) and "request_id" (when the request carried
or was assigned one), so a caller can quote the id when reporting a failure.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import RecordSearchException
from app.middleware.request_id import get_request_id

logger = logging.getLogger(__name__)

ERROR_STATUS_BY_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "STORE_UNAVAILABLE": 503,
    "SERVICE_UNAVAILABLE": 503,
}


def _error_response(status_code: int, body: dict[str, Any]) -> JSONResponse:
    request_id = get_request_id()
    if request_id:
        body["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=body)


def _record_search_exception_handler(
    request: Request, exc: RecordSearchException
) -> JSONResponse:
    """Domain errors. 5xx bodies drop details (they can name hosts or drivers)."""
    status_code = ERROR_STATUS_BY_CODE.get(exc.error_code, 400)
    body = exc.to_dict()
    if status_code >= 500:
        logger.warning(
            "%s on %s %s: %s",
            exc.error_code,
            request.method,
            request.url.path,
            exc.details,
        )
        body.pop("details", None)
    return _error_response(status_code, body)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Bad query parameters (unknown scope, overlong q) -> 422."""
    return _error_response(
        422,
        {
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
                for err in exc.errors()
            ],
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(
        exc.status_code, {"error": "HTTP_ERROR", "message": exc.detail}
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unexpected -> 500. The exception text is shown only in debug."""
    logger.exception("Unhandled exception: %s", exc)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, {"error": "INTERNAL_ERROR", "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordSearchException, _record_search_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
