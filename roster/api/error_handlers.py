"""Error Handlers — global exception handlers for the roster API.

Invariants:
    - RosterError → its own envelope, logged with the record_id/operation from its context
    - RequestValidationError → field-level details named after record fields ("age", not "body.age")
    - Exception (catch-all) → never leaks internal details
    - Every log line carries the store operation the request was headed for

Design Decisions:
    - Three-layer handler: domain (RosterError), validation (Pydantic), catch-all (Exception)
    - Operation for shell-level failures derived from method + path, since the
      store was never reached and there is no StoreResult to ask
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roster.core.errors import ErrorSeverity, RosterError

logger = logging.getLogger(__name__)

_COLLECTION_OPERATIONS = {"POST": "add", "GET": "list"}
_ITEM_OPERATIONS = {"GET": "find_by_id", "PATCH": "update", "DELETE": "remove"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_roster_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def request_log_extra(request: Request) -> dict:
    """record_id/operation/path for a request that failed before reaching the store."""
    record_id = request.path_params.get("record_id")
    operations = _ITEM_OPERATIONS if record_id is not None else _COLLECTION_OPERATIONS
    return {
        "record_id": record_id,
        "operation": operations.get(request.method),
        "path": request.url.path,
    }


def _register_roster_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):
        level = (
            logging.WARNING
            if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
            else logging.ERROR
        )
        extra = request_log_extra(request)
        extra["record_id"] = exc.context.record_id or extra["record_id"]
        extra["operation"] = exc.context.operation or extra["operation"]
        logger.log(
            level, f"{exc.code}: {exc.message}",
            extra={**extra, "error_code": exc.code},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = _validation_details(exc)
        logger.warning(
            "Malformed request: "
            + ", ".join(f"{d['field']} ({d['type']})" for d in details),
            extra={**request_log_extra(request), "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Invalid request data",
                    "category": "validation",
                    "severity": ErrorSeverity.ERROR.value,
                    "details": details,
                },
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled {type(exc).__name__} during request",
            exc_info=True,
            extra={**request_log_extra(request), "error_code": "INTERNAL_ERROR"},
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


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """Field errors keyed by record field; the body/query location prefix is dropped."""
    details = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if len(loc) > 1 and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        details.append({
            "field": ".".join(loc),
            "message": e["msg"],
            "type": e["type"],
        })
    return details
