from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    StoreReadError,
    ValidationError,
)
from .http import fail

log = logging.getLogger(__name__)

_STATUS = (
    (ValidationError, 400, "BAD_REQUEST"),
    (AuthorizationError, 403, "FORBIDDEN"),
    (NotFoundError, 404, "NOT_FOUND"),
    (ConflictError, 409, "CONFLICT"),
    (StoreReadError, 503, "STORE_UNAVAILABLE"),
)


def status_for(e: DomainError) -> tuple[int, str]:
    for kind, status, code in _STATUS:
        if isinstance(e, kind):
            return status, code
    return 400, "DOMAIN_ERROR"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        status, code = status_for(e)
        if status >= 500:
            log.warning("request failed with %s: %s", code, e)
        return fail(str(e), status=status, code=code)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _500(e: Exception):
        log.exception("unhandled error")
        return fail("Internal server error", status=500)
