"""Error types, error reporting and FastAPI exception handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

CONNECTION_ERROR_PREFIX = "Database connection error"
QUERY_ERROR_PREFIX = "Database query error"


class JsonSqlError(Exception):
    """Base exception for jsonsql_rest."""

    status_code = 500


class ConnectionFailedError(JsonSqlError):
    """The pool could not hand out a usable connection."""


class QueryError(JsonSqlError):
    """Statement preparation, binding or execution failed."""


class RequestShapeError(JsonSqlError):
    """The request body is neither a statement nor a [statement, params] pair."""

    status_code = 400


class UnknownConnectionError(JsonSqlError):
    """The request named a connection that is not registered."""

    status_code = 400


def report(prefix: str, exc: BaseException) -> str:
    """Log a failure under ``prefix`` and return the message shown to the caller."""
    message = str(exc)
    logger.error("%s: %s", prefix, message)
    return message


async def _jsonsql_error_handler(request: Request, exc: JsonSqlError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=exc.status_code)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    messages = [str(err.get("msg", err)) for err in exc.errors()]
    return PlainTextResponse("; ".join(messages) or "Invalid request", status_code=400)


def register_error_handlers(app: FastAPI) -> None:
    """Render all request failures as plain text."""
    app.add_exception_handler(JsonSqlError, _jsonsql_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
