"""REST API that executes JSON-encoded SQL statements through SQLAlchemy."""

from ._app import create_app, create_app_from_settings
from ._connections import ConnectionRegistry
from ._executor import QueryExecutor
from ._models import GeneratedId, PreparedQuery, RowSet, SimpleQuery, parse_query

__version__ = "0.1.0"
__all__ = [
    "create_app",
    "create_app_from_settings",
    "ConnectionRegistry",
    "QueryExecutor",
    "SimpleQuery",
    "PreparedQuery",
    "GeneratedId",
    "RowSet",
    "parse_query",
]
