"""Query execution against a pooled SQLAlchemy engine."""

from typing import Any

from sqlalchemy import Connection, CursorResult, Engine
from sqlalchemy.exc import DBAPIError

from . import _placeholders
from ._codec import decode_row, encode_params
from ._errors import (
    CONNECTION_ERROR_PREFIX,
    QUERY_ERROR_PREFIX,
    ConnectionFailedError,
    QueryError,
    report,
)
from ._models import GeneratedId, PreparedQuery, Query, QueryResult, RowSet


def _driver_message(exc: Exception) -> Exception:
    # DBAPIError wraps the driver exception; its own str() appends the SQL
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return exc.orig
    return exc


class QueryExecutor:
    """Run one statement per call on a connection checked out from ``engine``.

    The engine (and its pool) is owned by the caller and shared across
    concurrent requests.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, query: Query, want_id: bool = False) -> QueryResult:
        """Execute ``query`` and shape the result by ``want_id``."""
        try:
            conn = self.engine.connect()
        except Exception as e:
            raise ConnectionFailedError(
                report(CONNECTION_ERROR_PREFIX, _driver_message(e))
            ) from e

        with conn:
            try:
                result = self._run(conn, query)
                if want_id:
                    outcome: QueryResult = GeneratedId(id=result.lastrowid or None)
                else:
                    outcome = RowSet(rows=self._fetch_rows(result))
                conn.commit()
            except Exception as e:
                # drivers raise non-DBAPI errors while binding (OverflowError, TypeError)
                raise QueryError(report(QUERY_ERROR_PREFIX, _driver_message(e))) from e
        return outcome

    def _run(self, conn: Connection, query: Query) -> CursorResult[Any]:
        if isinstance(query, PreparedQuery) and query.params:
            statement, params = _placeholders.translate(
                query.statement,
                encode_params(query.params),
                conn.dialect.paramstyle,
            )
            return conn.exec_driver_sql(statement, params)
        # no args at all: format-style drivers would otherwise interpolate literal %
        return conn.execution_options(no_parameters=True).exec_driver_sql(query.statement)

    def _fetch_rows(self, result: CursorResult[Any]) -> list[dict[str, Any]]:
        if not result.returns_rows:
            return []
        columns = list(result.keys())
        return [decode_row(columns, tuple(row)) for row in result]
