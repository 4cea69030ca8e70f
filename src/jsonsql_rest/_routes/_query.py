"""Query execution routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi import Query as QueryParam
from fastapi.responses import JSONResponse

from .._connections import ConnectionRegistry
from .._executor import QueryExecutor
from .._models import ConnectionsResponse, parse_query

router = APIRouter(tags=["query"])


# Dependency placeholder - overridden by the app factory
def get_registry() -> ConnectionRegistry:
    """Get the connection registry instance."""
    raise RuntimeError("ConnectionRegistry not initialized")


@router.post("/")
def run_query(
    payload: Any = Body(...),
    return_: str | None = QueryParam(default=None, alias="return"),
    connection: str | None = None,
    registry: ConnectionRegistry = Depends(get_registry),
) -> JSONResponse:
    """Execute one statement.

    The body is either a JSON string (plain statement) or a
    ``[statement, [params]]`` array. ``?return=true`` answers with the
    generated identifier instead of the result rows.
    """
    query = parse_query(payload)
    engine = registry.get_engine(connection)
    result = QueryExecutor(engine).execute(query, want_id=return_ == "true")
    return JSONResponse(content=result.to_content())


@router.get("/connections", response_model=ConnectionsResponse)
def list_connections(
    registry: ConnectionRegistry = Depends(get_registry),
) -> ConnectionsResponse:
    """List registered connection names."""
    return ConnectionsResponse(
        connections=registry.list_connections(),
        default=registry.default,
    )
