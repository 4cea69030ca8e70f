"""Health check routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from .._connections import ConnectionRegistry
from .._errors import JsonSqlError
from .._executor import QueryExecutor
from .._models import SimpleQuery
from ._query import get_registry

router = APIRouter(tags=["health"])


@router.get("/health")
def health(
    deep: bool = False,
    registry: ConnectionRegistry = Depends(get_registry),
):
    """Health check endpoint.

    With ``deep=true`` the default connection is exercised with ``SELECT 1``
    and a failure is reported as 503.
    """
    if not deep:
        return {"status": "ok"}

    try:
        engine = registry.get_engine()
        QueryExecutor(engine).execute(SimpleQuery(statement="SELECT 1"))
    except JsonSqlError as e:
        return JSONResponse({"status": "error", "detail": str(e)}, status_code=503)
    return {"status": "ok", "connection": registry.default}
