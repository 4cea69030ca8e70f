"""Pydantic request/response models."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from ._errors import RequestShapeError


# === Requests ===


class SimpleQuery(BaseModel):
    """A bare SQL statement, sent as a JSON string."""

    kind: Literal["simple"] = "simple"
    statement: str


class PreparedQuery(BaseModel):
    """A statement with positional ``?`` parameters, sent as ``[sql, [params]]``."""

    kind: Literal["prepared"] = "prepared"
    statement: str
    params: list[Any] = Field(default_factory=list)


Query = SimpleQuery | PreparedQuery


def parse_query(payload: Any) -> Query:
    """Discriminate the request body by shape.

    A JSON string is a simple query; a two element array of a string and an
    array is a prepared query. Anything else is rejected.
    """
    if isinstance(payload, str):
        return SimpleQuery(statement=payload)

    if (
        isinstance(payload, list)
        and len(payload) == 2
        and isinstance(payload[0], str)
        and isinstance(payload[1], list)
    ):
        return PreparedQuery(statement=payload[0], params=payload[1])

    raise RequestShapeError(
        "Request body must be a JSON string or a [statement, [params]] array"
    )


# === Responses ===


class GeneratedId(BaseModel):
    """Identifier generated by the executed statement, if any."""

    kind: Literal["id"] = "id"
    id: int | None = None

    def to_content(self) -> int | None:
        return self.id


class RowSet(BaseModel):
    """Rows returned by the executed statement, one mapping per row."""

    kind: Literal["rows"] = "rows"
    rows: list[dict[str, Any]] = Field(default_factory=list)

    def to_content(self) -> list[dict[str, Any]]:
        return self.rows


QueryResult = GeneratedId | RowSet


class ConnectionsResponse(BaseModel):
    """Response for listing registered connections."""

    connections: list[str]
    default: str
