"""Rewrite ``?`` placeholders into the driver's DB-API paramstyle."""

from typing import Any, Sequence

_QUOTES = ("'", '"', "`")


def _placeholder(paramstyle: str, index: int) -> str:
    if paramstyle in ("format", "pyformat"):
        return "%s"
    if paramstyle == "numeric":
        return f":{index}"
    if paramstyle == "named":
        return f":p{index}"
    raise ValueError(f"Unsupported paramstyle: '{paramstyle}'")


def translate(
    statement: str, params: Sequence[Any], paramstyle: str
) -> tuple[str, tuple | dict[str, Any]]:
    """Return ``statement`` and ``params`` in the form the driver expects.

    Question marks inside quoted literals, quoted identifiers and comments
    are left alone. For ``format``/``pyformat`` drivers every literal ``%``
    is doubled, since those drivers interpolate the whole statement.
    """
    if paramstyle == "qmark":
        return statement, tuple(params)

    percent_escape = paramstyle in ("format", "pyformat")
    out: list[str] = []
    index = 0
    i = 0
    n = len(statement)
    while i < n:
        ch = statement[i]

        if ch in _QUOTES:
            end = i + 1
            while end < n and statement[end] != ch:
                if statement[end] == "\\" and ch != "`":
                    end += 1
                end += 1
            chunk = statement[i : end + 1]
            out.append(chunk.replace("%", "%%") if percent_escape else chunk)
            i = end + 1
            continue

        if statement.startswith("--", i):
            end = statement.find("\n", i)
            end = n if end == -1 else end
            chunk = statement[i:end]
            out.append(chunk.replace("%", "%%") if percent_escape else chunk)
            i = end
            continue

        if statement.startswith("/*", i):
            end = statement.find("*/", i + 2)
            end = n if end == -1 else end + 2
            chunk = statement[i:end]
            out.append(chunk.replace("%", "%%") if percent_escape else chunk)
            i = end
            continue

        if ch == "?":
            index += 1
            out.append(_placeholder(paramstyle, index))
        elif ch == "%" and percent_escape:
            out.append("%%")
        else:
            out.append(ch)
        i += 1

    if paramstyle == "named":
        return "".join(out), {f"p{k}": v for k, v in enumerate(params, start=1)}
    return "".join(out), tuple(params)
