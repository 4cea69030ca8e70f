"""Connection registry for named database engines."""

import logging
import threading
from typing import Callable

from sqlalchemy import Engine, create_engine

from ._errors import (
    CONNECTION_ERROR_PREFIX,
    ConnectionFailedError,
    UnknownConnectionError,
    report,
)

logger = logging.getLogger(__name__)

DEFAULT_CONNECTION = "default"


class ConnectionRegistry:
    """Registry of named engine factories with lazily created, cached engines.

    Each engine owns a connection pool shared by all requests that name it.
    """

    def __init__(self, default: str = DEFAULT_CONNECTION):
        self.default = default
        self._factories: dict[str, Callable[[], Engine]] = {}
        self._engines: dict[str, Engine] = {}
        self._lock = threading.Lock()

    def register(self, name: str, factory: Callable[[], Engine]) -> None:
        """Register a named connection factory."""
        with self._lock:
            self._factories[name] = factory
            self._engines.pop(name, None)

    def register_url(self, name: str, url: str, **engine_kwargs) -> None:
        """Register a connection built from a SQLAlchemy URL."""
        self.register(name, lambda: create_engine(url, **engine_kwargs))

    def get_engine(self, name: str | None = None) -> Engine:
        """Get or create the engine registered under ``name`` (or the default)."""
        name = name or self.default
        if name not in self._factories:
            raise UnknownConnectionError(f"Unknown connection: '{name}'")

        with self._lock:
            if name not in self._engines:
                try:
                    engine = self._factories[name]()
                except Exception as e:
                    # bad URL or missing DBAPI driver
                    raise ConnectionFailedError(report(CONNECTION_ERROR_PREFIX, e)) from e
                logger.info("Created engine for connection '%s' (%s)", name, engine.dialect.name)
                self._engines[name] = engine
            return self._engines[name]

    def list_connections(self) -> list[str]:
        """List available connection names."""
        return list(self._factories.keys())

    def dispose(self) -> None:
        """Close the pooled connections of every engine created so far."""
        with self._lock:
            for engine in self._engines.values():
                engine.dispose()
            self._engines.clear()
