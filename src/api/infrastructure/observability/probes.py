"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for database engine observability."""

    def engine_created(self, connection_string: str) -> None:
        """Record that a database engine was created."""
        ...

    def schema_created(self, table_count: int) -> None:
        """Record that tables were created from ORM metadata."""
        ...

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def engine_created(self, connection_string: str) -> None:
        """Record that a database engine was created."""
        self._logger.info(
            "database_engine_created",
            connection_string=connection_string,
        )

    def schema_created(self, table_count: int) -> None:
        """Record that tables were created from ORM metadata."""
        self._logger.info("database_schema_created", table_count=table_count)

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        self._logger.info("database_pool_closed")
