from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import TextClause

from ..config import DbConfig
from ..errors import DbQueryError, UnknownConnectionError

logger = logging.getLogger(__name__)


class Gateway(Protocol):
    """
    What table actions need from the database: run one parameterized statement.
    """

    def execute(
        self,
        connection_name: str,
        sql: str | TextClause,
        parameters: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Run a statement against the named connection.

        Returns a list of row dicts for statements that return rows
        and the affected row count otherwise.
        """
        ...


class Database:
    """
    Gateway over SQLAlchemy engines keyed by logical connection name.

    Every execute() call runs in its own transaction: committed when the
    statement succeeds, rolled back when it fails. Multi-statement atomicity
    is the caller's business.

    Usage:
        db = Database.from_config(DbConfig.from_env())
        rows = db.execute("default", "SELECT id FROM users WHERE id = :id", {"id": 1})
    """

    def __init__(self, engines: Mapping[str, Engine] | None = None) -> None:
        self._engines: dict[str, Engine] = dict(engines or {})

    @classmethod
    def from_config(cls, config: DbConfig) -> "Database":
        engines = {
            name: create_engine(url, echo=config.echo, pool_pre_ping=config.pool_pre_ping)
            for name, url in config.connections.items()
        }
        return cls(engines)

    def add_engine(self, name: str, engine: Engine) -> None:
        if name in self._engines:
            raise ValueError(f"Connection {name!r} is already registered")
        self._engines[name] = engine

    def engine(self, name: str) -> Engine:
        try:
            return self._engines[name]
        except KeyError:
            raise UnknownConnectionError(
                f"No connection named {name!r}; known: {sorted(self._engines)}"
            ) from None

    def execute(
        self,
        connection_name: str,
        sql: str | TextClause,
        parameters: Mapping[str, Any] | None = None,
    ) -> Any:
        engine = self.engine(connection_name)
        stmt = text(sql) if isinstance(sql, str) else sql
        logger.debug("[%s] %s %r", connection_name, stmt, dict(parameters or {}))

        try:
            with engine.begin() as conn:
                result = conn.execute(stmt, dict(parameters or {}))
                try:
                    if result.returns_rows:
                        return [dict(row) for row in result.mappings()]
                    return int(result.rowcount)
                finally:
                    result.close()
        except SQLAlchemyError as exc:
            error_msg = str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)
            raise DbQueryError(error_msg) from exc

    def dispose(self) -> None:
        """Close pooled connections of every registered engine."""
        for engine in self._engines.values():
            engine.dispose()
