from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Mapping

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from minicore.db.gateway import Database


class RecordingGateway:
    """
    Gateway double that records every call and returns a canned result.

    result may be a value or a callable taking (connection_name, sql, parameters).
    """

    def __init__(self, result: Any = 1) -> None:
        self.result = result
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def execute(
        self,
        connection_name: str,
        sql: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> Any:
        self.calls.append((connection_name, str(sql), dict(parameters or {})))
        if callable(self.result):
            return self.result(connection_name, sql, parameters)
        return self.result

    @property
    def last_sql(self) -> str:
        return self.calls[-1][1]

    @property
    def last_parameters(self) -> dict[str, Any]:
        return self.calls[-1][2]


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def db_url(tmp_path) -> str:
    """
    Connection URL for gateway tests.

    Set MINICORE_TEST_DB_URL to run against a real server; by default a
    throwaway SQLite file per test is used.
    """
    return os.environ.get("MINICORE_TEST_DB_URL", f"sqlite:///{tmp_path / 'minicore.db'}")


@pytest.fixture
def engine(db_url: str) -> Iterator[Engine]:
    eng = create_engine(db_url, pool_pre_ping=True)
    try:
        with eng.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    except Exception as exc:  # pragma: no cover
        pytest.fail(
            "Test database is not reachable.\n"
            f"- MINICORE_TEST_DB_URL={db_url!r}\n"
            f"- Underlying error: {exc}",
            pytrace=False,
        )

    yield eng
    eng.dispose()


@pytest.fixture
def database(engine: Engine) -> Database:
    return Database({"default": engine})
