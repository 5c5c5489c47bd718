from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..data_action import DataAction
from ..gateway import Gateway
from ..helpers import validate_identifier

logger = logging.getLogger(__name__)

DEFAULT_DRIVERS = frozenset({"mysql", "mariadb", "sqlite", "postgresql"})


class Action(ABC):
    """
    Abstract base for a named statement builder bound to one table.

    Subclasses set ``name`` and implement validate() and build_sql().
    The gateway is injected at construction; the connection name can be
    overridden per call.
    """

    name: str = ""
    # metadata only; builders do not branch on the driver
    supported_drivers: frozenset[str] = DEFAULT_DRIVERS

    def __init__(self, table_name: str, gateway: Gateway, connection: str = "default") -> None:
        if not self.name:
            raise TypeError(f"{type(self).__name__} must define a non-empty name")
        self.table_name = validate_identifier(table_name, "table")
        self.gateway = gateway
        self.connection = connection

    @abstractmethod
    def validate(self, data: DataAction) -> bool:
        """Return True when data has the structure this statement needs."""
        ...

    @abstractmethod
    def build_sql(self, data: DataAction) -> str:
        """Render the statement text for data."""
        ...

    def execute(self, data: DataAction, connection: str | None = None) -> Any:
        """
        Build the statement and run it through the gateway.

        Does not call validate(); callers check it first. Gateway failures propagate.
        """
        sql = self.build_sql(data)
        target = connection or self.connection
        logger.debug("%s on %s via %s: %s", self.name, self.table_name, target, sql)
        return self.gateway.execute(target, sql, data.get_parameters())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table_name={self.table_name!r}, connection={self.connection!r})"
