from __future__ import annotations

import logging
import time
from typing import Mapping

from .actions import Action, DeleteAction, InsertAction, SelectAction, UpdateAction
from .data_action import DataAction
from .gateway import Gateway
from .helpers import validate_fragment, validate_identifier
from .metrics import observe_action
from .models import ActionName, ActionResult

logger = logging.getLogger(__name__)


class Table:
    """
    One database table: its column scheme plus a registry of named actions.

    The four default actions (insert, select, update, delete) are registered
    on construction. Custom actions are added with add_action(); to override
    a default, remove it first.

    Usage:
        class UsersTable(Table):
            def __init__(self, gateway):
                super().__init__(
                    "users",
                    {"id": "INT AUTO_INCREMENT PRIMARY KEY", "name": "VARCHAR(255)"},
                    gateway,
                )

        users = UsersTable(db)
        data = DataAction().add_column("name").add_parameters({"name": "ada"})
        result = users.execute("insert", data)
        if not result.executed:
            ...  # no action under that name
    """

    def __init__(
        self,
        name: str,
        scheme: Mapping[str, str],
        gateway: Gateway,
        connection: str = "default",
    ) -> None:
        self.name = validate_identifier(name, "table")
        self.scheme = dict(scheme)
        self.gateway = gateway
        self.connection = connection
        self._actions: dict[str, Action] = {}

        for action_cls in (InsertAction, SelectAction, UpdateAction, DeleteAction):
            self.add_action(action_cls(self.name, gateway, connection))

    def get_scheme_to_string(self) -> str:
        fields = []
        for field_name, field_definition in self.scheme.items():
            validate_identifier(field_name, "column")
            validate_fragment(field_definition, "column definition")
            fields.append(f"{field_name} {field_definition}")
        return ", ".join(fields)

    def create(self) -> None:
        logger.info("Creating table %s", self.name)
        self.gateway.execute(
            self.connection, f"CREATE TABLE {self.name} ({self.get_scheme_to_string()})", {}
        )

    def drop(self) -> None:
        logger.info("Dropping table %s", self.name)
        self.gateway.execute(self.connection, f"DROP TABLE `{self.name}`", {})

    def exist(self) -> bool:
        result = self.gateway.execute(
            self.connection, "SHOW TABLES LIKE :table_name", {"table_name": self.name}
        )
        return bool(result)

    def add_action(self, action: Action) -> None:
        if action.name in self._actions:
            raise ValueError(
                f"Action {action.name!r} is already registered on table {self.name!r}; "
                "remove it first to override"
            )
        self._actions[action.name] = action

    def remove_action(self, name: str | ActionName) -> None:
        self._actions.pop(_action_key(name), None)

    def has_action(self, name: str | ActionName) -> bool:
        return _action_key(name) in self._actions

    def get_action(self, name: str | ActionName) -> Action | None:
        return self._actions.get(_action_key(name))

    def action_names(self) -> list[str]:
        return list(self._actions)

    def execute(self, action_name: str | ActionName, data: DataAction) -> ActionResult:
        """
        Dispatch data to the action registered under action_name.

        Returns a non-executed ActionResult when no such action exists.
        validate() is not enforced here. Gateway errors propagate.
        """
        key = _action_key(action_name)
        action = self._actions.get(key)
        if action is None:
            logger.warning("No action %r registered on table %s", key, self.name)
            _observe(self.name, key, "missing", 0.0)
            return ActionResult.missing(key)

        start_time = time.monotonic()
        status = "success"
        try:
            value = action.execute(data)
        except Exception:
            status = "error"
            raise
        finally:
            _observe(self.name, key, status, time.monotonic() - start_time)

        return ActionResult(action=key, executed=True, value=value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, actions={self.action_names()!r})"


def _action_key(name: str | ActionName) -> str:
    return name.value if isinstance(name, ActionName) else name


def _observe(table: str, action: str, status: str, latency_s: float) -> None:
    # metric errors must not mask the action's own outcome
    try:
        observe_action(table, action, status, latency_s)
    except Exception:
        logger.debug("Failed to record metrics for %s.%s", table, action, exc_info=True)
