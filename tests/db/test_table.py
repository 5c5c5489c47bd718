from __future__ import annotations

from typing import Any

import pytest

from minicore.db.actions import Action, DeleteAction
from minicore.db.data_action import DataAction
from minicore.db.models import ActionName, ActionResult
from minicore.db.table import Table
from minicore.errors import DbQueryError
from minicore.metrics.registry import DB_ACTION_TOTAL

USERS_SCHEME = {"id": "INT AUTO_INCREMENT PRIMARY KEY", "name": "VARCHAR(255)"}


@pytest.fixture
def users(gateway) -> Table:
    return Table("users", USERS_SCHEME, gateway)


class CountAction(Action):
    name = "count"

    def validate(self, data: DataAction) -> bool:
        return True

    def build_sql(self, data: DataAction) -> str:
        return f"SELECT COUNT(*) AS n FROM {self.table_name}"


def test_create_renders_scheme_in_order(users: Table, gateway) -> None:
    users.create()

    assert gateway.last_sql == (
        "CREATE TABLE users (id INT AUTO_INCREMENT PRIMARY KEY, name VARCHAR(255))"
    )


def test_drop_quotes_table_name(users: Table, gateway) -> None:
    users.drop()

    assert gateway.last_sql == "DROP TABLE `users`"


@pytest.mark.parametrize("rows, expected", [([{"Tables_in_db": "users"}], True), ([], False)])
def test_exist_checks_for_any_row(users: Table, gateway, rows, expected: bool) -> None:
    gateway.result = rows

    assert users.exist() is expected
    assert gateway.last_sql == "SHOW TABLES LIKE :table_name"
    assert gateway.last_parameters == {"table_name": "users"}


def test_scheme_rejects_unsafe_definition(gateway) -> None:
    table = Table("users", {"id": "INT); DROP TABLE users"}, gateway)

    with pytest.raises(ValueError):
        table.create()
    assert gateway.calls == []


def test_default_actions_registered(users: Table) -> None:
    assert users.action_names() == ["insert", "select", "update", "delete"]


@pytest.mark.parametrize(
    "name, data, verb",
    [
        ("insert", DataAction().add_column("name").add_parameters({"name": "ada"}), "INSERT INTO users"),
        ("select", DataAction().add_column("id"), "SELECT id FROM users"),
        (
            "update",
            DataAction().add_column("name").add_property("WHERE", "id = :id", {"id": 1, "name": "b"}),
            "UPDATE users",
        ),
        ("delete", DataAction().add_property("WHERE", "id = :id", {"id": 1}), "DELETE FROM users"),
    ],
)
def test_execute_issues_exactly_one_statement(users: Table, gateway, name, data, verb) -> None:
    result = users.execute(name, data)

    assert len(gateway.calls) == 1
    assert gateway.last_sql.startswith(verb)
    assert result == ActionResult(action=name, executed=True, value=1)


def test_execute_accepts_enum_name(users: Table, gateway) -> None:
    users.execute(ActionName.SELECT, DataAction().add_column("id"))

    assert gateway.last_sql == "SELECT id FROM users"


def test_removed_action_yields_missing_result(users: Table, gateway) -> None:
    users.remove_action("delete")

    result = users.execute("delete", DataAction().add_property("WHERE", "id = :id", {"id": 1}))

    assert result.executed is False
    assert result.value is None
    assert not result
    assert gateway.calls == []


def test_empty_select_is_distinct_from_missing_action(users: Table, gateway) -> None:
    gateway.result = []

    found = users.execute("select", DataAction().add_column("id"))
    missing = users.execute("nope", DataAction())

    assert found.executed is True and found.value == []
    assert missing.executed is False


def test_remove_action_is_noop_when_absent(users: Table) -> None:
    users.remove_action("does-not-exist")

    assert len(users.action_names()) == 4


def test_add_custom_action(users: Table, gateway) -> None:
    gateway.result = [{"n": 3}]
    users.add_action(CountAction(users.name, gateway))

    result = users.execute("count", DataAction())

    assert users.has_action("count")
    assert result.value == [{"n": 3}]
    assert gateway.last_sql == "SELECT COUNT(*) AS n FROM users"


def test_add_action_rejects_duplicate_name(users: Table, gateway) -> None:
    with pytest.raises(ValueError, match="already registered"):
        users.add_action(DeleteAction(users.name, gateway))


def test_override_by_remove_then_add(users: Table, gateway) -> None:
    class SoftDelete(DeleteAction):
        def build_sql(self, data: DataAction) -> str:
            return super().build_sql(data).replace(
                f"DELETE FROM {self.table_name}", f"UPDATE {self.table_name} SET deleted = 1"
            )

    users.remove_action(ActionName.DELETE)
    users.add_action(SoftDelete(users.name, gateway))
    users.execute("delete", DataAction().add_property("WHERE", "id = :id", {"id": 7}))

    assert gateway.last_sql == "UPDATE users SET deleted = 1 WHERE id = :id"
    assert isinstance(users.get_action("delete"), SoftDelete)


def test_gateway_errors_propagate(gateway) -> None:
    def boom(*_: Any) -> Any:
        raise DbQueryError("table is gone")

    gateway.result = boom
    table = Table("users", USERS_SCHEME, gateway)

    with pytest.raises(DbQueryError, match="table is gone"):
        table.execute("select", DataAction().add_column("id"))


def test_execute_counts_outcomes(gateway) -> None:
    table = Table("metrics_users", USERS_SCHEME, gateway)

    def count(action: str, status: str) -> float:
        return DB_ACTION_TOTAL.labels(table="metrics_users", action=action, status=status)._value.get()

    before_ok = count("select", "success")
    before_missing = count("nope", "missing")

    table.execute("select", DataAction().add_column("id"))
    table.execute("nope", DataAction())

    assert count("select", "success") == before_ok + 1
    assert count("nope", "missing") == before_missing + 1


def test_table_connection_is_passed_to_actions(gateway) -> None:
    table = Table("users", USERS_SCHEME, gateway, connection="replica")

    table.execute("select", DataAction().add_column("id"))
    table.exist()

    assert {call[0] for call in gateway.calls} == {"replica"}
