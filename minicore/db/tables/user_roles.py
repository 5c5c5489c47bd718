from __future__ import annotations

from typing import Any

from ..data_action import DataAction
from ..gateway import Gateway
from ..table import Table


class UserRolesTable(Table):
    """
    The ``user_roles`` link table used for role-based access control.

    Columns:
    - ``id``: auto-increment row id
    - ``userId``: the user holding the role
    - ``roleId``: the role assigned to the user

    Usage:
        roles = UserRolesTable(db)
        roles.add_role_to_user(1, 2)
        roles.has_role(1, 2)            # True
        roles.remove_role_from_user(1, 2)
    """

    def __init__(self, gateway: Gateway, connection: str = "default") -> None:
        super().__init__(
            "user_roles",
            {
                "id": "INT AUTO_INCREMENT PRIMARY KEY",
                "userId": "INT NOT NULL",
                "roleId": "INT NOT NULL",
            },
            gateway,
            connection,
        )

    def get_roles_by_user_id(self, user_id: int) -> list[dict[str, Any]]:
        data = DataAction()
        data.add_column("roleId")
        data.add_property("WHERE", "userId = :userId", {"userId": user_id})
        return self.execute("select", data).value

    def get_users_by_role_id(self, role_id: int) -> list[dict[str, Any]]:
        data = DataAction()
        data.add_column("userId")
        data.add_property("WHERE", "roleId = :roleId", {"roleId": role_id})
        return self.execute("select", data).value

    def add_role_to_user(self, user_id: int, role_id: int) -> bool:
        data = DataAction()
        data.add_column("userId")
        data.add_column("roleId")
        data.add_parameters({"userId": user_id, "roleId": role_id})
        return bool(self.execute("insert", data).value)

    def remove_role_from_user(self, user_id: int, role_id: int) -> bool:
        data = DataAction()
        data.add_property(
            "WHERE",
            "userId = :userId AND roleId = :roleId",
            {"userId": user_id, "roleId": role_id},
        )
        return bool(self.execute("delete", data).value)

    def has_role(self, user_id: int, role_id: int) -> bool:
        data = DataAction()
        data.add_column("id")
        data.add_property(
            "WHERE",
            "userId = :userId AND roleId = :roleId",
            {"userId": user_id, "roleId": role_id},
        )
        data.add_property("LIMIT", "1")
        return bool(self.execute("select", data).value)
