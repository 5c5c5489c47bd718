from ..data_action import DataAction
from ..helpers import append_properties
from ..models import ActionName
from .base import Action


class DeleteAction(Action):
    name = ActionName.DELETE.value

    def validate(self, data: DataAction) -> bool:
        """
        Refuse a DELETE without any clause.

        Only checks that some property exists, not that it is a WHERE;
        a lone LIMIT passes.
        """
        return bool(data.properties)

    def build_sql(self, data: DataAction) -> str:
        return append_properties(f"DELETE FROM {self.table_name}", data.properties)
