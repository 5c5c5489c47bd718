from ..data_action import DataAction
from ..helpers import append_properties, validate_identifier
from ..models import ActionName
from .base import Action


class SelectAction(Action):
    name = ActionName.SELECT.value

    def validate(self, data: DataAction) -> bool:
        return bool(data.columns)

    def build_sql(self, data: DataAction) -> str:
        col_names = ", ".join(validate_identifier(c, "column") for c in data.columns)
        return append_properties(f"SELECT {col_names} FROM {self.table_name}", data.properties)
