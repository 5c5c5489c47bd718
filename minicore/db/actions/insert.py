from ..data_action import DataAction
from ..helpers import append_properties, validate_identifier
from ..models import ActionName
from .base import Action


class InsertAction(Action):
    name = ActionName.INSERT.value

    def validate(self, data: DataAction) -> bool:
        return bool(data.columns)

    def build_sql(self, data: DataAction) -> str:
        cols = [validate_identifier(c, "column") for c in data.columns]
        col_names = ", ".join(cols)
        placeholders = ", ".join(f":{c}" for c in cols)
        sql = f"INSERT INTO {self.table_name} ({col_names}) VALUES ({placeholders})"
        return append_properties(sql, data.properties)
