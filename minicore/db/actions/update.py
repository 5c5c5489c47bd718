from ..data_action import DataAction
from ..helpers import append_properties, validate_identifier
from ..models import ActionName
from .base import Action


class UpdateAction(Action):
    name = ActionName.UPDATE.value

    def validate(self, data: DataAction) -> bool:
        # SET needs columns; an unconditioned UPDATE would touch every row
        return bool(data.columns) and bool(data.properties)

    def build_sql(self, data: DataAction) -> str:
        cols = [validate_identifier(c, "column") for c in data.columns]
        set_clause = ", ".join(f"{c} = :{c}" for c in cols)
        return append_properties(f"UPDATE {self.table_name} SET {set_clause}", data.properties)
