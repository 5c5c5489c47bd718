from .db.data_action import DataAction
from .db.gateway import Database
from .db.models import ActionName, ActionResult
from .db.table import Table

__all__ = ["DataAction", "Database", "Table", "ActionName", "ActionResult"]
