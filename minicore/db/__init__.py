from .actions import Action, DeleteAction, InsertAction, SelectAction, UpdateAction
from .data_action import DataAction, Property
from .gateway import Database, Gateway
from .models import ActionName, ActionResult
from .table import Table

__all__ = [
    "Action",
    "ActionName",
    "ActionResult",
    "DataAction",
    "Database",
    "DeleteAction",
    "Gateway",
    "InsertAction",
    "Property",
    "SelectAction",
    "Table",
    "UpdateAction",
]
