from .base import Action
from .delete import DeleteAction
from .insert import InsertAction
from .select import SelectAction
from .update import UpdateAction

__all__ = [
    "Action",
    "InsertAction",
    "SelectAction",
    "UpdateAction",
    "DeleteAction",
]
