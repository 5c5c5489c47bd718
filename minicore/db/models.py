from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionName(str, Enum):
    INSERT = "insert"
    SELECT = "select"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of Table.execute().

    executed is False only when no action is registered under the name;
    an action that ran and matched nothing still has executed=True.
    """
    action: str
    executed: bool
    # rows (list of dicts) for row-returning statements, affected row count otherwise
    value: Any = None

    @classmethod
    def missing(cls, action: str) -> "ActionResult":
        return cls(action=action, executed=False)

    def __bool__(self) -> bool:
        return self.executed
