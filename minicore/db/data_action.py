from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Property:
    """
    One clause fragment of a statement, e.g. Property("WHERE", "id = :id").
    """
    type: str
    condition: str


@dataclass
class DataAction:
    """
    Per-call payload for a table action: columns, clauses and bound parameters.

    DataAction is a passive holder. It does not check that placeholders used in
    a condition have a matching parameter; the actions validate structure and
    the database reports anything else.

    Usage:
        data = DataAction()
        data.add_column("roleId")
        data.add_property("WHERE", "userId = :userId", {"userId": 1})
        table.execute("select", data)
    """
    columns: list[str] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)
    # parameter name -> scalar value
    parameters: dict[str, Any] = field(default_factory=dict)

    def add_column(self, name: str) -> "DataAction":
        self.columns.append(name)
        return self

    def add_property(
        self,
        type: str,
        condition: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> "DataAction":
        """
        Append a clause. Clause order is kept because SQL clause order matters.
        Parameters are merged; a later value for the same key wins.
        """
        self.properties.append(Property(type, condition))
        if parameters:
            self.parameters.update(parameters)
        return self

    def add_parameters(self, parameters: Mapping[str, Any]) -> "DataAction":
        self.parameters.update(parameters)
        return self

    def get_columns(self) -> list[str]:
        return list(self.columns)

    def get_properties(self) -> list[Property]:
        return list(self.properties)

    def get_parameters(self) -> dict[str, Any]:
        return dict(self.parameters)
