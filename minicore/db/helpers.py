from __future__ import annotations

import re
from typing import Iterable

from .data_action import Property

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

# Clause keywords a DataAction property may carry, in upper case.
ALLOWED_CLAUSE_TYPES = frozenset(
    {
        "WHERE",
        "GROUP BY",
        "HAVING",
        "ORDER BY",
        "LIMIT",
        "OFFSET",
        "ON DUPLICATE KEY UPDATE",
        "RETURNING",
    }
)

_FORBIDDEN_FRAGMENTS = (";", "--", "/*")


def validate_identifier(name: str, identifier_type: str = "identifier") -> str:
    """
    Validate that an identifier (table/column name) is safe for SQL interpolation.

    ⚠️ SECURITY CONTRACT ⚠️
    This checks format only. Identifiers MUST still be trusted: hardcoded in a
    Table subclass or checked at application boundaries, never taken directly
    from request input.

    Args:
        name: The identifier to validate
        identifier_type: Description of the identifier (for error messages)

    Returns:
        The validated identifier (unchanged if valid)

    Raises:
        TypeError: If identifier is not a string
        ValueError: If identifier contains unsafe characters or is invalid

    Example:
        >>> validate_identifier("user_roles", "table")
        'user_roles'
        >>> validate_identifier("'; DROP TABLE--", "table")
        ValueError: Invalid table "'; DROP TABLE--": ...
    """
    if not isinstance(name, str):
        raise TypeError(f"{identifier_type} must be a string, got {type(name).__name__}")

    if not name:
        raise ValueError(f"{identifier_type} cannot be empty")

    if not _IDENTIFIER_RE.match(name):
        raise ValueError(
            f"Invalid {identifier_type} {name!r}: "
            "must start with letter/underscore and contain only alphanumeric characters and underscores"
        )

    if len(name) > 64:
        raise ValueError(f"{identifier_type} {name!r} exceeds the 64-character limit")

    return name


def validate_fragment(fragment: str, fragment_type: str = "fragment") -> str:
    """
    Reject SQL fragments that could terminate or comment out the statement.

    Conditions and column definitions are concatenated verbatim, so values
    belong in bound parameters; this only closes the obvious escape hatches.
    """
    if not isinstance(fragment, str):
        raise TypeError(f"{fragment_type} must be a string, got {type(fragment).__name__}")

    for token in _FORBIDDEN_FRAGMENTS:
        if token in fragment:
            raise ValueError(f"{fragment_type} {fragment!r} contains forbidden token {token!r}")

    return fragment


def validate_clause_type(clause_type: str) -> str:
    """Normalize a clause keyword and check it against ALLOWED_CLAUSE_TYPES."""
    if not isinstance(clause_type, str):
        raise TypeError(f"clause type must be a string, got {type(clause_type).__name__}")

    normalized = " ".join(clause_type.split()).upper()
    if normalized not in ALLOWED_CLAUSE_TYPES:
        raise ValueError(
            f"Unsupported clause type {clause_type!r}; "
            f"expected one of {sorted(ALLOWED_CLAUSE_TYPES)}"
        )
    return normalized


def render_properties(properties: Iterable[Property]) -> str:
    """Render properties as "{type} {condition}" joined by spaces, in order."""
    parts = []
    for prop in properties:
        clause_type = validate_clause_type(prop.type)
        condition = validate_fragment(prop.condition, "condition")
        parts.append(f"{clause_type} {condition}")
    return " ".join(parts)


def append_properties(base_sql: str, properties: Iterable[Property]) -> str:
    clauses = render_properties(properties)
    if not clauses:
        return base_sql
    return f"{base_sql} {clauses}"
