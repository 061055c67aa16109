"""SQL fragment helpers for parameterized queries.

Column names are interpolated into the SQL text, values are always bound.
Callers must only pass column names that come from a hardcoded field map or
a schema-restricted key set, never raw user input.
"""

from typing import Any, Mapping, NamedTuple

from jobly.errors import BadRequestError


class PartialUpdate(NamedTuple):
    """SET clause body plus its bind values ($1 <-> values[0])."""

    set_cols: str
    values: list[Any]


def sql_for_partial_update(
    data: Mapping[str, Any],
    field_map: Mapping[str, str],
) -> PartialUpdate:
    """Build the SET clause of a partial UPDATE.

    Args:
        data: Logical field name -> new value, in the order to bind them
        field_map: Logical field name -> storage column name. Fields missing
            from the map use their logical name as the column name.

    Returns:
        PartialUpdate, e.g. ``('"first_name"=$1, "age"=$2', ["Aliya", 32])``

    Raises:
        BadRequestError: If data is empty
    """
    keys = list(data)
    if not keys:
        raise BadRequestError("No data")

    cols = [
        f'"{field_map.get(key, key)}"=${idx}'
        for idx, key in enumerate(keys, start=1)
    ]
    return PartialUpdate(", ".join(cols), [data[key] for key in keys])


class WhereClause:
    """Collects optional predicates and renders them in one pass.

    Each predicate is a template with one ``{}`` slot per bound value.
    Placeholders are numbered only at render time, so they stay contiguous
    no matter which predicates were added.
    """

    def __init__(self, first_placeholder: int = 1) -> None:
        self.first_placeholder = first_placeholder
        self._predicates: list[tuple[str, tuple[Any, ...]]] = []

    def add(self, template: str, *values: Any) -> "WhereClause":
        self._predicates.append((template, values))
        return self

    def __len__(self) -> int:
        return len(self._predicates)

    def render(self) -> tuple[str, list[Any]]:
        """Return ``("WHERE a AND b", values)``, or ``("", [])`` when empty."""
        parts: list[str] = []
        values: list[Any] = []
        for template, bound in self._predicates:
            placeholders = []
            for value in bound:
                values.append(value)
                placeholders.append(f"${self.first_placeholder + len(values) - 1}")
            parts.append(template.format(*placeholders))

        if not parts:
            return "", []
        return "WHERE " + " AND ".join(parts), values
