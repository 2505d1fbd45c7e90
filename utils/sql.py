"""
utils/sql.py
------------
Builds the SET clause of a partial UPDATE from a mapping of field names
to new values, and validates patches against a fixed table of updatable
fields per entity.
"""

from decimal import Decimal
from typing import Any, Mapping, NamedTuple

from utils.errors import InvalidInputError


class SetClause(NamedTuple):
    """Result of `sql_for_partial_update`."""
    set_cols: str
    columns: list[str]
    values: list[Any]


class UpdateField(NamedTuple):
    """An updatable field: its column, accepted value types and nullability."""
    column: str
    types: tuple
    nullable: bool = False


def sql_for_partial_update(
    data: Mapping[str, Any], column_map: Mapping[str, str]
) -> SetClause:
    """
    Generate the SET clause of a partial update.

    Every value is bound through a positional ``%s`` placeholder, so the
    n-th fragment is bound to ``values[n - 1]``.

        {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        => '"first_name"=%s, "age"=%s', ["Aliya", 32]

    Args:
        data: Field name -> new value. Must not be empty.
        column_map: Field name -> column name. Fields not listed map to
            themselves.

    Returns:
        A SetClause with the joined fragments, the resolved columns and
        the values, all in the iteration order of ``data``.

    Raises:
        InvalidInputError: If ``data`` is empty.
    """
    if not data:
        raise InvalidInputError("No data")

    columns = [column_map.get(key, key) for key in data]
    set_cols = ", ".join(f'"{col}"=%s' for col in columns)
    return SetClause(set_cols, columns, list(data.values()))


def column_map(fields: Mapping[str, UpdateField]) -> dict[str, str]:
    """Alias map (field name -> column) for the fields whose names differ."""
    return {name: f.column for name, f in fields.items() if f.column != name}


def validate_patch(
    patch: Mapping[str, Any], fields: Mapping[str, UpdateField]
) -> dict[str, Any]:
    """
    Check a patch against an entity's updatable fields.

    Decimal fields given as floats are converted through ``str`` so that
    0.1 stays 0.1 once it reaches a NUMERIC column.

    Returns:
        A new dict holding the patch in its original order.

    Raises:
        InvalidInputError: Empty patch, unknown field, wrong type, or None
            for a non-nullable field.
    """
    if not patch:
        raise InvalidInputError("No data")

    clean: dict[str, Any] = {}
    for name, value in patch.items():
        field = fields.get(name)
        if field is None:
            raise InvalidInputError(f"Field cannot be updated: {name}")
        if value is None:
            if not field.nullable:
                raise InvalidInputError(f"Field cannot be null: {name}")
        elif isinstance(value, bool) or not isinstance(value, field.types):
            raise InvalidInputError(f"Invalid value for {name}: {value!r}")
        elif Decimal in field.types and isinstance(value, float):
            value = Decimal(str(value))
        clean[name] = value
    return clean
