"""
Helpers for building parameterized SQL fragments.

Placeholders are positional: the i-th bound value (1-based) is rendered as the
bind name ``:p<i>`` and supplied through :func:`positional_params`. Column
names come from the caller's override table and are always double-quoted;
values are never written into the statement text.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from database.exceptions import ValidationError


def placeholder(index: int) -> str:
    """Return the bind placeholder for the ``index``-th (1-based) value."""
    return f":p{index}"


def positional_params(values: Sequence[Any]) -> Dict[str, Any]:
    """Map an ordered value list onto the names produced by :func:`placeholder`."""
    return {f"p{i}": value for i, value in enumerate(values, start=1)}


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def column_for(field: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """
    Translate a domain field name into its physical column name.

    Args:
        field: Domain field name (e.g. ``companyHandle``).
        overrides: Domain name -> column name table.

    Returns:
        The override when one exists, otherwise ``field`` unchanged.
    """
    if overrides and field in overrides:
        return overrides[field]
    return field


def sql_for_partial_update(
    data: Mapping[str, Any],
    overrides: Optional[Mapping[str, str]] = None
) -> Tuple[List[str], List[Any]]:
    """
    Build the SET clause pieces for a partial update.

    Only the fields present in ``data`` are touched. The returned lists are
    parallel and follow the iteration order of ``data``:

        >>> sql_for_partial_update({'firstName': 'Aliya', 'age': 32}, {'firstName': 'first_name'})
        (['"first_name" = :p1', '"age" = :p2'], ['Aliya', 32])

    Args:
        data: Field name -> new value.
        overrides: Domain name -> column name table.

    Returns:
        ``(clauses, values)``; join the clauses with ``", "`` after ``SET``.

    Raises:
        ValidationError: If ``data`` is empty.
    """
    keys = list(data.keys())
    if not keys:
        raise ValidationError("No data")

    clauses = [
        f"{quote_identifier(column_for(key, overrides))} = {placeholder(i)}"
        for i, key in enumerate(keys, start=1)
    ]
    values = [data[key] for key in keys]
    return clauses, values
