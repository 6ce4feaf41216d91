"""Claro Inventory - List-view column descriptors and multi-value filtering.

A column is either a FieldColumn (reads a model attribute) or a
ComputedColumn (derives the cell from the whole row).
"""
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel

EMPTY_CELL = "N/A"


class FieldColumn(BaseModel):
    model_config = {"frozen": True}

    header: str
    field: str

    @property
    def key(self) -> str:
        return self.field


class ComputedColumn(BaseModel):
    model_config = {"frozen": True}

    header: str
    key: str
    compute: Callable[[Any], Any]


Column = FieldColumn | ComputedColumn


def cell_value(column: Column, row: BaseModel) -> Any:
    if isinstance(column, FieldColumn):
        return getattr(row, column.field)
    if isinstance(column, ComputedColumn):
        return column.compute(row)
    raise TypeError(f"Unsupported column: {column!r}")


def normalize_cell(value: Any) -> str:
    """String form used for filtering; blanks collapse to N/A."""
    if value is None or value == "":
        return EMPTY_CELL
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _column_map(columns: Sequence[Column]) -> dict[str, Column]:
    return {c.key: c for c in columns}


def filter_rows(
    rows: Iterable[BaseModel],
    columns: Sequence[Column],
    active_filters: Mapping[str, Sequence[str]],
) -> list[BaseModel]:
    """Keep rows whose cell is among the selected values for every active filter."""
    by_key = _column_map(columns)
    selected = [
        (by_key[key], set(values))
        for key, values in active_filters.items()
        if values and key in by_key
    ]
    return [
        row for row in rows
        if all(normalize_cell(cell_value(col, row)) in values for col, values in selected)
    ]


def filter_options(
    rows: Iterable[BaseModel],
    columns: Sequence[Column],
    filterable: Sequence[str],
) -> dict[str, list[str]]:
    by_key = _column_map(columns)
    rows = list(rows)
    return {
        key: sorted({normalize_cell(cell_value(by_key[key], row)) for row in rows})
        for key in filterable
        if key in by_key
    }


def render_rows(rows: Iterable[BaseModel], columns: Sequence[Column]) -> list[dict[str, Any]]:
    return [{c.key: cell_value(c, row) for c in columns} for row in rows]


def headers(columns: Sequence[Column]) -> dict[str, str]:
    return {c.key: c.header for c in columns}


def table_listing(
    rows: Iterable[BaseModel],
    columns: Sequence[Column],
    filterable: Sequence[str],
    active_filters: Mapping[str, Sequence[str] | None],
) -> tuple[list[dict[str, Any]], dict[str, Any]]:
    """Filter and render a list view. Options are computed over the unfiltered rows."""
    rows = list(rows)
    active = {k: v for k, v in active_filters.items() if v}
    visible = filter_rows(rows, columns, active)
    meta = {
        "total_count": len(visible),
        "headers": headers(columns),
        "filter_options": filter_options(rows, columns, filterable),
    }
    return render_rows(visible, columns), meta
