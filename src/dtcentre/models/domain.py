"""Domain models for DTcentre.

Plain dataclasses describing requests against the row store.
Independent of SQLAlchemy so stores can be swapped in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# A row as returned by the store: column name -> scalar value.
Row = dict[str, Any]


# ============================================================================
# Requests
# ============================================================================


@dataclass(frozen=True)
class AggregationRequest:
    """Count rows of a table grouped by one column."""

    table: str
    column: str
    from_date: str | None = None
    to_date: str | None = None


@dataclass(frozen=True)
class LookupRequest:
    """Fetch the rows recorded by one agent."""

    table: str
    agent: str
    limit: int = 100


# ============================================================================
# Store query
# ============================================================================


@dataclass(frozen=True)
class RowQuery:
    """Generic read query understood by every RowStore.

    Attributes:
        table: Table to read.
        columns: Columns to select. None selects every column.
        equals: Equality filters, column -> value.
        range_column: Column the gte/lte bounds apply to.
        gte: Inclusive lower bound, or None for unbounded.
        lte: Inclusive upper bound, or None for unbounded.
        limit: Maximum number of rows, or None for no cap.
    """

    table: str
    columns: tuple[str, ...] | None = None
    equals: dict[str, Any] = field(default_factory=dict)
    range_column: str | None = None
    gte: Any = None
    lte: Any = None
    limit: int | None = None
