"""In-memory row store for demo/testing.

Serves rows from plain dicts so the gateway can be exercised
without a database. Mirrors the filtering semantics of SqlRowStore:
NULL never satisfies a filter, and unknown tables fail upstream.
"""

from __future__ import annotations

from typing import Any

from dtcentre.core.errors import UpstreamQueryError
from dtcentre.models.domain import Row, RowQuery
from dtcentre.stores.base import RowStore


class InMemoryRowStore(RowStore):
    """Row store backed by a mapping of table name to rows.

    Every query received is appended to `queries` so callers can check
    whether, and how, the store was reached.
    """

    def __init__(self, tables: dict[str, list[Row]] | None = None):
        """Initialize store.

        Args:
            tables: Table name -> rows, in the order they are served.
        """
        self.tables = tables or {}
        self.queries: list[RowQuery] = []

    def fetch_rows(self, query: RowQuery) -> list[Row]:
        self.queries.append(query)

        if query.table not in self.tables:
            raise UpstreamQueryError(f'relation "{query.table}" does not exist')

        rows = []
        for row in self.tables[query.table]:
            if query.limit is not None and len(rows) >= query.limit:
                break
            if self._matches(row, query):
                rows.append(self._project(row, query.columns))
        return rows

    @staticmethod
    def _matches(row: Row, query: RowQuery) -> bool:
        for column, expected in query.equals.items():
            if row.get(column) is None or row[column] != expected:
                return False

        if query.range_column is not None:
            value = row.get(query.range_column)
            if query.gte is not None and (value is None or _as_text(value) < query.gte):
                return False
            if query.lte is not None and (value is None or _as_text(value) > query.lte):
                return False

        return True

    @staticmethod
    def _project(row: Row, columns: tuple[str, ...] | None) -> Row:
        if columns is None:
            return dict(row)
        # Columns missing from the row stay absent
        return {c: row[c] for c in columns if c in row}


def _as_text(value: Any) -> str:
    # ISO dates compare correctly as strings
    return value.isoformat() if hasattr(value, "isoformat") else str(value)
