"""SQLAlchemy-backed row store.

Reads any table reachable through a SQLAlchemy engine. Tables are
reflected per query so no schema is declared up front; store failures
are converted to UpstreamQueryError carrying the driver's message.
"""

from __future__ import annotations

import logging

from sqlalchemy import Column, Engine, MetaData, Table, literal, select
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

from dtcentre.core.errors import UpstreamQueryError
from dtcentre.models.domain import Row, RowQuery
from dtcentre.stores.base import RowStore

logger = logging.getLogger(__name__)


class SqlRowStore(RowStore):
    """Row store reading through SQLAlchemy Core."""

    def __init__(self, engine: Engine, schema: str | None = None):
        """Initialize store.

        Args:
            engine: Engine connected to the remote database.
            schema: Optional schema holding the tables.
        """
        self.engine = engine
        self.schema = schema

    def fetch_rows(self, query: RowQuery) -> list[Row]:
        try:
            with self.engine.connect() as conn:
                table = Table(query.table, MetaData(), schema=self.schema, autoload_with=conn)
                stmt = self._build_select(table, query)
                rows = [dict(row) for row in conn.execute(stmt).mappings()]
        except NoSuchTableError as e:
            raise UpstreamQueryError(f'relation "{query.table}" does not exist') from e
        except SQLAlchemyError as e:
            orig = getattr(e, "orig", None)
            raise UpstreamQueryError(str(orig) if orig is not None else str(e)) from e

        logger.debug(f"Fetched {len(rows)} rows from {query.table}")
        return rows

    def _build_select(self, table: Table, query: RowQuery):
        """Translate a RowQuery into a SELECT statement."""
        if query.columns is None:
            stmt = select(table)
        else:
            stmt = select(*[_column(table, name) for name in query.columns])

        for name, value in query.equals.items():
            stmt = stmt.where(_column(table, name) == literal(value))

        if query.range_column is not None:
            range_col = _column(table, query.range_column)
            # Bounds bind as plain literals so date columns accept ISO strings
            if query.gte is not None:
                stmt = stmt.where(range_col >= literal(query.gte))
            if query.lte is not None:
                stmt = stmt.where(range_col <= literal(query.lte))

        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        return stmt


def _column(table: Table, name: str) -> Column:
    if name not in table.c:
        raise UpstreamQueryError(f"column {table.name}.{name} does not exist")
    return table.c[name]
