"""Query service shared by every adapter.

Exposes the two read operations of the gateway. Adapters translate
their transport's request into calls on QueryService and its results
or errors back into their transport's response.
"""

from __future__ import annotations

import logging
from typing import Any

from dtcentre.aggregation.stats import aggregate_rows
from dtcentre.core.config import Settings
from dtcentre.core.errors import InvalidArgument
from dtcentre.models.domain import AggregationRequest, LookupRequest, RowQuery
from dtcentre.models.types import RecordsResponse, StatsResponse
from dtcentre.stores.base import RowStore

logger = logging.getLogger(__name__)

# Lookups above this many rows are logged since no cap applies by default
LARGE_LIMIT_WARNING = 1000


class QueryService:
    """Stats and lookup operations over a row store."""

    def __init__(self, store: RowStore, settings: Settings | None = None):
        """Initialize service.

        Args:
            store: Store the rows are read from.
            settings: Column names and limits. Defaults to Settings().
        """
        self.store = store
        self.settings = settings or Settings()

    def compute_stats(
        self,
        table: str | None,
        column: str | None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> StatsResponse:
        """Count rows of a table per value of one column.

        Args:
            table: Table to read.
            column: Grouping column.
            from_date: Inclusive lower bound on the date column.
            to_date: Inclusive upper bound on the date column.

        Returns:
            StatsResponse with counts sorted by total, highest first.

        Raises:
            InvalidArgument: If table or column is missing.
            UpstreamQueryError: If the store fails the query.
        """
        if not table or not column:
            raise InvalidArgument("Missing required parameters: table, column")

        request = AggregationRequest(
            table=table,
            column=column,
            from_date=from_date or None,
            to_date=to_date or None,
        )
        date_column = self.settings.date_column

        rows = self.store.fetch_rows(
            RowQuery(
                table=request.table,
                columns=tuple(dict.fromkeys((request.column, date_column))),
                range_column=date_column,
                gte=request.from_date,
                lte=request.to_date,
            )
        )
        logger.debug(f"get_stats {request.table}.{request.column}: {len(rows)} rows")

        return StatsResponse(
            table=request.table,
            column=request.column,
            from_date=request.from_date,
            to_date=request.to_date,
            stats=aggregate_rows(rows, request.column),
        )

    def get_records_for_agent(
        self,
        table: str | None,
        agent: str | None,
        limit: Any = None,
    ) -> RecordsResponse:
        """Fetch the rows recorded by one agent.

        Args:
            table: Table to read.
            agent: Value the agent column must equal.
            limit: Maximum rows. Absent or non-numeric values fall back to
                the configured default; negative values are clamped to 0.

        Returns:
            RecordsResponse with the rows exactly as the store returned them.

        Raises:
            InvalidArgument: If table or agent is missing.
            UpstreamQueryError: If the store fails the query.
        """
        if not table or not agent:
            raise InvalidArgument("Missing required parameters: table, agent")

        request = LookupRequest(table=table, agent=agent, limit=self.resolve_limit(limit))

        rows = self.store.fetch_rows(
            RowQuery(
                table=request.table,
                equals={self.settings.agent_column: request.agent},
                limit=request.limit,
            )
        )
        logger.debug(f"get_pv {request.table} agent={request.agent}: {len(rows)} rows")

        return RecordsResponse(
            table=request.table,
            agent=request.agent,
            count=len(rows),
            data=rows,
        )

    def resolve_limit(self, limit: Any) -> int:
        """Coerce a caller-supplied limit to a row count."""
        default = self.settings.default_limit

        if limit is None or isinstance(limit, bool):
            return default
        try:
            value = int(limit)
        except (TypeError, ValueError):
            try:
                value = int(float(limit))
            except (TypeError, ValueError, OverflowError):
                return default

        # Negative LIMIT means "no limit" on some backends
        if value < 0:
            return 0

        max_limit = self.settings.max_limit
        if max_limit is not None and value > max_limit:
            logger.info(f"Limit {value} capped to {max_limit}")
            return max_limit
        if value > LARGE_LIMIT_WARNING:
            logger.warning(f"Uncapped lookup limit requested: {value}")
        return value
