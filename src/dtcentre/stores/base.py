"""Base row store interface.

The query service depends on this narrow capability only:
select columns, equality filters, one inclusive range filter, row limit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dtcentre.models.domain import Row, RowQuery


class RowStore(ABC):
    """Abstract base class for read-only row stores.

    Stores must NOT:
    - Write to the underlying tables
    - Aggregate or reshape rows
    - Retry failed queries
    """

    @abstractmethod
    def fetch_rows(self, query: RowQuery) -> list[Row]:
        """Run a read query.

        Args:
            query: Table, projection, filters and limit to apply.

        Returns:
            Matching rows in store order.

        Raises:
            UpstreamQueryError: If the store rejects or fails the query.
        """
        pass
