"""Stats API endpoint.

GET /get_stats - Row counts per value of one column
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from dtcentre.api.app import get_query_service
from dtcentre.core.service import QueryService
from dtcentre.models.types import StatsResponse

router = APIRouter()


@router.get("/get_stats", response_model=StatsResponse)
def get_stats(
    table: str | None = None,
    column: str | None = None,
    from_date: str | None = Query(default=None, alias="from"),
    to_date: str | None = Query(default=None, alias="to"),
    service: QueryService = Depends(get_query_service),
) -> StatsResponse:
    """Count rows of a table grouped by one column.

    Args:
        table: Table to read (required).
        column: Grouping column (required).
        from_date: Inclusive lower date bound.
        to_date: Inclusive upper date bound.
        service: Query service (injected).

    Returns:
        StatsResponse sorted by total, highest first.
    """
    return service.compute_stats(table, column, from_date, to_date)
