"""Records API endpoint.

GET /get_pv - Reports recorded by one agent
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dtcentre.api.app import get_query_service
from dtcentre.core.service import QueryService
from dtcentre.models.types import RecordsResponse

router = APIRouter()


@router.get("/get_pv", response_model=RecordsResponse)
def get_pv(
    table: str | None = None,
    agent: str | None = None,
    limit: str | None = None,
    service: QueryService = Depends(get_query_service),
) -> RecordsResponse:
    """Get the rows of a table recorded by an agent.

    limit is taken as text so malformed values fall back to the default
    instead of failing validation.
    """
    return service.get_records_for_agent(table, agent, limit)
