"""Pydantic models for the DTcentre API.

Response bodies shared by the HTTP routes, the function handler
and the MCP tools.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StatEntry(BaseModel):
    """Number of rows sharing one value of the grouping column."""

    label: str
    total: int


class StatsResponse(BaseModel):
    """Body of a successful get_stats call."""

    model_config = ConfigDict(populate_by_name=True)

    table: str
    column: str
    from_date: str | None = Field(default=None, alias="from")
    to_date: str | None = Field(default=None, alias="to")
    stats: list[StatEntry]


class RecordsResponse(BaseModel):
    """Body of a successful get_pv call."""

    table: str
    agent: str
    count: int
    data: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    """Body of any failed call."""

    error: str


class ServiceStatus(BaseModel):
    """Body of the root liveness endpoint."""

    ok: bool
    service: str
