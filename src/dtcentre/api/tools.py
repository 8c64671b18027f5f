"""MCP tool registration.

Exposes get_stats and get_pv as MCP tools through FastMCP. The same
server runs over stdio for local clients or SSE for remote ones.
"""

from __future__ import annotations

from typing import Any, Callable

from mcp.server.fastmcp import FastMCP

from dtcentre.core.config import Settings
from dtcentre.core.service import QueryService

SERVER_NAME = "DTcentre"


def build_tools(service: QueryService) -> list[Callable[..., dict[str, Any]]]:
    """Create the tool functions bound to a query service.

    Tool errors propagate as exceptions; the MCP SDK reports them to the
    client as failed tool calls.
    """

    def get_stats(
        table: str,
        column: str,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> dict[str, Any]:
        """Count the reports of a pv_* table per value of one column, highest first.

        from_date and to_date are optional inclusive ISO dates (YYYY-MM-DD)
        applied to the offence date.
        """
        result = service.compute_stats(table, column, from_date, to_date)
        return result.model_dump(mode="json", by_alias=True)

    def get_pv(table: str, agent: str, limit: int | None = None) -> dict[str, Any]:
        """Get the reports of a pv_* table recorded by one agent, at most `limit` rows.

        Without a limit the configured default (100 unless changed) applies.
        """
        result = service.get_records_for_agent(table, agent, limit)
        return result.model_dump(mode="json", by_alias=True)

    return [get_stats, get_pv]


def create_mcp_server(service: QueryService, settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server with the query tools registered.

    Args:
        service: Query service the tools call.
        settings: Optional configuration for the SSE bind address.

    Returns:
        FastMCP server; call run(transport=...) to serve it.
    """
    settings = settings or service.settings
    mcp = FastMCP(SERVER_NAME, host=settings.host, port=settings.port)
    for tool in build_tools(service):
        mcp.add_tool(tool)
    return mcp
