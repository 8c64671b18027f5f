"""API module for DTcentre.

Thin adapters over QueryService, one per hosting shape:
- app: long-running FastAPI server
- function: one-shot serverless handler
- tools: MCP tool registration (stdio or SSE)
Forbidden: query building, aggregation
"""
