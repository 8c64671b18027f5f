"""Serverless function handler.

One-shot invocation shape: an event dict comes in, a
{"statusCode", "headers", "body"} dict goes out. The last path
segment selects the operation, so the handler works behind any
function prefix (e.g. /.netlify/functions/api/get_stats).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from pydantic import BaseModel

from dtcentre.api.app import SERVICE_NAME, build_service
from dtcentre.core.config import Settings
from dtcentre.core.errors import message_for, status_for
from dtcentre.core.service import QueryService
from dtcentre.models.types import ErrorResponse, ServiceStatus
from dtcentre.stores.base import RowStore

logger = logging.getLogger(__name__)

Handler = Callable[..., dict[str, Any]]

JSON_HEADERS = {"Content-Type": "application/json"}


def create_response(status_code: int, body: BaseModel | dict) -> dict[str, Any]:
    """Build a function response with a JSON body."""
    if isinstance(body, BaseModel):
        payload = body.model_dump_json(by_alias=True)
    else:
        payload = json.dumps(body)
    return {"statusCode": status_code, "headers": dict(JSON_HEADERS), "body": payload}


def _method(event: dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method") or "GET"
    return method.upper()


def _operation(event: dict[str, Any]) -> str:
    path = event.get("path") or event.get("rawPath") or "/"
    return path.rstrip("/").rsplit("/", 1)[-1]


def _dispatch(service: QueryService, operation: str, params: dict[str, Any]) -> dict[str, Any]:
    if operation in ("", "api"):
        return create_response(200, ServiceStatus(ok=True, service=SERVICE_NAME))
    if operation == "health":
        return create_response(200, {"status": "ok"})
    if operation == "get_stats":
        result = service.compute_stats(
            params.get("table"),
            params.get("column"),
            params.get("from"),
            params.get("to"),
        )
        return create_response(200, result)
    if operation == "get_pv":
        result = service.get_records_for_agent(
            params.get("table"),
            params.get("agent"),
            params.get("limit"),
        )
        return create_response(200, result)
    return create_response(404, ErrorResponse(error=f"Unknown route: {operation}"))


def create_handler(settings: Settings | None = None, store: RowStore | None = None) -> Handler:
    """Create a function handler bound to one query service.

    Args:
        settings: Optional configuration. Defaults to the environment.
        store: Optional row store. Defaults to the configured database.

    Returns:
        Callable taking (event, context) and returning a response dict.
    """
    service = build_service(settings or Settings.from_env(), store)

    def handle(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
        if _method(event) != "GET":
            return create_response(405, ErrorResponse(error="Method not allowed"))

        operation = _operation(event)
        params = event.get("queryStringParameters") or {}

        try:
            return _dispatch(service, operation, params)
        except Exception as e:
            if status_for(e) >= 500:
                logger.exception(f"Unhandled error in {operation}")
            return create_response(status_for(e), ErrorResponse(error=message_for(e)))

    return handle


_default_handler: Handler | None = None


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Platform entry point.

    The service is built from the environment on the first invocation
    and reused while the function instance stays warm.
    """
    global _default_handler
    if _default_handler is None:
        _default_handler = create_handler()
    return _default_handler(event, context)
