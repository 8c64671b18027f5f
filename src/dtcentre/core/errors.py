"""Error taxonomy for query operations.

Every adapter maps these to the same status codes through status_for().
"""

from __future__ import annotations

INTERNAL_ERROR_MESSAGE = "Internal server error"


class QueryError(Exception):
    """Base class for errors reported back to the caller."""

    status_code = 400


class InvalidArgument(QueryError):
    """A required parameter is missing or empty."""


class UpstreamQueryError(QueryError):
    """The remote store rejected or failed the query.

    The message is the store's own and is forwarded verbatim.
    """


def status_for(exc: Exception) -> int:
    """Return the HTTP status code used to report an exception."""
    if isinstance(exc, QueryError):
        return exc.status_code
    return 500


def message_for(exc: Exception) -> str:
    """Return the caller-facing message for an exception.

    Unexpected exceptions get a generic message so internals do not leak.
    """
    if isinstance(exc, QueryError):
        return str(exc)
    return INTERNAL_ERROR_MESSAGE
