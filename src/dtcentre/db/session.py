"""Database engine management.

Provides cached SQLAlchemy engines with an upstream timeout applied,
so a slow remote store cannot hold a request open indefinitely.
"""

from __future__ import annotations

import threading
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

# Default upstream timeout in seconds
DEFAULT_TIMEOUT = 10.0

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}
_engine_cache_lock = threading.Lock()


def _connect_args(backend: str, timeout: float) -> dict:
    """Driver arguments bounding connection and statement time."""
    if backend == "sqlite":
        return {"check_same_thread": False, "timeout": timeout}
    if backend == "postgresql":
        return {
            "connect_timeout": max(int(timeout), 1),
            "options": f"-c statement_timeout={int(timeout * 1000)}",
        }
    return {}


def get_engine(database_url: str, timeout: float = DEFAULT_TIMEOUT) -> Engine:
    """Get SQLAlchemy engine for the remote store.

    Engines are cached by URL and timeout to enable connection pooling.
    Subsequent calls with the same arguments return the cached engine.

    In-memory SQLite uses StaticPool so every thread sees the same
    database; file-based SQLite gets its parent directory created.

    Args:
        database_url: SQLAlchemy database URL.
        timeout: Upstream timeout in seconds.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    cache_key = f"{database_url}|{timeout}"

    with _engine_cache_lock:
        if cache_key not in _engine_cache:
            _engine_cache[cache_key] = _create_engine(database_url, timeout)
        return _engine_cache[cache_key]


def _create_engine(database_url: str, timeout: float) -> Engine:
    url = make_url(database_url)
    backend = url.get_backend_name()
    kwargs: dict = {}

    if backend == "sqlite":
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs["pool_pre_ping"] = True

    return create_engine(
        url,
        echo=False,
        connect_args=_connect_args(backend, timeout),
        **kwargs,
    )
