"""Process-wide configuration.

Built once at startup from the environment and passed to the app and
handler factories. Never mutated afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_DATABASE_URL = "sqlite:///data/dtcentre.db"


@dataclass(frozen=True)
class Settings:
    """Gateway configuration."""

    database_url: str = DEFAULT_DATABASE_URL
    db_schema: str | None = None
    date_column: str = "date_infraction"
    agent_column: str = "agent_nom"
    default_limit: int = 100
    max_limit: int | None = None
    query_timeout: float = 10.0
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ

        max_limit = env.get("DTCENTRE_MAX_LIMIT")

        return cls(
            database_url=env.get("DTCENTRE_DATABASE_URL")
            or env.get("DATABASE_URL")
            or DEFAULT_DATABASE_URL,
            db_schema=env.get("DTCENTRE_DB_SCHEMA") or None,
            date_column=env.get("DTCENTRE_DATE_COLUMN", cls.date_column),
            agent_column=env.get("DTCENTRE_AGENT_COLUMN", cls.agent_column),
            default_limit=int(env.get("DTCENTRE_DEFAULT_LIMIT", cls.default_limit)),
            max_limit=int(max_limit) if max_limit else None,
            query_timeout=float(env.get("DTCENTRE_QUERY_TIMEOUT", cls.query_timeout)),
            host=env.get("HOST", cls.host),
            port=int(env.get("PORT", cls.port)),
            log_level=env.get("DTCENTRE_LOG_LEVEL", cls.log_level).upper(),
        )
