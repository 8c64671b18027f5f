"""Shared pytest fixtures for dtcentre tests."""

import pytest
from sqlalchemy import MetaData, create_engine
from sqlalchemy.pool import StaticPool

from dtcentre.core.config import Settings
from dtcentre.core.service import QueryService
from dtcentre.db.schema import pv_table
from dtcentre.stores.memory import InMemoryRowStore
from dtcentre.stores.sql import SqlRowStore

# Dupont has 5 reports, Martin 2, Bernard 1
SAMPLE_ROWS = [
    {"id": 1, "agent_nom": "Dupont", "date_infraction": "2024-01-03",
     "type_infraction": "Stationnement", "commune": "Orléans", "montant": 35},
    {"id": 2, "agent_nom": "Dupont", "date_infraction": "2024-01-17",
     "type_infraction": "Vitesse", "commune": "Blois", "montant": 135},
    {"id": 3, "agent_nom": "Martin", "date_infraction": "2024-02-02",
     "type_infraction": "Stationnement", "commune": "Tours", "montant": 35},
    {"id": 4, "agent_nom": "Dupont", "date_infraction": "2024-02-11",
     "type_infraction": "Feu rouge", "commune": "Orléans", "montant": 135},
    {"id": 5, "agent_nom": "Bernard", "date_infraction": "2024-02-20",
     "type_infraction": "Stationnement", "commune": None, "montant": 35},
    {"id": 6, "agent_nom": "Martin", "date_infraction": "2024-03-05",
     "type_infraction": "Vitesse", "commune": "Chartres", "montant": 68},
    {"id": 7, "agent_nom": "Dupont", "date_infraction": "2024-03-19",
     "type_infraction": "Téléphone", "commune": "Tours", "montant": 135},
    {"id": 8, "agent_nom": "Dupont", "date_infraction": "2024-04-01",
     "type_infraction": None, "commune": "Bourges", "montant": None},
]


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine holding a seeded pv_rd table."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata = MetaData()
    table = pv_table("pv_rd", metadata)
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(table.insert(), SAMPLE_ROWS)
    return engine


@pytest.fixture
def sql_store(engine):
    """SqlRowStore over the seeded engine."""
    return SqlRowStore(engine)


@pytest.fixture
def memory_store():
    """InMemoryRowStore holding the sample rows."""
    return InMemoryRowStore({"pv_rd": [dict(row) for row in SAMPLE_ROWS]})


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings()


@pytest.fixture
def service(memory_store, settings):
    """QueryService over the in-memory store."""
    return QueryService(memory_store, settings)
