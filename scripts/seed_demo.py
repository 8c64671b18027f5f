#!/usr/bin/env python3
"""Seed a local demo database with sample reports.

Creates a SQLite database holding a pv_rd table so the gateway can be
tried without the remote store.

Usage:
    python scripts/seed_demo.py
    DTCENTRE_DATABASE_URL=sqlite:///demo.db dtcentre serve

Running it again replaces the demo rows.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from sqlalchemy import MetaData  # noqa: E402

from dtcentre.db.schema import pv_table  # noqa: E402
from dtcentre.db.session import get_engine  # noqa: E402

# Constants
DEMO_DB_PATH = PROJECT_ROOT / "demo.db"
DEMO_TABLE = "pv_rd"

DEMO_ROWS = [
    ("Dupont", "2024-01-03", "Stationnement gênant", "Orléans", 35),
    ("Dupont", "2024-01-17", "Excès de vitesse", "Blois", 135),
    ("Martin", "2024-02-02", "Stationnement gênant", "Tours", 35),
    ("Dupont", "2024-02-11", "Feu rouge", "Orléans", 135),
    ("Bernard", "2024-02-20", "Stationnement gênant", None, 35),
    ("Martin", "2024-03-05", "Excès de vitesse", "Chartres", 68),
    ("Dupont", "2024-03-19", "Téléphone au volant", "Tours", 135),
    ("Bernard", "2024-04-01", None, "Bourges", None),
]


def seed(db_path: Path = DEMO_DB_PATH) -> int:
    """Recreate the demo table and insert the sample rows.

    Returns:
        Number of rows inserted.
    """
    engine = get_engine(f"sqlite:///{db_path}")
    metadata = MetaData()
    table = pv_table(DEMO_TABLE, metadata)

    metadata.drop_all(engine)
    metadata.create_all(engine)

    rows = [
        {
            "agent_nom": agent,
            "date_infraction": date,
            "type_infraction": kind,
            "commune": commune,
            "montant": amount,
        }
        for agent, date, kind, commune, amount in DEMO_ROWS
    ]
    with engine.begin() as conn:
        conn.execute(table.insert(), rows)

    return len(rows)


def main() -> None:
    count = seed()
    print(f"Seeded {count} rows into {DEMO_TABLE} ({DEMO_DB_PATH})")
    print(f"Serve with: DTCENTRE_DATABASE_URL=sqlite:///{DEMO_DB_PATH} dtcentre serve")


if __name__ == "__main__":
    main()
