"""Table layout of the pv_* report tables.

The gateway itself reflects tables at query time; this layout is used
to create local tables for the demo database and for tests.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table


def pv_table(name: str, metadata: MetaData) -> Table:
    """Declare a pv_* table on the given metadata.

    date_infraction holds an ISO date string, which is how the
    remote tables expose it to filters.
    """
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True),
        Column("agent_nom", String(128), nullable=True),
        Column("date_infraction", String(10), nullable=True),
        Column("type_infraction", String(128), nullable=True),
        Column("commune", String(128), nullable=True),
        Column("montant", Integer, nullable=True),
    )
