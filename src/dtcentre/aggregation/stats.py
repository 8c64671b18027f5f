"""Per-value row counts.

Pure functions - rows come in, ranked StatEntry lists go out.
"""

from __future__ import annotations

from typing import Any, Iterable

from dtcentre.models.domain import Row
from dtcentre.models.types import StatEntry

# Label used for rows with no value in the grouping column
UNKNOWN_LABEL = "Inconnu"


def _label_for(value: Any) -> str:
    if value is None or value == "":
        return UNKNOWN_LABEL
    return str(value)


def count_by_column(rows: Iterable[Row], column: str) -> dict[str, int]:
    """Count rows per distinct value of a column.

    Absent, null and empty values are counted under UNKNOWN_LABEL.
    Keys keep the order in which each label was first seen.

    Args:
        rows: Rows to count.
        column: Grouping column.

    Returns:
        Label -> number of rows.
    """
    counts: dict[str, int] = {}
    for row in rows:
        label = _label_for(row.get(column))
        counts[label] = counts.get(label, 0) + 1
    return counts


def rank_counts(counts: dict[str, int]) -> list[StatEntry]:
    """Sort counts by total, highest first.

    sorted() is stable, also with reverse=True, so equal totals keep
    first-seen order.
    """
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [StatEntry(label=label, total=total) for label, total in ranked]


def aggregate_rows(rows: Iterable[Row], column: str) -> list[StatEntry]:
    """Count rows by column value and rank the result."""
    return rank_counts(count_by_column(rows, column))
