"""Tests for per-value row counts."""

from dtcentre.aggregation.stats import (
    UNKNOWN_LABEL,
    aggregate_rows,
    count_by_column,
    rank_counts,
)


def _pairs(entries):
    return [(e.label, e.total) for e in entries]


class TestCountByColumn:
    """Test the single-pass frequency count."""

    def test_counts_each_value(self):
        """Each distinct value gets its number of rows."""
        rows = [{"c": "A"}, {"c": "B"}, {"c": "A"}]
        assert count_by_column(rows, "c") == {"A": 2, "B": 1}

    def test_null_value_counts_as_unknown(self):
        """None is tallied under the unknown label."""
        assert count_by_column([{"c": None}], "c") == {UNKNOWN_LABEL: 1}

    def test_empty_string_counts_as_unknown(self):
        """Empty strings are tallied under the unknown label."""
        assert count_by_column([{"c": ""}], "c") == {UNKNOWN_LABEL: 1}

    def test_absent_column_counts_as_unknown(self):
        """Rows without the column are tallied under the unknown label."""
        assert count_by_column([{"other": "x"}], "c") == {UNKNOWN_LABEL: 1}

    def test_unknown_label_is_inconnu(self):
        """The unknown label is the French "Inconnu"."""
        assert UNKNOWN_LABEL == "Inconnu"

    def test_zero_is_a_real_value(self):
        """Numeric zero is a value, not a missing one."""
        assert count_by_column([{"c": 0}, {"c": 0}], "c") == {"0": 2}

    def test_labels_are_strings(self):
        """Non-string values are labelled by their string form."""
        assert count_by_column([{"c": 2024}], "c") == {"2024": 1}

    def test_keys_keep_first_seen_order(self):
        """Counts are keyed in first-seen order."""
        rows = [{"c": "Z"}, {"c": "A"}, {"c": "Z"}, {"c": "M"}]
        assert list(count_by_column(rows, "c")) == ["Z", "A", "M"]

    def test_empty_rows(self):
        """No rows gives no counts."""
        assert count_by_column([], "c") == {}


class TestRankCounts:
    """Test ordering of counted labels."""

    def test_sorted_by_total_descending(self):
        """Highest totals come first."""
        ranked = rank_counts({"a": 1, "b": 3, "c": 2})
        assert _pairs(ranked) == [("b", 3), ("c", 2), ("a", 1)]

    def test_ties_keep_insertion_order(self):
        """Equal totals keep the order they were first counted in."""
        ranked = rank_counts({"x": 1, "y": 2, "z": 1, "w": 2, "v": 1})
        assert _pairs(ranked) == [("y", 2), ("w", 2), ("x", 1), ("z", 1), ("v", 1)]

    def test_all_ties_unchanged(self):
        """When every total is equal the order is untouched."""
        labels = [f"label-{i}" for i in range(50)]
        ranked = rank_counts({label: 7 for label in labels})
        assert [e.label for e in ranked] == labels


class TestAggregateRows:
    """Test the combined count-and-rank."""

    def test_reference_example(self):
        """A, A, B, null gives A:2, B:1, Inconnu:1."""
        rows = [{"column": "A"}, {"column": "A"}, {"column": "B"}, {"column": None}]
        assert _pairs(aggregate_rows(rows, "column")) == [
            ("A", 2),
            ("B", 1),
            ("Inconnu", 1),
        ]

    def test_totals_sum_to_row_count(self):
        """Totals across labels add up to the number of rows."""
        rows = [{"c": v} for v in ["a", None, "b", "", "a", "c", None, "a"]]
        rows.append({})
        assert sum(e.total for e in aggregate_rows(rows, "c")) == len(rows)

    def test_output_non_increasing(self):
        """Totals never increase along the result."""
        rows = [{"c": v} for v in "abacabadabacaba"]
        totals = [e.total for e in aggregate_rows(rows, "c")]
        assert totals == sorted(totals, reverse=True)

    def test_labels_unique(self):
        """Each label appears once."""
        rows = [{"c": v} for v in ["a", "b", None, "", "a"]]
        labels = [e.label for e in aggregate_rows(rows, "c")]
        assert len(labels) == len(set(labels))
