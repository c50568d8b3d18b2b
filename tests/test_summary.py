"""
Tests for entry summary figures.
"""

import pytest

from tracker.models import Entry
from tracker.summary import entries_dataframe, summarize_entries


class TestSummarizeEntries:
    """Test KPI totals."""

    def test_empty(self):
        """Test the summary of an empty collection."""
        summary = summarize_entries([])
        assert summary.count == 0
        assert summary.total_calories == 0.0
        assert summary.total_fat == 0.0

    def test_totals_mix_numbers_and_text(self):
        """Test that numeric text counts toward the totals."""
        entries = [
            Entry(id="1", dish="Salad", calories=150, fat=2.5),
            Entry(id="2", dish="Soup", calories="90", fat=1.5),
        ]
        summary = summarize_entries(entries)
        assert summary.count == 2
        assert summary.total_calories == pytest.approx(240.0)
        assert summary.total_fat == pytest.approx(4.0)

    def test_unreadable_values_are_skipped(self):
        """Test that unreadable values are left out of the totals."""
        entries = [
            Entry(id="1", calories="lots", fat=None),
            Entry(id="2", calories="100", fat=2.0),
        ]
        summary = summarize_entries(entries)
        assert summary.count == 2
        assert summary.total_calories == pytest.approx(100.0)
        assert summary.total_fat == pytest.approx(2.0)


class TestEntriesDataframe:
    """Test the tabular view of entries."""

    def test_columns_and_order(self):
        """Test that the dataframe keeps collection order and fixed columns."""
        entries = [Entry(id="b", dish="B"), Entry(id="a", dish="A")]
        df = entries_dataframe(entries)
        assert list(df.columns) == ["id", "dish", "ingredients", "calories", "fat"]
        assert list(df["id"]) == ["b", "a"]
