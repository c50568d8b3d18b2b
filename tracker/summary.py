"""
Summary figures for the entry list (KPI row).

Calories may arrive as numbers or as the raw text the backend stored, and fat
may be null. Values that cannot be read as numbers are left out of the totals
instead of failing the page.
"""

from dataclasses import dataclass
from typing import List

import pandas as pd

from tracker.models import Entry

ENTRY_COLUMNS = ["id", "dish", "ingredients", "calories", "fat"]


@dataclass(frozen=True)
class EntrySummary:
    count: int
    total_calories: float
    total_fat: float


def entries_dataframe(entries: List[Entry]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per entry.

    Args:
        entries: Entries in collection order

    Returns:
        DataFrame with columns id, dish, ingredients, calories, fat. Calories and
        fat are numeric; unreadable values become NaN.
    """
    df = pd.DataFrame(
        [entry.model_dump(include=set(ENTRY_COLUMNS)) for entry in entries],
        columns=ENTRY_COLUMNS,
    )
    df["calories"] = pd.to_numeric(df["calories"], errors="coerce")
    df["fat"] = pd.to_numeric(df["fat"], errors="coerce")
    return df


def summarize_entries(entries: List[Entry]) -> EntrySummary:
    """Count entries and total their calories and fat."""
    if not entries:
        return EntrySummary(count=0, total_calories=0.0, total_fat=0.0)

    df = entries_dataframe(entries)
    return EntrySummary(
        count=len(df),
        total_calories=float(df["calories"].sum()),
        total_fat=float(df["fat"].sum()),
    )
