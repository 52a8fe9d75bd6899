"""
inventory.py — In-memory parts inventory for one session.

Records are kept newest first. The only mutation is add(); filtered views are
recomputed from scratch on every call.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

import pandas as pd

from src.categorizer import BUCKET_LABELS, DEFAULT_CATEGORY
from src.parts import PartRecord


ALL_CATEGORIES = "all"
FILTER_CATEGORIES: list[str] = [ALL_CATEGORIES, DEFAULT_CATEGORY] + BUCKET_LABELS

_DISPLAY_COLUMNS = ["part_number", "name", "condition", "category", "price"]


def filter_parts(
    records: Iterable[PartRecord],
    category: str = ALL_CATEGORIES,
    search: str = "",
) -> list[PartRecord]:
    """Records in the category whose part number or name contains search (case-insensitive)."""
    q = search.lower()
    out = []
    for rec in records:
        if category != ALL_CATEGORIES and rec.category != category:
            continue
        if q and q not in rec.part_number.lower() and q not in rec.name.lower():
            continue
        out.append(rec)
    return out


def to_dataframe(records: Iterable[PartRecord]) -> pd.DataFrame:
    rows = [{col: getattr(rec, col) for col in _DISPLAY_COLUMNS} for rec in records]
    return pd.DataFrame(rows, columns=_DISPLAY_COLUMNS)


class InventoryStore:
    """Container for the parts added this session."""

    def __init__(self, records: Iterable[PartRecord] = ()):
        self._records: list[PartRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PartRecord]:
        return iter(tuple(self._records))

    @property
    def records(self) -> tuple[PartRecord, ...]:
        return tuple(self._records)

    def add(self, record: PartRecord) -> None:
        self._records.insert(0, record)

    def filtered(self, category: str = ALL_CATEGORIES, search: str = "") -> list[PartRecord]:
        return filter_parts(self._records, category, search)

    def category_counts(self) -> dict[str, int]:
        """Number of records per category, largest first."""
        return dict(Counter(rec.category for rec in self._records).most_common())

    def filter_options(self) -> list[str]:
        """
        Categories the user can filter by.

        Breadcrumb guesses can produce labels outside the bucket table, so any
        category present in the store is appended after the fixed list.
        """
        extra = sorted({rec.category for rec in self._records} - set(FILTER_CATEGORIES))
        return FILTER_CATEGORIES + extra
