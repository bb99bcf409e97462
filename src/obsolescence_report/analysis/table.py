from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from .models import ObsoleteComponent

REPORT_COLUMNS: List[Tuple[str, str]] = [
    ("obsolescence_date", "Obsolescence Date"),
    ("category", "Category"),
    ("name", "IT Component"),
]


def _cell(item: ObsoleteComponent, key: str) -> str:
    if key == "category":
        return item.category.label
    return str(getattr(item, key))


def table_rows(items: Iterable[ObsoleteComponent]) -> List[List[str]]:
    """Header row followed by one row per item."""
    rows = [[label for _, label in REPORT_COLUMNS]]
    rows.extend([_cell(item, key) for key, _ in REPORT_COLUMNS] for item in items)
    return rows


def to_frame(items: Sequence[ObsoleteComponent]) -> pd.DataFrame:
    header, *body = table_rows(items)
    return pd.DataFrame(body, columns=header)


__all__ = ["REPORT_COLUMNS", "table_rows", "to_frame"]
