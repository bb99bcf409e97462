from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .models import CategoryAggregate, ObsoleteComponent


@dataclass(frozen=True)
class ChartSeries:
    labels: List[str]
    colors: List[Optional[str]]
    counts: List[int]


def aggregate_by_category(
    obsolete_components: Iterable[ObsoleteComponent],
) -> Dict[Optional[str], CategoryAggregate]:
    """
    Group date-sorted items by category key. The first item of a category fixes
    its descriptor and its position in the mapping.
    """
    index: Dict[Optional[str], CategoryAggregate] = {}
    for item in obsolete_components:
        key = item.category.key
        if key not in index:
            index[key] = CategoryAggregate(descriptor=item.category)
        index[key].items.append(item)
    return index


def chart_series(aggregates: Dict[Optional[str], CategoryAggregate]) -> ChartSeries:
    groups = list(aggregates.values())
    return ChartSeries(
        labels=[g.label for g in groups],
        colors=[g.bg_color for g in groups],
        counts=[g.count for g in groups],
    )


__all__ = ["ChartSeries", "aggregate_by_category", "chart_series"]
