from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .aggregate import aggregate_by_category
from .dates import DateWindow
from .models import CategoryAggregate, ITComponent, ObsoleteComponent
from .obsolescence import CategoryResolver, find_obsolete_components


@dataclass(frozen=True)
class ObsolescenceResult:
    """Snapshot of one filter run: the window, the sorted items and their groups."""

    window: DateWindow
    items: List[ObsoleteComponent]
    categories: Dict[Optional[str], CategoryAggregate]

    @property
    def is_empty(self) -> bool:
        return not self.items


def compute_obsolescence(
    components: Iterable[ITComponent],
    window: DateWindow,
    resolver: CategoryResolver,
) -> ObsolescenceResult:
    items = find_obsolete_components(components, window.start_date, window.end_date, resolver)
    return ObsolescenceResult(window=window, items=items, categories=aggregate_by_category(items))


__all__ = ["ObsolescenceResult", "compute_obsolescence"]
