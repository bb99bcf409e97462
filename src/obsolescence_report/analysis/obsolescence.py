from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Tuple

from .dates import DateLike, DateWindow, format_date, parse_date
from .models import (
    END_OF_LIFE,
    NOT_DEFINED_LABEL,
    CategoryDescriptor,
    ITComponent,
    ObsoleteComponent,
)


class CategoryResolver(Protocol):
    def label(self, code: str) -> str: ...

    def colors(self, code: str) -> Tuple[Optional[str], Optional[str]]: ...


def describe_category(code: Optional[str], resolver: CategoryResolver) -> CategoryDescriptor:
    if code is None:
        return CategoryDescriptor(key=None, label=NOT_DEFINED_LABEL)
    bg_color, color = resolver.colors(code)
    return CategoryDescriptor(key=code, label=resolver.label(code), bg_color=bg_color, color=color)


def obsolescence_date(component: ITComponent):
    """Start date of the component's endOfLife phase, or None when it has none."""
    if component.lifecycle is None:
        return None
    phase = component.lifecycle.find_phase(END_OF_LIFE)
    if phase is None or not phase.start_date:
        return None
    return parse_date(phase.start_date, f"endOfLife date of {component.id}")


def find_obsolete_components(
    components: Iterable[ITComponent],
    start_date: DateLike,
    end_date: DateLike,
    resolver: CategoryResolver,
) -> List[ObsoleteComponent]:
    """
    Components whose end-of-life date lies strictly inside (start_date, end_date),
    sorted by that date. Equal dates keep catalog order.
    """
    window = DateWindow(parse_date(start_date, "start date"), parse_date(end_date, "end date"))

    found = []
    for component in components:
        eol = obsolescence_date(component)
        if eol is None or not window.contains(eol):
            continue
        found.append(
            (
                eol,
                ObsoleteComponent(
                    id=component.id,
                    name=component.name,
                    category=describe_category(component.category, resolver),
                    obsolescence_date=format_date(eol),
                    extra=dict(component.extra),
                ),
            )
        )

    found.sort(key=lambda pair: pair[0])
    return [item for _, item in found]


__all__ = ["CategoryResolver", "describe_category", "find_obsolete_components", "obsolescence_date"]
