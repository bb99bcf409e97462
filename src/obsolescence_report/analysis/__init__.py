"""Obsolescence filtering and per-category aggregation."""

from .aggregate import ChartSeries, aggregate_by_category, chart_series
from .dates import (
    DateWindow,
    InvalidDateWindowError,
    MalformedDateError,
    end_of_next_month,
    format_date,
    parse_date,
)
from .models import (
    CategoryAggregate,
    CategoryDescriptor,
    ITComponent,
    Lifecycle,
    LifecyclePhase,
    ObsoleteComponent,
)
from .obsolescence import describe_category, find_obsolete_components
from .report import ObsolescenceResult, compute_obsolescence
from .table import REPORT_COLUMNS, table_rows, to_frame

__all__ = [
    "CategoryAggregate",
    "CategoryDescriptor",
    "ChartSeries",
    "DateWindow",
    "ITComponent",
    "InvalidDateWindowError",
    "Lifecycle",
    "LifecyclePhase",
    "MalformedDateError",
    "ObsolescenceResult",
    "ObsoleteComponent",
    "REPORT_COLUMNS",
    "aggregate_by_category",
    "chart_series",
    "compute_obsolescence",
    "describe_category",
    "end_of_next_month",
    "find_obsolete_components",
    "format_date",
    "parse_date",
    "table_rows",
    "to_frame",
]
