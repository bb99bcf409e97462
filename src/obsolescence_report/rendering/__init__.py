"""Chart rendering (matplotlib) and PDF composition (reportlab)."""

from .chart import RenderError, render_bar_chart
from .pdf import EMPTY_STATE, ReportDefinition, ReportSection, build_sections, compose_report

__all__ = [
    "EMPTY_STATE",
    "RenderError",
    "ReportDefinition",
    "ReportSection",
    "build_sections",
    "compose_report",
    "render_bar_chart",
]
