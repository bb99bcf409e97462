"""PDF composer for the obsolescence report.

The document has four fixed parts, in order:
  1. Title block with the reporting period
  2. Obsolescences per IT Component Category (bar chart)
  3. IT Component Obsolescences (table)
  4. Analysis (free text)

``build_sections`` produces the document definition as plain data so the
layout decisions can be checked without rasterizing anything;
``compose_report`` turns it into PDF bytes with reportlab.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4, portrait
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..analysis.dates import DateLike, format_date, parse_date
from ..analysis.models import ObsoleteComponent
from ..analysis.table import table_rows
from .chart import RenderError

logger = logging.getLogger("obsolescence.pdf")

REPORT_TITLE = "Obsolescence Report"
EMPTY_STATE = "No obsolete it components during this period..."
NO_ANALYSIS = "no comments"
CHART_SECTION = "Obsolescences per IT Component Category"
TABLE_SECTION = "IT Component Obsolescences"
ANALYSIS_SECTION = "Analysis"

CHART_FIT = (420, 200)
PAGE_MARGIN = 1 * inch

HEADER_BG = colors.HexColor("#f1f5f9")
GRID = colors.HexColor("#cbd5e1")


@dataclass(frozen=True)
class ReportSection:
    title: str
    kind: str  # "chart" | "table" | "text" | "empty"
    body: Any = None


@dataclass(frozen=True)
class ReportDefinition:
    title: str
    start_date: str
    end_date: str
    sections: List[ReportSection]


def build_sections(
    items: Sequence[ObsoleteComponent],
    chart_png: Optional[bytes],
    analysis: str,
    start_date: DateLike,
    end_date: DateLike,
    title: str = REPORT_TITLE,
    empty_state: str = EMPTY_STATE,
) -> ReportDefinition:
    if items:
        if not chart_png:
            raise RenderError("A chart image is required when the report has items")
        chart = ReportSection(CHART_SECTION, "chart", chart_png)
        table = ReportSection(TABLE_SECTION, "table", table_rows(items))
    else:
        chart = ReportSection(CHART_SECTION, "empty", empty_state)
        table = ReportSection(TABLE_SECTION, "empty", empty_state)

    analysis = (analysis or "").strip()
    notes = (
        ReportSection(ANALYSIS_SECTION, "text", analysis)
        if analysis
        else ReportSection(ANALYSIS_SECTION, "empty", NO_ANALYSIS)
    )
    return ReportDefinition(
        title=title,
        start_date=format_date(parse_date(start_date, "start date")),
        end_date=format_date(parse_date(end_date, "end date")),
        sections=[chart, table, notes],
    )


def _build_styles() -> dict:
    base = getSampleStyleSheet()
    return {
        "header": ParagraphStyle(
            "ReportHeader", parent=base["Title"], fontSize=18, alignment=TA_CENTER
        ),
        "period": ParagraphStyle(
            "ReportPeriod",
            parent=base["Normal"],
            fontName="Helvetica-Oblique",
            fontSize=10,
            alignment=TA_CENTER,
            spaceBefore=15,
            spaceAfter=40,
        ),
        "subheader": ParagraphStyle(
            "SectionHeader",
            parent=base["Heading2"],
            fontSize=15,
            alignment=TA_CENTER,
            spaceAfter=20,
        ),
        "body": ParagraphStyle(
            "BodyText", parent=base["Normal"], fontSize=9, leading=12, alignment=TA_JUSTIFY
        ),
        "empty": ParagraphStyle(
            "EmptyState",
            parent=base["Normal"],
            fontName="Helvetica-Oblique",
            fontSize=9,
            alignment=TA_CENTER,
        ),
        "cell": ParagraphStyle("Cell", parent=base["Normal"], fontSize=9, leading=11),
    }


def _chart_flowable(png: bytes) -> Image:
    img_w, img_h = ImageReader(io.BytesIO(png)).getSize()
    max_w, max_h = CHART_FIT
    scale = min(max_w / img_w, max_h / img_h)
    return Image(io.BytesIO(png), width=img_w * scale, height=img_h * scale)


def _table_flowable(rows: List[List[str]], styles: dict, doc_width: float) -> Table:
    header, *body = rows
    data = [header] + [[Paragraph(escape(cell), styles["cell"]) for cell in row] for row in body]
    fixed = [1.3 * inch, 1.5 * inch]
    t = Table(data, colWidths=fixed + [doc_width - sum(fixed)], repeatRows=1)
    t.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_BG),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("GRID", (0, 0), (-1, -1), 0.5, GRID),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]
        )
    )
    return t


def _section_flowables(section: ReportSection, styles: dict, doc_width: float) -> list:
    story = [Paragraph(escape(section.title), styles["subheader"])]
    if section.kind == "chart":
        story.append(_chart_flowable(section.body))
    elif section.kind == "table":
        story.append(_table_flowable(section.body, styles, doc_width))
    elif section.kind == "text":
        story.append(Paragraph(escape(section.body).replace("\n", "<br/>"), styles["body"]))
    else:
        story.append(Paragraph(escape(section.body), styles["empty"]))
    story.append(Spacer(1, 50))
    return story


def render_pdf(definition: ReportDefinition) -> bytes:
    styles = _build_styles()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=portrait(A4),
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=definition.title,
    )

    story = [
        Paragraph(escape(definition.title), styles["header"]),
        Paragraph(
            f"<b>{definition.start_date}</b> to <b>{definition.end_date}</b>",
            styles["period"],
        ),
    ]
    for section in definition.sections:
        story.extend(_section_flowables(section, styles, doc.width))

    try:
        doc.build(story)
    except Exception as exc:
        logger.error("PDF layout failed: %s", exc)
        raise RenderError(f"Could not build report document: {exc}") from exc

    pdf_bytes = buf.getvalue()
    buf.close()
    logger.info(
        "Generated obsolescence report %s to %s: %d pages, %d bytes",
        definition.start_date,
        definition.end_date,
        doc.page,
        len(pdf_bytes),
    )
    return pdf_bytes


def compose_report(
    items: Sequence[ObsoleteComponent],
    chart_png: Optional[bytes],
    analysis: str,
    start_date: DateLike,
    end_date: DateLike,
    title: str = REPORT_TITLE,
    empty_state: str = EMPTY_STATE,
) -> bytes:
    definition = build_sections(
        items, chart_png, analysis, start_date, end_date, title=title, empty_state=empty_state
    )
    return render_pdf(definition)


__all__ = [
    "ANALYSIS_SECTION",
    "CHART_SECTION",
    "EMPTY_STATE",
    "NO_ANALYSIS",
    "REPORT_TITLE",
    "ReportDefinition",
    "ReportSection",
    "TABLE_SECTION",
    "build_sections",
    "compose_report",
    "render_pdf",
]
