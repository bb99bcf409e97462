from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from obsolescence_report.analysis import ObsolescenceResult
from obsolescence_report.rendering import EMPTY_STATE, compose_report, render_bar_chart
from obsolescence_report.utils import PDF_MIME, PNG_MIME, to_data_uri

from .obsolescence_service import ObsolescenceService

logger = logging.getLogger("obsolescence.api.report")


class ExportTracker:
    """Latest-wins bookkeeping: only the newest export may become current."""

    def __init__(self):
        self._issued = 0

    def begin(self) -> int:
        self._issued += 1
        return self._issued

    def is_latest(self, ticket: int) -> bool:
        return ticket == self._issued


@dataclass(frozen=True)
class ReportArtifact:
    ticket: int
    result: ObsolescenceResult
    pdf: bytes
    chart_png: Optional[bytes]
    superseded: bool = False

    def pdf_data_uri(self) -> str:
        return to_data_uri(self.pdf, PDF_MIME)

    def chart_data_uri(self) -> Optional[str]:
        return to_data_uri(self.chart_png, PNG_MIME) if self.chart_png else None


class ReportService:
    def __init__(
        self,
        obsolescence_service: ObsolescenceService,
        report_cfg: Optional[Dict] = None,
        chart_cfg: Optional[Dict] = None,
    ):
        self.obsolescence = obsolescence_service
        self.report_cfg = report_cfg or {}
        self.chart_cfg = chart_cfg or {}
        self.exports = ExportTracker()
        self.current: Optional[ReportArtifact] = None

    def render_chart(self, result: ObsolescenceResult) -> bytes:
        return render_bar_chart(
            result.categories,
            width=float(self.chart_cfg.get("width", 8.4)),
            height=float(self.chart_cfg.get("height", 4.0)),
            dpi=int(self.chart_cfg.get("dpi", 200)),
            default_color=self.chart_cfg.get("default_color", "#cccccc"),
        )

    async def chart(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> bytes:
        result = await self.obsolescence.run(start_date, end_date)
        return self.render_chart(result)

    async def export(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        analysis: str = "",
    ) -> ReportArtifact:
        ticket = self.exports.begin()
        result = await self.obsolescence.run(start_date, end_date)
        chart_png = None if result.is_empty else self.render_chart(result)
        pdf = compose_report(
            result.items,
            chart_png,
            analysis,
            result.window.start_date,
            result.window.end_date,
            title=self.report_cfg.get("title", "Obsolescence Report"),
            empty_state=self.report_cfg.get("empty_state", EMPTY_STATE),
        )

        superseded = not self.exports.is_latest(ticket)
        artifact = ReportArtifact(
            ticket=ticket, result=result, pdf=pdf, chart_png=chart_png, superseded=superseded
        )
        if superseded:
            logger.info("Report export #%d finished after a newer one started", ticket)
        else:
            self.current = artifact
        return artifact
