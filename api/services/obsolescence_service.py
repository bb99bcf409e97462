from __future__ import annotations

from typing import Optional

from obsolescence_report.analysis import DateWindow, ObsolescenceResult, compute_obsolescence

from .catalog_service import CatalogService


class ObsolescenceService:
    def __init__(self, catalog_service: CatalogService):
        self.catalog = catalog_service

    async def run(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> ObsolescenceResult:
        # window is validated before the catalog request is made
        window = DateWindow.parse(start_date, end_date)
        components = await self.catalog.fetch_components()
        return compute_obsolescence(components, window, self.catalog.metadata)
