from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from obsolescence_report.analysis import CategoryDescriptor, ITComponent
from obsolescence_report.catalog import BusyCounter, CategoryMetadata

logger = logging.getLogger("obsolescence.api.catalog")


class CatalogService:
    def __init__(self, fetcher, metadata: CategoryMetadata, busy: BusyCounter):
        self.fetcher = fetcher
        self.metadata = metadata
        self.busy = busy
        self._pending: Optional[asyncio.Future] = None

    async def fetch_components(self) -> List[ITComponent]:
        """Catalog for this request; callers arriving mid-fetch share the outstanding one."""
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._fetch_once())
        else:
            logger.debug("joining in-flight catalog request")
        # a cancelled caller must not cancel the fetch the others are waiting on
        return await asyncio.shield(self._pending)

    async def _fetch_once(self) -> List[ITComponent]:
        try:
            return await self.fetcher.fetch()
        finally:
            self._pending = None

    @property
    def in_flight(self) -> int:
        return self.busy.value

    def list_categories(self) -> List[CategoryDescriptor]:
        return [self.metadata.describe(code) for code in self.metadata.codes()]
