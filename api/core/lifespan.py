from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from obsolescence_report.catalog import BusyCounter, build_fetcher
from obsolescence_report.config import load_config

from .config import CONFIG_PATH
from ..services.catalog_service import CatalogService
from ..services.obsolescence_service import ObsolescenceService
from ..services.report_service import ReportService

logger = logging.getLogger("obsolescence.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = load_config(CONFIG_PATH)
    logging.getLogger("obsolescence").setLevel(
        str(cfg.get("logging", {}).get("level", "INFO")).upper()
    )

    busy = BusyCounter()
    fetcher = build_fetcher(cfg, busy=busy)
    # host context: category labels and colors; a failure here aborts startup
    metadata = await fetcher.fetch_metadata()
    logger.info("Report context ready: %d categories", len(metadata.codes()))

    catalog_svc = CatalogService(fetcher=fetcher, metadata=metadata, busy=busy)
    obsolescence_svc = ObsolescenceService(catalog_service=catalog_svc)

    app.state.cfg = cfg
    app.state.catalog_service = catalog_svc
    app.state.obsolescence_service = obsolescence_svc
    app.state.report_service = ReportService(
        obsolescence_service=obsolescence_svc,
        report_cfg=cfg.get("report", {}),
        chart_cfg=cfg.get("chart", {}),
    )

    yield
