import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from obsolescence_report.analysis import InvalidDateWindowError, MalformedDateError
from obsolescence_report.catalog import FetchError
from obsolescence_report.rendering import RenderError

from .core.config import get_cors_origins
from .core.lifespan import lifespan
from .routers import catalog, health, obsolescence, report

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("obsolescence.api")

app = FastAPI(
    title="IT Component Obsolescence Report API",
    version="1.0.0",
    description="End-of-life filtering, category breakdown and PDF export for IT components",
    lifespan=lifespan,
)


@app.exception_handler(MalformedDateError)
@app.exception_handler(InvalidDateWindowError)
async def date_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    logger.error("Catalog fetch failed: %s", exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(RenderError)
async def render_error_handler(request: Request, exc: RenderError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def debug_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "traceback": tb},
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(obsolescence.router)
app.include_router(report.router)
