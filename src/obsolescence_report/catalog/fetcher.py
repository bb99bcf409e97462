"""Catalog access for the obsolescence report.

The host workspace exposes IT component fact sheets through GraphQL and a
report setup document (view model + translations) that carries category
colors and labels. ``SnapshotCatalogFetcher`` serves the same payload from a
JSON file for offline runs.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..analysis.models import ITComponent
from ..config import resolve_path
from ..utils.io import load_catalog_snapshot
from .metadata import CategoryMetadata

logger = logging.getLogger("obsolescence.fetcher")

IT_COMPONENTS_QUERY = """
{
  allFactSheets(factSheetType: ITComponent) {
    edges {
      node {
        id
        name
        ... on ITComponent {
          category
          lifecycle {
            lifecyclePhase:asString
            phases {
              phase
              startDate
            }
          }
        }
      }
    }
  }
}
"""


class FetchError(Exception):
    """Raised when the catalog or the host context cannot be loaded."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class BusyCounter:
    """Number of catalog requests currently in flight."""

    def __init__(self):
        self.value = 0

    @property
    def busy(self) -> bool:
        return self.value > 0

    @contextmanager
    def track(self):
        self.value += 1
        try:
            yield
        finally:
            self.value -= 1


def parse_fact_sheets(payload: Any) -> List[ITComponent]:
    """Unwrap ``allFactSheets.edges[].node`` (or a bare list of nodes)."""
    try:
        if isinstance(payload, Mapping):
            data = payload.get("data", payload)
            nodes = [edge["node"] for edge in data["allFactSheets"]["edges"]]
        else:
            nodes = list(payload)
        return [ITComponent.from_node(node) for node in nodes]
    except (KeyError, TypeError, AttributeError) as exc:
        raise FetchError(f"Unexpected catalog payload: {exc!r}") from exc


class HostCatalogFetcher:
    def __init__(
        self,
        graphql_url: str,
        setup_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: float = 30.0,
        busy: Optional[BusyCounter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.graphql_url = graphql_url
        self.setup_url = setup_url
        self.api_token = api_token
        self.timeout = timeout
        self.busy = busy or BusyCounter()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return httpx.AsyncClient(timeout=self.timeout, headers=headers, transport=self._transport)

    async def fetch(self) -> List[ITComponent]:
        with self.busy.track():
            try:
                async with self._client() as client:
                    resp = await client.post(self.graphql_url, json={"query": IT_COMPONENTS_QUERY})
                    resp.raise_for_status()
                    body = resp.json()
            except httpx.HTTPStatusError as exc:
                logger.error("Catalog request failed: HTTP %s", exc.response.status_code)
                raise FetchError(
                    f"Catalog request failed with HTTP {exc.response.status_code}",
                    status_code=exc.response.status_code,
                ) from exc
            except (httpx.HTTPError, ValueError) as exc:
                logger.error("Catalog request failed: %s", exc)
                raise FetchError(f"Catalog request failed: {exc}") from exc

        if not isinstance(body, Mapping):
            raise FetchError("Catalog response is not a JSON object")
        if body.get("errors"):
            messages = "; ".join(str(e.get("message", e)) for e in body["errors"])
            raise FetchError(f"Catalog query returned errors: {messages}")
        components = parse_fact_sheets(body)
        logger.info("Fetched %d IT components from %s", len(components), self.graphql_url)
        return components

    async def fetch_metadata(self) -> CategoryMetadata:
        if not self.setup_url:
            raise FetchError("No report setup URL configured")
        with self.busy.track():
            try:
                async with self._client() as client:
                    resp = await client.get(self.setup_url)
                    resp.raise_for_status()
                    setup = resp.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.error("Report setup request failed: %s", exc)
                raise FetchError(f"Report setup request failed: {exc}") from exc
        try:
            return CategoryMetadata.from_report_setup(setup)
        except (KeyError, AttributeError) as exc:
            raise FetchError(f"Unexpected report setup payload: {exc}") from exc


class SnapshotCatalogFetcher:
    def __init__(
        self,
        path: Path,
        metadata: Optional[CategoryMetadata] = None,
        busy: Optional[BusyCounter] = None,
    ):
        self.path = Path(path)
        self.metadata = metadata
        self.busy = busy or BusyCounter()

    def _load(self) -> Any:
        try:
            return load_catalog_snapshot(self.path)
        except (OSError, ValueError) as exc:
            raise FetchError(f"Could not read catalog snapshot {self.path}: {exc}") from exc

    async def fetch(self) -> List[ITComponent]:
        with self.busy.track():
            payload = self._load()
            if isinstance(payload, Mapping) and "reportSetup" in payload:
                payload = {k: v for k, v in payload.items() if k != "reportSetup"}
            components = parse_fact_sheets(payload)
        logger.info("Loaded %d IT components from %s", len(components), self.path)
        return components

    async def fetch_metadata(self) -> CategoryMetadata:
        if self.metadata is not None:
            return self.metadata
        with self.busy.track():
            payload = self._load()
        setup = payload.get("reportSetup") if isinstance(payload, Mapping) else None
        if setup is None:
            return CategoryMetadata()
        try:
            return CategoryMetadata.from_report_setup(setup)
        except (KeyError, AttributeError) as exc:
            raise FetchError(f"Unexpected report setup in snapshot: {exc}") from exc


def build_fetcher(cfg: Dict[str, Any], busy: Optional[BusyCounter] = None):
    catalog_cfg = cfg.get("catalog", {})
    source = catalog_cfg.get("source", "host")
    if source == "snapshot":
        static = CategoryMetadata.from_config(cfg) if cfg.get("categories") else None
        return SnapshotCatalogFetcher(
            resolve_path(cfg, catalog_cfg["snapshot"]), metadata=static, busy=busy
        )
    if source == "host":
        host = cfg.get("host", {})
        if not host.get("graphql_url"):
            raise FetchError("host.graphql_url is not configured")
        return HostCatalogFetcher(
            graphql_url=host["graphql_url"],
            setup_url=host.get("setup_url"),
            api_token=host.get("api_token"),
            timeout=float(host.get("timeout_seconds", 30)),
            busy=busy,
        )
    raise ValueError(f"Unknown catalog source '{source}' (expected 'host' or 'snapshot')")


__all__ = [
    "BusyCounter",
    "FetchError",
    "HostCatalogFetcher",
    "IT_COMPONENTS_QUERY",
    "SnapshotCatalogFetcher",
    "build_fetcher",
    "parse_fact_sheets",
]
