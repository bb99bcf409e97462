"""Catalog fetchers and category metadata for IT component fact sheets."""

from .fetcher import (
    BusyCounter,
    FetchError,
    HostCatalogFetcher,
    SnapshotCatalogFetcher,
    build_fetcher,
    parse_fact_sheets,
)
from .metadata import CategoryMetadata

__all__ = [
    "BusyCounter",
    "CategoryMetadata",
    "FetchError",
    "HostCatalogFetcher",
    "SnapshotCatalogFetcher",
    "build_fetcher",
    "parse_fact_sheets",
]
