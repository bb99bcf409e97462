"""Utility helpers for snapshot loading and artifact encoding."""

from .io import PDF_MIME, PNG_MIME, load_catalog_snapshot, to_data_uri

__all__ = ["PDF_MIME", "PNG_MIME", "load_catalog_snapshot", "to_data_uri"]
