from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Any

PDF_MIME = "application/pdf"
PNG_MIME = "image/png"


def load_catalog_snapshot(path: Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No catalog snapshot found at {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def to_data_uri(payload: bytes, mime: str) -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime};base64,{encoded}"


__all__ = ["PDF_MIME", "PNG_MIME", "load_catalog_snapshot", "to_data_uri"]
