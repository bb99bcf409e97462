from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ReportDataUriResponse(BaseModel):
    start_date: str
    end_date: str
    count: int
    document: str
    chart: Optional[str] = None
    superseded: bool = False
