from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class WindowInput(BaseModel):
    start_date: Optional[str] = Field(
        default=None, description="YYYY-MM-DD, exclusive; defaults to today"
    )
    end_date: Optional[str] = Field(
        default=None, description="YYYY-MM-DD, exclusive; defaults to the last day of next month"
    )


class ReportInput(WindowInput):
    analysis: str = Field(default="", description="Free-text analysis for the last section")
    format: Literal["pdf", "data_uri"] = "pdf"
