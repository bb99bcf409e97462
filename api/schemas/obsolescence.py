from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class CategoryDescriptorResponse(BaseModel):
    key: Optional[str] = None
    label: str
    bg_color: Optional[str] = None
    color: Optional[str] = None


class ObsoleteComponentResponse(BaseModel):
    id: str
    name: str
    category: CategoryDescriptorResponse
    obsolescence_date: str
    extra: Dict[str, Any] = {}


class CategoryCountResponse(CategoryDescriptorResponse):
    count: int


class ObsolescenceResponse(BaseModel):
    start_date: str
    end_date: str
    items: List[ObsoleteComponentResponse]
    categories: List[CategoryCountResponse]
    count: int
