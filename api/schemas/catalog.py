from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .obsolescence import CategoryDescriptorResponse


class CatalogResponse(BaseModel):
    in_flight: int
    categories: List[CategoryDescriptorResponse]
