from fastapi import APIRouter, Request

from ..schemas.catalog import CatalogResponse
from .obsolescence import descriptor_response

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
async def get_catalog(request: Request):
    catalog_svc = request.app.state.catalog_service
    return CatalogResponse(
        in_flight=catalog_svc.in_flight,
        categories=[descriptor_response(d) for d in catalog_svc.list_categories()],
    )
