from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    has_catalog = (
        hasattr(request.app.state, "catalog_service")
        and request.app.state.catalog_service is not None
    )
    if not has_catalog:
        return {"status": "not_ready", "reason": "report context not loaded"}
    return {"status": "ready"}
