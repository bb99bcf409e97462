from fastapi import APIRouter, Request

from obsolescence_report.analysis import CategoryDescriptor, ObsolescenceResult

from ..schemas.obsolescence import (
    CategoryCountResponse,
    CategoryDescriptorResponse,
    ObsolescenceResponse,
    ObsoleteComponentResponse,
)
from ..schemas.window import WindowInput

router = APIRouter(prefix="/api/v1", tags=["obsolescence"])


def descriptor_response(d: CategoryDescriptor) -> CategoryDescriptorResponse:
    return CategoryDescriptorResponse(key=d.key, label=d.label, bg_color=d.bg_color, color=d.color)


def obsolescence_response(result: ObsolescenceResult) -> ObsolescenceResponse:
    start, end = result.window.as_strings()
    return ObsolescenceResponse(
        start_date=start,
        end_date=end,
        items=[
            ObsoleteComponentResponse(
                id=str(item.id),
                name=item.name,
                category=descriptor_response(item.category),
                obsolescence_date=item.obsolescence_date,
                extra=dict(item.extra),
            )
            for item in result.items
        ],
        categories=[
            CategoryCountResponse(
                key=group.key,
                label=group.label,
                bg_color=group.bg_color,
                color=group.color,
                count=group.count,
            )
            for group in result.categories.values()
        ],
        count=len(result.items),
    )


@router.post("/obsolescence", response_model=ObsolescenceResponse)
async def obsolescence(body: WindowInput, request: Request):
    obsolescence_svc = request.app.state.obsolescence_service
    result = await obsolescence_svc.run(body.start_date, body.end_date)
    return obsolescence_response(result)
