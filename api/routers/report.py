from fastapi import APIRouter, Request
from fastapi.responses import Response

from obsolescence_report.utils import PDF_MIME, PNG_MIME

from ..schemas.report import ReportDataUriResponse
from ..schemas.window import ReportInput, WindowInput

router = APIRouter(prefix="/api/v1", tags=["report"])


@router.post("/chart")
async def chart(body: WindowInput, request: Request):
    report_svc = request.app.state.report_service
    png = await report_svc.chart(body.start_date, body.end_date)
    return Response(content=png, media_type=PNG_MIME)


@router.post("/report")
async def report(body: ReportInput, request: Request):
    report_svc = request.app.state.report_service
    artifact = await report_svc.export(body.start_date, body.end_date, body.analysis)
    start, end = artifact.result.window.as_strings()

    if body.format == "data_uri":
        return ReportDataUriResponse(
            start_date=start,
            end_date=end,
            count=len(artifact.result.items),
            document=artifact.pdf_data_uri(),
            chart=artifact.chart_data_uri(),
            superseded=artifact.superseded,
        )

    headers = {
        "Content-Disposition": f'attachment; filename="obsolescence-report-{start}-{end}.pdf"',
        "X-Report-Superseded": "true" if artifact.superseded else "false",
    }
    return Response(content=artifact.pdf, media_type=PDF_MIME, headers=headers)
