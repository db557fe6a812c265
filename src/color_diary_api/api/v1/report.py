"""Report export API endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from color_diary_api.deps import AsOf, ReportServiceDep

router = APIRouter(prefix="/report", tags=["Report"])


@router.get("/weekly")
async def download_weekly_report(report_service: ReportServiceDep, as_of: AsOf) -> Response:
    """
    Download a weekly PDF report.

    Covers the Monday-based week containing the reference date.
    """
    pdf_bytes = await report_service.generate_weekly_report(as_of)
    filename = f"color_diary_report_{as_of.isoformat()}.pdf"

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
