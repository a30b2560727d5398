from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from app.auth.middleware import JWTPayload, verify_token, check_permission
from app.feedback.router import get_feedback_service
from app.feedback.schemas import DepartmentStats
from app.feedback.service import FeedbackService
from app.reports.service import ReportsService
from app.utils.timezone import utcnow


router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
)


@router.get("/department-stats/download")
async def download_department_stats(
    format: str = Query("json", enum=["json", "csv", "pdf"]),
    service: FeedbackService = Depends(get_feedback_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """Download per-department statistics as JSON, CSV or PDF"""
    check_permission(jwt_payload, "feedback:read")
    stats = await service.get_department_stats()
    reports = ReportsService()
    stamp = utcnow().strftime("%Y%m%d")

    if format == "csv":
        return StreamingResponse(
            reports.generate_csv(stats),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename=department_stats_{stamp}.csv"},
        )
    if format == "pdf":
        return StreamingResponse(
            reports.generate_pdf(stats, "Department Feedback Statistics"),
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename=department_stats_{stamp}.pdf"},
        )
    return [DepartmentStats(**s).model_dump(by_alias=True) for s in stats]
