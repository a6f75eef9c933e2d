from datetime import datetime

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from pathoreport.config import settings
from pathoreport.routers.deps import get_now, get_report_store
from pathoreport.services.analytics import build_dashboard, export_csv
from pathoreport.services.storage import ReportStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("")
def dashboard(
    month: str | None = Query(default=None, pattern=r"^\d{4}-\d{2}$"),
    store: ReportStore = Depends(get_report_store),
    now: datetime = Depends(get_now),
):
    summary = build_dashboard(store.load(), now, month)
    return {"statusCode": 200, "message": "Success", "data": summary.model_dump(mode="json", by_alias=True)}


@router.get("/export.csv")
def export(store: ReportStore = Depends(get_report_store)):
    return Response(
        content=export_csv(store.load()),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.csv_filename}"'},
    )
