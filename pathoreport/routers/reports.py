from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from pathoreport.routers.deps import get_now, get_report_store
from pathoreport.schemas.report import ReportDraft, ReportStatus, StatusUpdate
from pathoreport.services.builder import assemble_report
from pathoreport.services.listing import flagged_results, paginate, search_reports
from pathoreport.services.storage import ReportStore

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("")
def list_reports(
    search: str = Query(default=""),
    status: ReportStatus | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=5, ge=1, le=100),
    store: ReportStore = Depends(get_report_store),
):
    matched = search_reports(store.load(), search, status)
    rows, total_pages = paginate(matched, page, limit)
    return {
        "statusCode": 200,
        "message": "Success",
        "data": {
            "reports": [report.to_record() for report in rows],
            "total": len(matched),
            "page": page,
            "limit": limit,
            "total_pages": total_pages,
        },
    }


@router.post("")
def create_report(
    payload: ReportDraft,
    store: ReportStore = Depends(get_report_store),
    now: datetime = Depends(get_now),
):
    report = assemble_report(payload.patient, payload.tests, payload.status, now=now)
    store.add(report)
    return {"statusCode": 200, "message": "Report created", "data": report.to_record()}


@router.get("/{report_id}")
def get_report(report_id: str, store: ReportStore = Depends(get_report_store)):
    report = store.get_by_id(report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return {
        "statusCode": 200,
        "message": "Success",
        "data": {
            **report.to_record(),
            "flaggedResults": [result.to_record() for result in flagged_results(report)],
        },
    }


@router.put("/{report_id}")
def update_report(report_id: str, payload: ReportDraft, store: ReportStore = Depends(get_report_store)):
    existing = store.get_by_id(report_id)
    if not existing:
        raise HTTPException(status_code=404, detail="Report not found")

    report = assemble_report(payload.patient, payload.tests, payload.status, existing=existing)
    store.replace(report)
    return {"statusCode": 200, "message": "Report updated", "data": report.to_record()}


@router.patch("/{report_id}/status")
def update_status(report_id: str, payload: StatusUpdate, store: ReportStore = Depends(get_report_store)):
    if not store.get_by_id(report_id):
        raise HTTPException(status_code=404, detail="Report not found")

    store.update_status(report_id, payload.status)
    return {"statusCode": 200, "message": "Status updated", "data": {"id": report_id, "status": payload.status}}


@router.delete("/{report_id}")
def delete_report(report_id: str, store: ReportStore = Depends(get_report_store)):
    if not store.delete(report_id):
        raise HTTPException(status_code=404, detail="Report not found")
    return {
        "statusCode": 200,
        "message": "Report deleted",
        "data": None,
    }
