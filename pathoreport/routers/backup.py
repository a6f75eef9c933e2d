import logging
from datetime import datetime

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import Response

from pathoreport.routers.deps import get_now, get_report_store
from pathoreport.services.backup import backup_filename, export_backup, import_backup
from pathoreport.services.storage import ReportStore

router = APIRouter(prefix="/api/backup", tags=["backup"])
logger = logging.getLogger(__name__)


@router.get("")
def backup(store: ReportStore = Depends(get_report_store), now: datetime = Depends(get_now)):
    filename = backup_filename(now.date())
    return Response(
        content=export_backup(store.load()),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/restore")
async def restore(
    file: UploadFile = File(...),
    confirm: bool = Query(default=False),
    store: ReportStore = Depends(get_report_store),
):
    if not file.filename or not file.filename.lower().endswith(".json"):
        raise HTTPException(status_code=400, detail="Please upload a JSON backup file")

    incoming = import_backup(await file.read())
    current_count = len(store.load())
    if not confirm:
        return {
            "statusCode": 200,
            "message": f"This will replace {current_count} reports with {len(incoming)}. Continue?",
            "data": {"restored": False, "current_count": current_count, "incoming_count": len(incoming)},
        }

    store.restore(incoming)
    logger.info("Restored backup %s", file.filename)
    return {
        "statusCode": 200,
        "message": "Data restored successfully",
        "data": {"restored": True, "current_count": current_count, "incoming_count": len(incoming)},
    }
