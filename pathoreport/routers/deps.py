from datetime import datetime, timezone

from fastapi import Depends
from sqlalchemy.orm import Session

from pathoreport.database import get_db
from pathoreport.services.storage import ReportStore, SqlKeyValueProvider


def get_report_store(db: Session = Depends(get_db)) -> ReportStore:
    return ReportStore(SqlKeyValueProvider(db))


def get_now() -> datetime:
    return datetime.now(timezone.utc)
