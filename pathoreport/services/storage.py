import json
import logging
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.orm import Session

from pathoreport.config import settings
from pathoreport.models.stored_document import StoredDocument
from pathoreport.schemas.report import Report, ReportStatus
from pathoreport.services.migrator import RecordShape, detect_shape, migrate_all

logger = logging.getLogger(__name__)


class KeyValueProvider(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueProvider:
    def __init__(self, initial: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class SqlKeyValueProvider:
    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> str | None:
        row = self.db.query(StoredDocument).filter(StoredDocument.key == key).first()
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = self.db.query(StoredDocument).filter(StoredDocument.key == key).first()
        if row is None:
            row = StoredDocument(key=key, value=value)
        else:
            row.value = value
        self.db.add(row)
        self.db.commit()


class ReportStore:
    """The persisted report collection.

    Every operation reads or writes the whole collection under one key. Reads
    always return current-shape reports; a missing or unreadable document reads
    as an empty collection.
    """

    def __init__(self, provider: KeyValueProvider, key: str | None = None):
        self.provider = provider
        self.key = key or settings.storage_key

    def load(self) -> list[Report]:
        stored = self.provider.get(self.key)
        if not stored:
            return []
        try:
            parsed = json.loads(stored)
        except json.JSONDecodeError as exc:
            logger.warning("Error reading reports under %r: %s", self.key, exc)
            return []
        if not isinstance(parsed, list):
            logger.warning("Error reading reports under %r: expected a list, got %s", self.key, type(parsed).__name__)
            return []
        reports = migrate_all(parsed)
        if any(detect_shape(record) is not RecordShape.CURRENT for record in parsed):
            self.save(reports)
        return reports

    def save(self, reports: Sequence[Report]) -> None:
        payload = json.dumps([report.to_record() for report in reports], ensure_ascii=False, separators=(",", ":"))
        self.provider.set(self.key, payload)
        logger.info("Saved %d reports under %r", len(reports), self.key)

    def get_by_id(self, report_id: str) -> Report | None:
        return next((report for report in self.load() if report.id == report_id), None)

    def update_status(self, report_id: str, status: ReportStatus) -> None:
        reports = self.load()
        for report in reports:
            if report.id == report_id:
                report.status = status
                self.save(reports)
                return

    def initialize(self, sample_records: Sequence[dict]) -> list[Report]:
        """Load the collection, persisting ``sample_records`` first if nothing is stored yet."""
        reports = self.load()
        if reports:
            return reports
        reports = migrate_all(list(sample_records))
        self.save(reports)
        return reports

    def add(self, report: Report) -> list[Report]:
        reports = [report, *self.load()]
        self.save(reports)
        return reports

    def replace(self, report: Report) -> bool:
        reports = self.load()
        for index, existing in enumerate(reports):
            if existing.id == report.id:
                reports[index] = report
                self.save(reports)
                return True
        return False

    def delete(self, report_id: str) -> bool:
        reports = self.load()
        remaining = [report for report in reports if report.id != report_id]
        if len(remaining) == len(reports):
            return False
        self.save(remaining)
        return True

    def restore(self, reports: Sequence[Report]) -> None:
        logger.info("Restoring %d reports over the stored collection", len(reports))
        self.save(list(reports))
