import json
import logging
from collections.abc import Sequence
from datetime import date

from pathoreport.config import settings
from pathoreport.schemas.report import Report
from pathoreport.services.errors import MalformedDocumentError, UnexpectedShapeError
from pathoreport.services.migrator import migrate_all

logger = logging.getLogger(__name__)


def export_backup(reports: Sequence[Report]) -> str:
    return json.dumps([report.to_record() for report in reports], indent=2, ensure_ascii=False)


def backup_filename(today: date) -> str:
    return f"{settings.backup_filename_prefix}-{today.isoformat()}.json"


def import_backup(document: str | bytes) -> list[Report]:
    """Validate a backup document and return its reports in current shape.

    Backups from any earlier schema are accepted; every element goes through
    migration. Committing the result to the store is left to the caller.
    """
    try:
        parsed = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Rejected backup document: %s", exc)
        raise MalformedDocumentError("Failed to read backup file") from exc
    if not isinstance(parsed, list):
        logger.warning("Rejected backup document with top-level %s", type(parsed).__name__)
        raise UnexpectedShapeError("Invalid backup file")
    return migrate_all(parsed)
