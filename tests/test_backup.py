import json
from datetime import date

import pytest

from pathoreport.services.backup import backup_filename, export_backup, import_backup
from pathoreport.services.errors import BackupImportError, MalformedDocumentError, UnexpectedShapeError
from pathoreport.services.migrator import migrate, migrate_all

LEGACY = {
    "id": "RPT-OLD",
    "patient": {"id": "P5", "name": "Tom Baker", "age": 70, "gender": "Male", "patientId": "PAT-2022-005", "phone": ""},
    "testType": "Thyroid Panel",
    "testResults": [],
    "price": 1000,
    "date": "2022-06-01",
    "status": "Completed",
    "collectedBy": "Lab Technician",
}


def test_export_is_pretty_printed(sample_reports):
    document = export_backup(sample_reports)

    assert document.startswith('[\n  {\n    "id": "RPT001"')
    assert json.loads(document)[1]["patient"]["name"] == "Emma Wilson"
    assert "×10³/µL" in document


def test_round_trip_restores_normalized_collection(sample_reports):
    reports = sample_reports + [migrate(LEGACY)]
    assert import_backup(export_backup(reports)) == reports


def test_import_accepts_legacy_backups(sample_reports):
    raw = [report.to_record() for report in sample_reports] + [LEGACY]
    restored = import_backup(json.dumps(raw))

    assert [r.id for r in restored] == ["RPT001", "RPT002", "RPT-OLD"]
    assert restored[2].tests[0].test_type == "Thyroid Panel"
    assert restored[2].total_price == 1000
    assert restored[:2] == migrate_all(raw[:2])


def test_import_accepts_bytes():
    assert import_backup(b"[]") == []


@pytest.mark.parametrize("document", ["", "{not json", "[{]", b"\x80abc"])
def test_import_rejects_malformed_document(document):
    with pytest.raises(MalformedDocumentError):
        import_backup(document)


@pytest.mark.parametrize("document", ['{"reports": []}', '"RPT001"', "3", "null"])
def test_import_rejects_non_list_document(document):
    with pytest.raises(UnexpectedShapeError) as exc_info:
        import_backup(document)
    assert isinstance(exc_info.value, BackupImportError)


def test_backup_filename():
    assert backup_filename(date(2024, 1, 20)) == "pathoreport-backup-2024-01-20.json"
