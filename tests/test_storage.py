import json

import pytest

from pathoreport.models.stored_document import StoredDocument
from pathoreport.seed.sample_reports import SAMPLE_REPORTS
from pathoreport.services.storage import InMemoryKeyValueProvider, ReportStore


def _store_with(raw: str) -> ReportStore:
    return ReportStore(InMemoryKeyValueProvider({"reports": raw}), key="reports")


def test_load_without_document_is_empty(memory_store):
    assert memory_store.load() == []


@pytest.mark.parametrize("raw", ["not json", "{\"id\": \"RPT001\"}", "42", "null", ""])
def test_load_of_unreadable_document_is_empty(raw):
    assert _store_with(raw).load() == []


def test_load_migrates_every_record_in_order():
    raw = json.dumps(
        [
            {"id": "A", "testType": "Lipid Profile", "testResults": [], "price": 800},
            SAMPLE_REPORTS[0],
            {"id": "C"},
        ]
    )
    reports = _store_with(raw).load()

    assert [r.id for r in reports] == ["A", "RPT001", "C"]
    assert reports[0].tests[0].test_type == "Lipid Profile"
    assert reports[0].total_price == 800
    assert reports[1].total_price == 300
    assert reports[2].tests == []


def test_legacy_records_are_written_back_in_current_shape():
    store = _store_with(json.dumps([{"id": "R3", "testType": "CBC", "testResults": [], "price": 300}]))

    first = store.load()
    second = store.load()

    assert first[0].tests[0].id == second[0].tests[0].id
    assert second == first
    stored = json.loads(store.provider.get("reports"))
    assert stored[0]["tests"][0]["id"] == first[0].tests[0].id
    assert stored[0]["totalPrice"] == 300


def test_current_documents_are_not_rewritten_on_load(sample_reports):
    raw = json.dumps([report.to_record() for report in sample_reports])
    store = _store_with(raw)

    store.load()

    assert store.provider.get("reports") == raw


def test_save_replaces_whole_collection(memory_store, sample_reports):
    memory_store.save(sample_reports)
    assert memory_store.load() == sample_reports

    memory_store.save(sample_reports[:1])
    assert [r.id for r in memory_store.load()] == ["RPT001"]

    stored = json.loads(memory_store.provider.get("test_reports"))
    assert stored[0]["patient"]["patientId"] == "PAT-2024-001"
    assert stored[0]["totalPrice"] == 300


def test_get_by_id(memory_store, sample_reports):
    memory_store.save(sample_reports)

    assert memory_store.get_by_id("RPT002").patient.name == "Emma Wilson"
    assert memory_store.get_by_id("RPT999") is None


def test_update_status_changes_only_status(memory_store, sample_reports):
    memory_store.save(sample_reports)
    memory_store.update_status("RPT001", "In Progress")

    updated = memory_store.get_by_id("RPT001")
    assert updated.status == "In Progress"
    assert updated.model_copy(update={"status": "Completed"}) == sample_reports[0]
    assert memory_store.get_by_id("RPT002").status == "Completed"


def test_update_status_of_unknown_id_is_noop(memory_store, sample_reports):
    memory_store.save(sample_reports)
    before = memory_store.provider.get("test_reports")

    memory_store.update_status("RPT999", "Pending")
    assert memory_store.provider.get("test_reports") == before


def test_add_replace_delete(memory_store, sample_reports):
    memory_store.save(sample_reports[1:])
    memory_store.add(sample_reports[0])
    assert [r.id for r in memory_store.load()] == ["RPT001", "RPT002"]

    renamed = sample_reports[0].model_copy(update={"collected_by": "Dr. Iqbal"})
    assert memory_store.replace(renamed) is True
    assert memory_store.get_by_id("RPT001").collected_by == "Dr. Iqbal"
    assert memory_store.replace(renamed.model_copy(update={"id": "RPT404"})) is False

    assert memory_store.delete("RPT001") is True
    assert memory_store.delete("RPT001") is False
    assert [r.id for r in memory_store.load()] == ["RPT002"]


def test_initialize_seeds_only_empty_store(memory_store):
    seeded = memory_store.initialize(SAMPLE_REPORTS)
    assert [r.id for r in seeded] == ["RPT001", "RPT002"]

    memory_store.delete("RPT002")
    assert [r.id for r in memory_store.initialize(SAMPLE_REPORTS)] == ["RPT001"]


def test_restore_overwrites_collection(memory_store, sample_reports):
    memory_store.save(sample_reports)
    memory_store.restore(sample_reports[1:])
    assert [r.id for r in memory_store.load()] == ["RPT002"]


def test_sql_provider_round_trip(db_store, db_session, sample_reports):
    assert db_store.load() == []

    db_store.save(sample_reports)
    db_store.save(sample_reports[:1])

    rows = db_session.query(StoredDocument).all()
    assert len(rows) == 1
    assert rows[0].key == "pathoreport_reports"
    assert [r.id for r in db_store.load()] == ["RPT001"]
