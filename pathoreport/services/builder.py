import logging
import random
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from uuid import uuid4

from pathoreport.config import settings
from pathoreport.schemas.catalog import TestTemplate
from pathoreport.schemas.report import Patient, PatientDetails, Report, ReportStatus, TestGroup, TestResult
from pathoreport.services.errors import ReportInputError, TemplateNotSelectedError
from pathoreport.services.flags import NOT_COLLECTED, evaluate, is_abnormal

logger = logging.getLogger(__name__)

# A blank value on a report that is no longer pending is recorded as a literal zero.
NOT_PENDING_DEFAULT = "0"


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


def utc_timestamp(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _default_value(report_status: ReportStatus) -> str:
    return NOT_COLLECTED if report_status == "Pending" else NOT_PENDING_DEFAULT


def build_test_group(
    template: TestTemplate | None,
    raw_values: Mapping[str, str],
    report_status: ReportStatus,
) -> TestGroup:
    """Turn a catalog template plus operator-entered values into a flagged test group.

    Price and the parameter snapshot are copied from the template so later
    catalog changes never alter a stored report.
    """
    if template is None:
        raise TemplateNotSelectedError()

    results: list[TestResult] = []
    for param in template.parameters:
        value = raw_values.get(param.id) or _default_value(report_status)
        flag = evaluate(value, param.normal_range)
        results.append(
            TestResult(
                id=new_id("TR"),
                test_name=param.test_name,
                value=value,
                unit=param.unit,
                normal_range=param.normal_range,
                is_abnormal=is_abnormal(flag),
                flag=flag,
            )
        )
    return TestGroup(id=new_id("TG"), test_type=template.name, price=template.price, test_results=results)


def compute_total_price(tests: Sequence[TestGroup]) -> int | float:
    return sum(test.price for test in tests)


def add_test_group(tests: Sequence[TestGroup], group: TestGroup) -> list[TestGroup]:
    return [*tests, group]


def remove_test_group(tests: Sequence[TestGroup], group_id: str) -> list[TestGroup]:
    return [test for test in tests if test.id != group_id]


def _patient_code(now: datetime) -> str:
    return f"PAT-{now.year}-{random.randint(0, 999):03d}"


def assemble_report(
    details: PatientDetails,
    tests: Sequence[TestGroup],
    status: ReportStatus,
    *,
    existing: Report | None = None,
    now: datetime | None = None,
) -> Report:
    """Build the report to persist from form input.

    Editing keeps every identity field of ``existing`` (report id, patient ids,
    date, collector, creation time); only patient details, status and tests
    change. ``total_price`` is always derived from ``tests``.
    """
    if not details.name.strip() or details.age is None:
        raise ReportInputError("Please fill in patient details")
    if not tests:
        raise ReportInputError("Please add at least one test")

    now = now or datetime.now(timezone.utc)
    tests = list(tests)
    if existing is not None:
        patient = existing.patient.model_copy(
            update={"name": details.name, "age": details.age, "gender": details.gender, "phone": details.phone}
        )
        return existing.model_copy(
            update={
                "patient": patient,
                "tests": tests,
                "status": status,
                "total_price": compute_total_price(tests),
            }
        )

    report = Report(
        id=new_id("RPT"),
        patient=Patient(
            id=new_id("P"),
            patient_id=_patient_code(now),
            name=details.name,
            age=details.age,
            gender=details.gender,
            phone=details.phone,
        ),
        tests=tests,
        date=now.astimezone(timezone.utc).date().isoformat(),
        status=status,
        collected_by=settings.default_collected_by,
        total_price=compute_total_price(tests),
        created_at=utc_timestamp(now),
    )
    logger.info("Assembled report %s with %d test groups", report.id, len(tests))
    return report
