import math
from collections.abc import Sequence
from typing import TypeVar

from pathoreport.schemas.report import Report, ReportStatus, TestResult

T = TypeVar("T")


def search_reports(reports: Sequence[Report], term: str = "", status: ReportStatus | None = None) -> list[Report]:
    """Filter by a case-insensitive term over patient name, test types and patient code."""
    needle = term.strip().lower()
    matched = []
    for report in reports:
        if status is not None and report.status != status:
            continue
        if needle and not (
            needle in report.patient.name.lower()
            or any(needle in test.test_type.lower() for test in report.tests)
            or needle in report.patient.patient_id.lower()
        ):
            continue
        matched.append(report)
    return matched


def paginate(items: Sequence[T], page: int, per_page: int) -> tuple[list[T], int]:
    total_pages = math.ceil(len(items) / per_page) if per_page > 0 else 0
    start = (page - 1) * per_page
    return list(items[start : start + per_page]), total_pages


def flagged_results(report: Report) -> list[TestResult]:
    return [result for test in report.tests for result in test.test_results if result.is_abnormal]
