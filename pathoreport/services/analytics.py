from collections.abc import Sequence
from datetime import datetime, timezone

from pathoreport.config import settings
from pathoreport.schemas.dashboard import DashboardSummary
from pathoreport.schemas.report import Report

CSV_HEADER = ("Patient Name", "Date", "Total Price")


def _utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def today_token(now: datetime) -> str:
    return _utc(now).date().isoformat()


def month_token(now: datetime) -> str:
    return _utc(now).strftime("%Y-%m")


def _created_with_prefix(reports: Sequence[Report], prefix: str) -> list[Report]:
    return [report for report in reports if report.created_at and report.created_at.startswith(prefix)]


def unique_patient_count(reports: Sequence[Report]) -> int:
    # Patients are only identified by name; two people sharing a name count once.
    return len({report.patient.name for report in reports})


def lifetime_revenue(reports: Sequence[Report]) -> int | float:
    return sum(report.total_price or 0 for report in reports)


def today_reports(reports: Sequence[Report], now: datetime) -> list[Report]:
    return _created_with_prefix(reports, today_token(now))


def monthly_revenue(reports: Sequence[Report], month: str) -> int | float:
    return sum(report.total_price or 0 for report in _created_with_prefix(reports, month))


def recent_today(reports: Sequence[Report], now: datetime, limit: int | None = None) -> list[Report]:
    limit = settings.recent_reports_limit if limit is None else limit
    return today_reports(reports, now)[:limit]


def build_dashboard(reports: Sequence[Report], now: datetime, selected_month: str | None = None) -> DashboardSummary:
    month = selected_month or month_token(now)
    todays = today_reports(reports, now)
    return DashboardSummary(
        total_patients=unique_patient_count(reports),
        total_revenue=lifetime_revenue(reports),
        today_count=len(todays),
        selected_month=month,
        monthly_revenue=monthly_revenue(reports, month),
        recent_reports=todays[: settings.recent_reports_limit],
    )


def _format_price(value: int | float | None) -> str:
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def export_csv(reports: Sequence[Report]) -> str:
    # Cells are joined verbatim; a comma inside a patient name shifts that row's columns.
    rows = [",".join(CSV_HEADER)]
    for report in reports:
        created = report.created_at.split("T")[0] if report.created_at else ""
        rows.append(",".join([report.patient.name, created, _format_price(report.total_price)]))
    return "\n".join(rows)
