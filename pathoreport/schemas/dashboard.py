from pydantic import BaseModel

from pathoreport.schemas.report import Report


class DashboardSummary(BaseModel):
    total_patients: int
    total_revenue: int | float
    today_count: int
    selected_month: str
    monthly_revenue: int | float
    recent_reports: list[Report]
