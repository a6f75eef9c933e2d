from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Flag = Literal["high", "low", "normal"]
Gender = Literal["Male", "Female", "Other"]
ReportStatus = Literal["Pending", "In Progress", "Completed"]

REPORT_STATUSES: tuple[str, ...] = ("Pending", "In Progress", "Completed")


class StoredModel(BaseModel):
    """Base for persisted shapes.

    Field names are snake_case in Python and camelCase on disk. Unknown keys are
    kept as extras so that records written by older or newer versions survive a
    load/save cycle untouched.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Patient(StoredModel):
    id: str = ""
    patient_id: str = Field(default="", description="Display code, PAT-<year>-<NNN>")
    name: str = ""
    age: int = 0
    gender: Gender = "Other"
    phone: str = ""


class TestResult(StoredModel):
    id: str = ""
    test_name: str = ""
    value: str = ""
    unit: str = ""
    normal_range: str = ""
    is_abnormal: bool = False
    flag: Flag | None = None


class TestGroup(StoredModel):
    id: str = ""
    test_type: str = ""
    price: int | float = 0
    test_results: list[TestResult] = Field(default_factory=list)


class Report(StoredModel):
    id: str = ""
    patient: Patient = Field(default_factory=Patient)
    tests: list[TestGroup] = Field(default_factory=list)
    date: str = ""
    status: ReportStatus = "Pending"
    collected_by: str = ""
    verified_by: str | None = None
    total_price: int | float = 0
    created_at: str | None = None


class PatientDetails(BaseModel):
    """Patient fields an operator fills in on the report form."""
    name: str = ""
    age: int | None = None
    gender: Gender = "Male"
    phone: str = ""


class ReportDraft(BaseModel):
    patient: PatientDetails
    tests: list[TestGroup] = Field(default_factory=list)
    status: ReportStatus = "Pending"


class StatusUpdate(BaseModel):
    status: ReportStatus


class BuildTestGroupRequest(BaseModel):
    values: dict[str, str] = Field(default_factory=dict, description="Raw values keyed by parameter id")
    status: ReportStatus = "Pending"
