from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TestParameter(BaseModel):
    """A single measured analyte of a catalog test and its reference range."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    test_name: str
    unit: str = ""
    normal_range: str = Field(description="'<min>-<max>', '<max', '>min' or free text such as 'Negative'")


class TestTemplate(BaseModel):
    """Catalog-defined test type with a fixed parameter list and price."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    price: int | float
    parameters: tuple[TestParameter, ...]
