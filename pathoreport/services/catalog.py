from pathoreport.schemas.catalog import TestTemplate
from pathoreport.seed.templates import TEST_TEMPLATES

CATALOG: tuple[TestTemplate, ...] = tuple(TestTemplate.model_validate(item) for item in TEST_TEMPLATES)
_BY_ID: dict[str, TestTemplate] = {template.id: template for template in CATALOG}

if len(_BY_ID) != len(CATALOG):
    raise RuntimeError("Test template ids must be unique")


def list_templates() -> tuple[TestTemplate, ...]:
    return CATALOG


def get_template(template_id: str | None) -> TestTemplate | None:
    if not template_id:
        return None
    return _BY_ID.get(template_id)
