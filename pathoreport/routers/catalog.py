from fastapi import APIRouter, HTTPException

from pathoreport.schemas.report import BuildTestGroupRequest
from pathoreport.services.builder import build_test_group
from pathoreport.services.catalog import get_template, list_templates
from pathoreport.services.errors import TemplateNotSelectedError

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("")
def catalog():
    return {
        "statusCode": 200,
        "message": "Success",
        "data": [template.model_dump(by_alias=True) for template in list_templates()],
    }


@router.get("/{template_id}")
def template_detail(template_id: str):
    template = get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Test template not found")
    return {"statusCode": 200, "message": "Success", "data": template.model_dump(by_alias=True)}


@router.post("/{template_id}/build")
def build(template_id: str, payload: BuildTestGroupRequest):
    template = get_template(template_id)
    if template is None:
        raise TemplateNotSelectedError(template_id)
    group = build_test_group(template, payload.values, payload.status)
    return {"statusCode": 200, "message": "Test group built", "data": group.to_record()}
