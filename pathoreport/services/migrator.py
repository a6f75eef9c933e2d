"""Normalization of stored records into the current ``Report`` shape.

Two on-disk shapes exist. Current records carry a ``tests`` array of test
groups. Legacy records predate multi-test reports and hold a single
``testType``/``testResults`` pair plus a ``price``. Anything else is treated as
unknown and degrades to a report with no tests. Unreadable values inside a
recognised record are reset one by one; the rest of the record is kept. The
shape is sniffed once here; past this point only ``Report`` exists.
"""
import copy
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from pathoreport.schemas.report import Report
from pathoreport.services.builder import compute_total_price, new_id

logger = logging.getLogger(__name__)

_MAX_REPAIR_PASSES = 5


class RecordShape(str, Enum):
    CURRENT = "current"
    LEGACY = "legacy"
    UNKNOWN = "unknown"


def detect_shape(record: Any) -> RecordShape:
    if isinstance(record, Report):
        return RecordShape.CURRENT
    if not isinstance(record, Mapping):
        return RecordShape.UNKNOWN
    if isinstance(record.get("tests"), list):
        return RecordShape.CURRENT
    if record.get("testType") and record.get("testResults") is not None:
        return RecordShape.LEGACY
    return RecordShape.UNKNOWN


def _legacy_price(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value or 0


def _locate(data: dict[str, Any], loc: tuple) -> tuple[Any, Any] | None:
    """Follow an error location to the deepest stored value it names; return (container, key)."""
    container, key = None, None
    current: Any = data
    for step in loc:
        if isinstance(current, dict) and isinstance(step, str):
            if step not in current and to_snake(step) in current:
                step = to_snake(step)
            if step not in current:
                break
        elif isinstance(current, list) and isinstance(step, int):
            if not 0 <= step < len(current):
                break
        else:
            break
        container, key = current, step
        current = current[step]
    if container is None:
        return None
    return container, key


def _validate(data: dict[str, Any]) -> Report:
    """Validate ``data``, resetting only the values that cannot be read.

    A bad leaf falls back to its field default; a test group or result that is
    not an object at all is dropped. Everything readable is kept.
    """
    data = copy.deepcopy(data)
    reprice = False
    for _ in range(_MAX_REPAIR_PASSES):
        try:
            report = Report.model_validate(data)
        except ValidationError as exc:
            targets = [_locate(data, tuple(err["loc"])) for err in exc.errors()]
            targets = [target for target in targets if target is not None]
            if not targets:
                break
            dropped: dict[int, tuple[list, set[int]]] = {}
            for container, key in targets:
                if isinstance(container, list):
                    dropped.setdefault(id(container), (container, set()))[1].add(key)
                    reprice = reprice or container is data.get("tests")
                else:
                    container.pop(key, None)
                    reprice = reprice or (key == "price" and _is_group(data, container))
            for container, indexes in dropped.values():
                for index in sorted(indexes, reverse=True):
                    del container[index]
            logger.warning(
                "Reset unreadable values %s on report %r",
                sorted({".".join(str(step) for step in err["loc"]) for err in exc.errors()}),
                data.get("id"),
            )
            continue
        if reprice:
            report.total_price = compute_total_price(report.tests)
        return report

    logger.warning("Report %r could not be repaired; loaded with no tests", data.get("id"))
    return Report.model_validate({"id": str(data.get("id", "")), "tests": [], "totalPrice": 0})


def _is_group(data: dict[str, Any], container: dict) -> bool:
    tests = data.get("tests")
    return isinstance(tests, list) and any(group is container for group in tests)


def migrate(record: Any) -> Report:
    """Return ``record`` as a current-shape report; never raises.

    Legacy keys are left in place next to the synthesized ``tests`` array so
    consumers that still read them keep working.
    """
    shape = detect_shape(record)
    if isinstance(record, Report):
        return record
    if not isinstance(record, Mapping):
        logger.warning("Replacing non-object report record of type %s", type(record).__name__)
        record = {}

    data = dict(record)
    if shape is RecordShape.LEGACY:
        price = _legacy_price(data.get("price"))
        data["tests"] = [
            {
                "id": new_id("TG"),
                "testType": data["testType"],
                "price": price,
                "testResults": data["testResults"],
            }
        ]
        data["totalPrice"] = price
        logger.info("Migrated legacy report %r", data.get("id"))
    elif shape is RecordShape.UNKNOWN:
        data["tests"] = []
        data["totalPrice"] = 0
        logger.warning("Report %r has no recognizable tests; loaded with none", data.get("id"))
    return _validate(data)


def migrate_all(records: list[Any]) -> list[Report]:
    return [migrate(record) for record in records]
