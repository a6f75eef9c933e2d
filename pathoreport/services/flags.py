"""Reference-range parsing and result flagging.

Ranges come in three textual encodings: ``"<min>-<max>"``, ``"<max"`` and
``">min"``. Anything else (``"Negative"``, ``"Pale Yellow"``) is qualitative
and never flags.
"""
import math
import re

from pathoreport.schemas.report import Flag

NOT_COLLECTED = "---"

_LEADING_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_BOUND_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_value(raw: str | None) -> float | None:
    """Read the leading decimal number of an entered value ("12.5 mg" -> 12.5)."""
    if not raw:
        return None
    match = _LEADING_NUMBER_RE.match(raw)
    if not match:
        return None
    return float(match.group(0))


def _parse_bound(text: str) -> float:
    # Malformed or empty bounds become NaN; every comparison against NaN is false.
    text = text.strip()
    if not _BOUND_RE.fullmatch(text):
        return math.nan
    return float(text)


def _parse_leading_bound(text: str) -> float:
    value = parse_value(text)
    return math.nan if value is None else value


def evaluate(raw_value: str | None, normal_range: str) -> Flag | None:
    if not raw_value or raw_value == NOT_COLLECTED:
        return None
    value = parse_value(raw_value)
    if value is None:
        return None

    if "-" in normal_range:
        parts = normal_range.split("-")
        low, high = _parse_bound(parts[0]), _parse_bound(parts[1])
        if not math.isnan(high) and value > high:
            return "high"
        if not math.isnan(low) and value < low:
            return "low"
    elif normal_range.startswith("<"):
        # Upper bound only: a "<" range never reports low.
        high = _parse_leading_bound(normal_range[1:])
        if not math.isnan(high) and value >= high:
            return "high"
    elif normal_range.startswith(">"):
        low = _parse_leading_bound(normal_range[1:])
        if not math.isnan(low) and value <= low:
            return "low"
    return "normal"


def is_abnormal(flag: Flag | None) -> bool:
    return flag is not None and flag != "normal"
