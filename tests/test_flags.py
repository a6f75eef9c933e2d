import pytest

from pathoreport.services.flags import evaluate, is_abnormal, parse_value


@pytest.mark.parametrize(
    "value, normal_range, expected",
    [
        ("220", "<200", "high"),
        ("45", ">40", "normal"),
        ("130", "<150", "normal"),
        ("11.5", "4.5-11.0", "high"),
        ("14.2", "13.5-17.5", "normal"),
        ("3.9", "4.5-5.5", "low"),
        ("200", "<200", "high"),
        ("40", ">40", "low"),
        ("35", ">60", "low"),
    ],
)
def test_evaluate_known_cases(value, normal_range, expected):
    assert evaluate(value, normal_range) == expected


def test_min_max_range_boundaries():
    for value in (0, 4.4, 4.5, 7, 11.0, 11.01, 250):
        flag = evaluate(str(value), "4.5-11.0")
        if value > 11.0:
            assert flag == "high"
        elif value < 4.5:
            assert flag == "low"
        else:
            assert flag == "normal"


def test_upper_bound_range_never_reports_low():
    for value in (-50, 0, 99.9, 100, 150):
        flag = evaluate(str(value), "<100")
        assert flag == ("high" if value >= 100 else "normal")


def test_lower_bound_range_never_reports_high():
    for value in (0, 60, 60.5, 1000):
        flag = evaluate(str(value), ">60")
        assert flag == ("low" if value <= 60 else "normal")


@pytest.mark.parametrize("value", ["", "---", None])
def test_uncollected_values_have_no_flag(value):
    flag = evaluate(value, "13.5-17.5")
    assert flag is None
    assert is_abnormal(flag) is False


@pytest.mark.parametrize("value", ["Positive", "abc", "Pale Yellow", "nan"])
def test_non_numeric_values_have_no_flag(value):
    assert evaluate(value, "4.5-8.0") is None


@pytest.mark.parametrize("normal_range", ["Negative", "Pale Yellow", ""])
def test_qualitative_ranges_are_always_normal(normal_range):
    assert evaluate("5", normal_range) == "normal"


def test_malformed_bounds_fall_through_to_normal():
    assert evaluate("999", "abc-def") == "normal"
    assert evaluate("-999", "abc-10") == "normal"
    assert evaluate("11", "abc-10") == "high"
    assert evaluate("999", "<abc") == "normal"
    assert evaluate("-999", ">abc") == "normal"


def test_bounds_must_be_plain_decimals():
    assert evaluate("5000", "1_000-2_000") == "normal"
    assert evaluate("5000", "1000-2000") == "high"
    assert evaluate("999", "0-inf") == "normal"


def test_empty_lower_bound_is_skipped():
    # "-10-10" splits into "" and "10": only the upper bound is checked.
    assert evaluate("-5", "-10-10") == "normal"
    assert evaluate("11", "-10-10") == "high"


def test_leading_number_is_read_from_value():
    assert parse_value("12.5 mg/dL") == 12.5
    assert parse_value(" 7") == 7.0
    assert parse_value(".5") == 0.5
    assert parse_value("mg 12") is None
    assert evaluate("250 x10", "150-400") == "normal"


def test_is_abnormal():
    assert is_abnormal("high") is True
    assert is_abnormal("low") is True
    assert is_abnormal("normal") is False
    assert is_abnormal(None) is False
