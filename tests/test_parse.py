import pytest
from structlog.testing import capture_logs

from billsplit.utils.parse import AmountExpressionError, evaluate_expression, parse_amount


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12.50", 12.5),
        ("10+5", 15),
        ("3*4.5", 13.5),
        ("(20+10)/3", 10),
        ("-2 + 7", 5),
        ("$10 + 5", 15),
        ("", 0),
        ("abc", 0),
    ],
)
def test_evaluate_expression(text, expected):
    assert evaluate_expression(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["10+", "5/0", "2**3", "1..2", "(3"])
def test_evaluate_expression_rejects_invalid(text):
    with pytest.raises(AmountExpressionError):
        evaluate_expression(text)


def test_parse_amount_rounds_to_cents():
    assert parse_amount("10/3") == 3.33
    assert parse_amount("10/3", places=0) == 3


def test_parse_amount_invalid_falls_back_to_zero():
    with capture_logs() as logs:
        value = parse_amount("12+*")

    assert value == 0
    assert logs[0]["event"] == "amount.invalid_expression"
    assert logs[0]["text"] == "12+*"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("05+10", 15),
        ("007", 7),
        ("0.05", 0.05),
        ("1.05+00.5", 1.55),
        ("100-0", 100),
    ],
)
def test_evaluate_expression_leading_zeros(text, expected):
    assert evaluate_expression(text) == pytest.approx(expected)


@pytest.mark.parametrize(("text", "expected"), [("0.125", 0.13), ("10.125", 10.13), ("-0.125", -0.13)])
def test_parse_amount_rounds_half_up(text, expected):
    assert parse_amount(text) == expected


def test_parse_amount_too_long_falls_back_to_zero():
    with capture_logs() as logs:
        value = parse_amount("+".join(["1"] * 5000))

    assert value == 0
    assert logs[0]["event"] == "amount.invalid_expression"
