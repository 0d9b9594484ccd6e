import pytest

from dslab.expressions import (
    evaluate_postfix,
    evaluate_prefix,
    infix_to_postfix,
    infix_to_prefix,
    precedence,
)

EXPRESSIONS = ["a+b*c", "(a+b)*c", "a*(b-c)/d", "x^y+z", "(p+q)*(r-s)"]


@pytest.mark.parametrize(
    "operator, expected",
    [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", 0)],
)
def test_precedence(operator, expected):
    assert precedence(operator) == expected


def test_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_postfix_respects_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_prefix_respects_parentheses():
    assert infix_to_prefix("(a+b)*c") == "*+abc"


def test_spaces_are_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")
    assert infix_to_prefix(" ( a + b ) * c ") == infix_to_prefix("(a+b)*c")


@pytest.mark.parametrize("expression", EXPRESSIONS)
@pytest.mark.parametrize("convert", [infix_to_postfix, infix_to_prefix])
def test_operand_order_is_preserved(expression, convert):
    result = convert(expression)
    assert [c for c in result if c.isalnum()] == [
        c for c in expression if c.isalnum()
    ]


@pytest.mark.parametrize("expression", EXPRESSIONS)
@pytest.mark.parametrize("convert", [infix_to_postfix, infix_to_prefix])
def test_parentheses_are_dropped(expression, convert):
    result = convert(expression)
    assert "(" not in result and ")" not in result
    assert len(result) == sum(1 for c in expression if c not in "() ")


@pytest.mark.parametrize(
    "expression, value",
    [
        ("2+3*4", 2 + 3 * 4),
        ("(1+2)*(3+4)", (1 + 2) * (3 + 4)),
        ("8-2*3", 8 - 2 * 3),
        ("(9-4)*2", (9 - 4) * 2),
    ],
)
def test_conversion_round_trips_through_evaluation(expression, value):
    assert evaluate_postfix(" ".join(infix_to_postfix(expression))) == value
    assert evaluate_prefix(" ".join(infix_to_prefix(expression))) == value


def test_postfix_multi_digit_numbers():
    assert evaluate_postfix("12 3 +") == 12 + 3
    assert evaluate_postfix("100 25 -") == 100 - 25


def test_prefix_operand_order():
    assert evaluate_prefix("- 20 5") == 20 - 5
    assert evaluate_prefix("/ 20 5") == 20 // 5


def test_division_truncates_toward_zero():
    positive = evaluate_postfix("10 3 - 2 /")
    negative = evaluate_postfix("3 10 - 2 /")
    assert negative == -positive
    assert evaluate_prefix("/ - 3 10 2") == negative


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("4 0 /")
    with pytest.raises(ZeroDivisionError):
        evaluate_prefix("/ 4 0")