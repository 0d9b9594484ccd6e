import pytest

from dslab.polynomial import Polynomial, Term


def evaluate(poly, x):
    return sum(term.coeff * x**term.exp for term in poly)


P1_SUM = Polynomial([(5, 2), (4, 1), (2, 0)])
P2_SUM = Polynomial([(3, 3), (2, 2), (1, 0)])
P1_MUL = Polynomial([(3, 2), (2, 1)])
P2_MUL = Polynomial([(1, 1), (4, 0)])


def test_str_format():
    assert str(P1_MUL) == "3x^2 + 2x^1"
    assert str(Polynomial()) == ""


def test_terms_from_tuples_and_terms_equal():
    assert Polynomial([Term(3, 2), Term(2, 1)]) == P1_MUL
    assert list(P1_MUL) == [Term(3, 2), Term(2, 1)]


def test_addition_example():
    assert str(P1_SUM + P2_SUM) == "3x^3 + 7x^2 + 4x^1 + 3x^0"


def test_addition_commutes():
    assert P1_SUM + P2_SUM == P2_SUM + P1_SUM


@pytest.mark.parametrize("x", [-2, 0, 1, 3])
def test_addition_evaluates_to_sum(x):
    total = P1_SUM + P2_SUM
    assert evaluate(total, x) == evaluate(P1_SUM, x) + evaluate(P2_SUM, x)


def test_addition_with_empty_is_identity():
    assert P1_SUM + Polynomial() == P1_SUM
    assert Polynomial() + P1_SUM == P1_SUM


def test_multiplication_example():
    assert str(P1_MUL * P2_MUL) == "3x^3 + 14x^2 + 8x^1"


@pytest.mark.parametrize("x", [-3, 0, 2, 5])
def test_multiplication_evaluates_to_product(x):
    product = P1_SUM * P2_SUM
    assert evaluate(product, x) == evaluate(P1_SUM, x) * evaluate(P2_SUM, x)


def test_multiplication_exponents_strictly_decreasing():
    exps = [term.exp for term in P1_SUM * P2_SUM]
    assert exps == sorted(set(exps), reverse=True)


def test_multiplication_commutes_and_empty():
    assert P1_MUL * P2_MUL == P2_MUL * P1_MUL
    assert list(P1_MUL * Polynomial()) == []


def test_operand_type_rejected():
    poly = Polynomial([(3, 2), (2, 1)])
    with pytest.raises(TypeError):
        poly + 3
    with pytest.raises(TypeError):
        poly * "x"
    assert str(poly) == "3x^2 + 2x^1"
    assert list(poly) == [Term(3, 2), Term(2, 1)]