import math
import numpy as np
import pytest
from exprtree.errors import DivisionByZeroError, EvaluationError
from exprtree.evaluator import evaluate
from exprtree.parser import Operand, Operator, parse_expression

def ev(src):
    return evaluate(parse_expression(src))

@pytest.mark.parametrize("src,expected", [
    ("1+2*3", 7.0),
    ("10-4-3", 3.0),
    ("100/10/5", 2.0),
    ("2*3+4*5", 26.0),
    ("7-2*3", 1.0),
    ("(2+3)*4", 20.0),
    ("2^3^2", 64.0),
    ("-2^2", 4.0),
    ("2*3^2", 18.0),
    ("--5", 5.0),
    ("-+5", -5.0),
    ("+5", 5.0),
    ("3--2", 5.0),
    ("2^-1", 0.5),
    ("1.5+.5", 2.0),
    (" 1 + 2 ", 3.0),
    ("0/5", 0.0),
])
def test_eval_values(src, expected):
    assert ev(src) == pytest.approx(expected)

def test_result_is_plain_float():
    assert type(ev("2^3")) is float
    assert type(ev("1+1")) is float

def test_fractional_power():
    assert ev("2^0.5") == pytest.approx(math.sqrt(2))

def test_ieee_pow_semantics():
    assert math.isnan(ev("(-8)^(1/3)"))
    assert ev("0^-1") == math.inf
    assert ev("0^0") == 1.0

@pytest.mark.parametrize("src", ["5/0", "5/(2-2)", "1/-0", "1/(0*3)"])
def test_division_by_zero(src):
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        ev(src)

def test_division_by_zero_is_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        ev("1/0")

def test_unknown_operator():
    with pytest.raises(EvaluationError, match="Unknown operator"):
        evaluate(Operator("%", Operand(1.0), Operand(2.0)))
    with pytest.raises(EvaluationError, match="Unknown operator"):
        evaluate(Operator("!", None, Operand(2.0)))

def test_method_form():
    assert parse_expression("6/4").evaluate() == 1.5

def test_evaluation_does_not_mutate_tree():
    ast = parse_expression("(1+2)*-3")
    before = repr(ast)
    assert evaluate(ast) == evaluate(ast) == -9.0
    assert repr(ast) == before

def _int_expr(rng, depth):
    if depth == 0 or rng.random() < 0.3:
        return str(int(rng.integers(0, 10)))
    op = str(rng.choice(["+", "-", "*", "/"]))
    left, right = _int_expr(rng, depth - 1), _int_expr(rng, depth - 1)
    if rng.random() < 0.3:
        return f"({left}{op}{right})"
    return f"{left}{op}{right}"

@pytest.mark.parametrize("seed", range(20))
def test_matches_standard_infix_arithmetic(seed):
    rng = np.random.default_rng(seed)
    src = _int_expr(rng, 4)
    try:
        expected = eval(src)  # python shares precedence/associativity for + - * /
    except ZeroDivisionError:
        with pytest.raises(DivisionByZeroError):
            ev(src)
        return
    assert ev(src) == pytest.approx(expected)

CHAIN = "+".join(["1"] * 2000)

@pytest.mark.parametrize("src,expected", [
    (CHAIN, 2000.0),
    ("*".join(["1"] * 2000), 1.0),
    ("-".join(["1"] * 2000), -1998.0),
    ("^".join(["1"] * 2000), 1.0),
    ("-" * 300 + "4", 4.0),
])
def test_long_operator_chains(src, expected):
    assert ev(src) == expected
