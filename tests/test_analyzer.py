from exprtree.analyzer import analyze
from exprtree.parser import parse_expression

def test_analyze_counts():
    an = analyze(parse_expression("-(1+2)*3^2"))
    assert an.operands == 4
    assert dict(an.operators) == {"u": 1, "+": 1, "*": 1, "^": 1}
    assert an.depth == 4

def test_analyze_leaf():
    an = analyze(parse_expression("5"))
    assert (an.depth, an.operands, len(an.operators)) == (1, 1, 0)

def test_analyze_long_chain():
    an = analyze(parse_expression("*".join(["2"] * 2000)))
    assert (an.depth, an.operands, dict(an.operators)) == (2000, 2000, {"*": 1999})
