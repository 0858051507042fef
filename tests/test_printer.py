import io
import pytest
from exprtree.errors import ExpressionError
from exprtree.parser import parse_expression
from exprtree.printer import format_number, print_tree, tree_to_dict, tree_to_lines, tree_to_text

def test_binary_dump():
    assert tree_to_text(parse_expression("1+2")) == "\n".join([
        "Operator: +",
        "Left:",
        "  Operand: 1",
        "Right:",
        "  Operand: 2",
    ])

def test_nested_dump_indents_each_level():
    assert tree_to_text(parse_expression("1*(2-3)")) == "\n".join([
        "Operator: *",
        "Left:",
        "  Operand: 1",
        "Right:",
        "  Operator: -",
        "  Left:",
        "    Operand: 2",
        "  Right:",
        "    Operand: 3",
    ])

def test_unary_renders_null_left():
    assert tree_to_text(parse_expression("-3")) == "\n".join([
        "Operator: u",
        "Left:",
        "  (null)",
        "Right:",
        "  Operand: 3",
    ])

def test_print_tree_writes_to_sink_and_is_idempotent():
    ast = parse_expression("-(1.5+2)^2/4")
    first, second = io.StringIO(), io.StringIO()
    print_tree(ast, first)
    print_tree(ast, second)
    assert first.getvalue() == second.getvalue()
    assert first.getvalue().endswith("\n")
    assert first.getvalue().splitlines()[0] == "Operator: /"

def test_print_tree_defaults_to_stdout(capsys):
    print_tree(parse_expression("42"))
    assert capsys.readouterr().out == "Operand: 42\n"

def test_format_number():
    assert format_number(7.0) == "7"
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(1 / 3) == "0.333333"
    assert format_number(1 / 3, precision=3) == "0.333"
    assert format_number(1e20) == "1e+20"
    assert format_number(float("nan")) == "nan"
    assert format_number(float("inf")) == "inf"

def test_tree_to_dict():
    assert tree_to_dict(parse_expression("-2*3")) == {
        "type": "Operator", "op": "*",
        "left": {"type": "Operator", "op": "u", "left": None,
                 "right": {"type": "Operand", "value": 2.0}},
        "right": {"type": "Operand", "value": 3.0},
    }

def test_long_chain_dump():
    lines = tree_to_lines(parse_expression("+".join(["1"] * 2000)))
    assert len(lines) == 3 * 1999 + 2000
    assert lines[:3] == ["Operator: +", "Left:", "  Operator: +"]
    assert lines[-2:] == ["Right:", "  Operand: 1"]

def test_tree_to_dict_depth_limit():
    chain = parse_expression("+".join(["1"] * 2000))
    assert tree_to_dict(chain)["right"] == {"type": "Operand", "value": 1.0}
    with pytest.raises(ExpressionError, match="too deeply to export"):
        tree_to_dict(chain, max_depth=200)
    assert tree_to_dict(parse_expression("1+2"), max_depth=2)["op"] == "+"
