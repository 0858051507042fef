from lark import Lark, v_args
from lark.visitors import Transformer_NonRecursive
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

from .errors import ParseError
from .parser import Node, Operand, Operator, UNARY_MINUS, UNARY_PLUS

# Same rules as the recursive-descent parser. Left recursion keeps every
# binary level (including "^") folding left.
GRAMMAR = r"""
?start: expr
?expr: term
     | expr "+" term     -> add
     | expr "-" term     -> sub
?term: exponent
     | term "*" exponent -> mul
     | term "/" exponent -> div
?exponent: primary
     | exponent "^" primary -> pow
?primary: NUMBER         -> number
     | "-" primary       -> neg
     | "+" primary       -> pos
     | "(" expr ")"
NUMBER: /(\d+(\.\d*)?|\.\d+)/
%ignore /\s+/
"""

parser = Lark(GRAMMAR, start="start", parser="lalr")


@v_args(inline=True)
class TreeBuilder(Transformer_NonRecursive):
    def number(self, tok): return Operand(float(tok))

    def add(self, a, b): return Operator("+", a, b)
    def sub(self, a, b): return Operator("-", a, b)
    def mul(self, a, b): return Operator("*", a, b)
    def div(self, a, b): return Operator("/", a, b)
    def pow(self, a, b): return Operator("^", a, b)

    def neg(self, x): return Operator(UNARY_MINUS, None, x)
    def pos(self, x): return Operator(UNARY_PLUS, None, x)


def _open_parens(prefix: str) -> int:
    return prefix.count("(") - prefix.count(")")


def parse_with_lark(src: str) -> Node:
    try:
        tree = parser.parse(src)
        return TreeBuilder().transform(tree)
    except UnexpectedCharacters as e:
        if e.char == "." and e.allowed and "NUMBER" in e.allowed:
            raise ParseError("Invalid number literal '.'", position=e.pos_in_stream) from None
        raise ParseError(f"Invalid expression: unexpected '{e.char}' at position {e.pos_in_stream}",
                         position=e.pos_in_stream) from None
    except UnexpectedEOF:
        raise ParseError("Unexpected end of expression", position=len(src)) from None
    except UnexpectedToken as e:
        at_end = e.token.type == "$END"
        pos = len(src) if at_end else e.token.start_pos
        if _open_parens(src[:pos]) > 0 and "RPAR" in e.expected:
            raise ParseError("Mismatched parentheses", position=pos) from None
        if at_end:
            raise ParseError("Unexpected end of expression", position=len(src)) from None
        if "$END" in e.expected:
            rest = src[e.token.start_pos:].strip()
            raise ParseError(f"Unexpected trailing input '{rest}'", position=e.token.start_pos) from None
        raise ParseError(f"Invalid expression: unexpected '{e.token}' at position {e.token.start_pos}",
                         position=e.token.start_pos) from None
    except RecursionError:
        raise ParseError("Expression nested too deeply") from None
