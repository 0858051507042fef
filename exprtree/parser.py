import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .cursor import Cursor, DIGITS
from .errors import ParseError

logger = logging.getLogger(__name__)

UNARY_MINUS = "u"
UNARY_PLUS = "p"
BINARY_OPS = frozenset("+-*/^")
UNARY_OPS = frozenset((UNARY_MINUS, UNARY_PLUS))

BACKENDS = ("descent", "lark")


class Node:
    def evaluate(self) -> float:
        from .evaluator import evaluate
        return evaluate(self)


@dataclass(frozen=True)
class Operand(Node):
    value: float


@dataclass(frozen=True)
class Operator(Node):
    op: str
    left: Optional[Node]
    right: Node

    def __post_init__(self):
        if self.op in UNARY_OPS:
            if self.left is not None:
                raise ValueError(f"Unary operator '{self.op}' takes no left operand")
        elif self.op in BINARY_OPS:
            if self.left is None:
                raise ValueError(f"Binary operator '{self.op}' needs a left operand")
        if self.right is None:
            raise ValueError(f"Operator '{self.op}' needs a right operand")

    @property
    def is_unary(self) -> bool:
        return self.left is None


def _fold_left(cur: Cursor, operand: Callable[[Cursor], Node], ops: str) -> Node:
    # a op b op c -> (a op b) op c
    left = operand(cur)
    while True:
        tok = cur.next_token()
        if tok is None or tok not in ops:
            cur.putback()
            return left
        left = Operator(tok, left, operand(cur))


def parse_expr(cur: Cursor) -> Node:
    return _fold_left(cur, parse_term, "+-")


def parse_term(cur: Cursor) -> Node:
    return _fold_left(cur, parse_exponent, "*/")


def parse_exponent(cur: Cursor) -> Node:
    return _fold_left(cur, parse_primary, "^")


def parse_primary(cur: Cursor) -> Node:
    tok = cur.next_token()
    if tok is None:
        raise ParseError("Unexpected end of expression", position=cur.pos)
    if tok in DIGITS or tok == ".":
        cur.putback()
        return Operand(cur.read_number())
    if tok == "-":
        return Operator(UNARY_MINUS, None, parse_primary(cur))
    if tok == "+":
        return Operator(UNARY_PLUS, None, parse_primary(cur))
    if tok == "(":
        node = parse_expr(cur)
        if cur.next_token() != ")":
            raise ParseError("Mismatched parentheses", position=cur.pos)
        return node
    raise ParseError(f"Invalid expression: unexpected '{tok}' at position {cur.pos - 1}",
                     position=cur.pos - 1)


def _parse_descent(src: str, strict: bool) -> Node:
    cur = Cursor(src)
    try:
        tree = parse_expr(cur)
    except RecursionError:
        raise ParseError("Expression nested too deeply") from None
    if not cur.at_end():
        rest = src[cur.pos:].strip()
        if strict:
            raise ParseError(f"Unexpected trailing input '{rest}'", position=cur.pos)
        logger.debug(f"Ignoring trailing input {rest!r}")
    return tree


def parse_expression(src: str, *, strict: bool = False, backend: str = "descent") -> Node:
    """
    Parse `src` into an expression tree.

    `backend="descent"` is the hand-written recursive-descent parser; trailing
    input after a complete expression is ignored unless `strict` is set.
    `backend="lark"` runs the equivalent LALR grammar and always rejects
    trailing input.
    """
    if backend == "descent":
        tree = _parse_descent(src, strict)
    elif backend == "lark":
        from .grammar import parse_with_lark
        tree = parse_with_lark(src)
    else:
        raise ValueError(f"Unknown parser backend '{backend}', expected one of {BACKENDS}")
    logger.debug(f"Parsed {src!r} with {backend} backend")
    return tree
