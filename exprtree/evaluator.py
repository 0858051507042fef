import logging
import math

import numpy as np

from .errors import DivisionByZeroError, EvaluationError
from .parser import Operand, Operator, UNARY_MINUS, UNARY_PLUS

logger = logging.getLogger(__name__)


def _divide(a, b):
    if b == 0:
        raise DivisionByZeroError()
    return a / b


def _power(a, b):
    # IEEE-754 pow: nan for (-8)^(1/3), inf for 0^-1, no exceptions
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(b)))


OPS = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    '/': _divide,
    '^': _power,
}

UNARY = {
    UNARY_MINUS: lambda x: -x,
    UNARY_PLUS: lambda x: +x,
}


def _apply(node: Operator, values: list) -> float:
    right = values.pop()
    if node.left is None:
        if node.op not in UNARY:
            raise EvaluationError(f"Unknown operator '{node.op}'")
        return UNARY[node.op](right)
    left = values.pop()
    if node.op not in OPS:
        raise EvaluationError(f"Unknown operator '{node.op}'")
    return OPS[node.op](left, right)


def eval_node(node) -> float:
    # explicit stack: "1+1+...+1" builds a left spine as deep as the operator count
    values = []
    stack = [(node, False)]
    while stack:
        n, children_done = stack.pop()
        if isinstance(n, Operand):
            values.append(float(n.value))
        elif isinstance(n, Operator):
            if children_done:
                values.append(_apply(n, values))
                continue
            stack.append((n, True))
            stack.append((n.right, False))
            if n.left is not None:
                stack.append((n.left, False))
        else:
            raise TypeError(f"Unknown node {type(n).__name__}")
    return values.pop()


def evaluate(node) -> float:
    """Walk the tree and return its value as a float."""
    out = eval_node(node)
    if math.isnan(out) or math.isinf(out):
        logger.warning(f"Expression evaluated to {out}")
    return out
