from collections import Counter
from dataclasses import dataclass, field

from .parser import Operand, Operator

@dataclass
class Analysis:
    depth: int = 0
    operands: int = 0
    operators: Counter = field(default_factory=Counter)

def analyze(node) -> Analysis:
    an = Analysis()

    stack = [(node, 1)]
    while stack:
        n, depth = stack.pop()
        an.depth = max(an.depth, depth)
        if isinstance(n, Operand):
            an.operands += 1
        elif isinstance(n, Operator):
            an.operators[n.op] += 1
            if n.left is not None:
                stack.append((n.left, depth + 1))
            stack.append((n.right, depth + 1))
    return an
