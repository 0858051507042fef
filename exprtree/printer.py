# exprtree/printer.py
import sys
from typing import Any, Dict, List, Optional, TextIO

from .errors import ExpressionError
from .parser import Operand, Operator

NULL_CHILD = "(null)"


def format_number(value: float, precision: int = 6) -> str:
    """%g-style rendering with `precision` significant digits."""
    return f"{value:.{precision}g}"


def tree_to_dict(node, max_depth: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """Nested-dict form of the tree; deeper than `max_depth` levels raises ExpressionError."""
    if node is None:
        return None
    root: Dict[str, Any] = {}
    stack = [(node, root, 1)]
    while stack:
        n, out, depth = stack.pop()
        if max_depth is not None and depth > max_depth:
            raise ExpressionError(f"Expression nested too deeply to export (over {max_depth} levels)")
        if isinstance(n, Operand):
            out.update(type="Operand", value=n.value)
        elif isinstance(n, Operator):
            out.update(type="Operator", op=n.op, left=None, right={})
            if n.left is not None:
                out["left"] = {}
                stack.append((n.left, out["left"], depth + 1))
            stack.append((n.right, out["right"], depth + 1))
        else:
            out.update(type="Unknown", repr=repr(n))
    return root


def tree_to_lines(node, precision: int = 6, indent: str = "  ") -> List[str]:
    lines = []
    # pre-order with an explicit stack; plain strings are emitted as-is
    stack = [(node, "")]
    while stack:
        n, pad = stack.pop()
        if isinstance(n, str):
            lines.append(n)
        elif n is None:
            lines.append(f"{pad}{NULL_CHILD}")
        elif isinstance(n, Operand):
            lines.append(f"{pad}Operand: {format_number(n.value, precision)}")
        elif isinstance(n, Operator):
            lines.append(f"{pad}Operator: {n.op}")
            stack.append((n.right, pad + indent))
            stack.append((f"{pad}Right:", pad))
            stack.append((n.left, pad + indent))
            stack.append((f"{pad}Left:", pad))
        else:
            lines.append(f"{pad}{type(n).__name__}")
    return lines


def tree_to_text(node, precision: int = 6, indent: str = "  ") -> str:
    return "\n".join(tree_to_lines(node, precision, indent))


def print_tree(node, out: TextIO = None, precision: int = 6):
    """Write the pre-order dump of `node` to `out` (stdout by default)."""
    out = out if out is not None else sys.stdout
    for line in tree_to_lines(node, precision):
        out.write(line + "\n")
    out.flush()
