"""Tree-walking evaluator for iota.

Pure structural recursion: a Leaf is its value, a Binary node evaluates its
left subtree, then its right subtree, then combines them with its operator.
"""

from __future__ import annotations

import operator
from typing import Callable

from iota import Value
from iota.errors import DivisionByZeroError
from iota.types.tree import Binary, Leaf, Tree


def truncating_div(dividend: Value, divisor: Value) -> Value:
    """Integer division rounding toward zero, so (/ -7 2) is -3, not -4."""
    if divisor == 0:
        raise DivisionByZeroError(dividend)
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


OPERATIONS: dict[str, Callable[[Value, Value], Value]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncating_div,
}


def evaluate(tree: Tree) -> Value:
    """Reduce `tree` to an int; TypeError only for objects that are not Leaf or Binary."""
    match tree:
        case Leaf(value=value):
            return value
        case Binary(op=op, left=left, right=right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            return OPERATIONS[op](lhs, rhs)
    raise TypeError(f"Cannot evaluate {tree!r}: expected a Leaf or Binary node")
