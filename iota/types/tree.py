from __future__ import annotations

from dataclasses import dataclass
from typing import Union


OPERATORS = ("+", "-", "*", "/")


@dataclass(frozen=True, slots=True)
class Leaf:
    """An integer literal."""

    value: int


@dataclass(frozen=True, slots=True)
class Binary:
    """An operator applied to exactly two subtrees, which it owns."""

    op: str
    left: Tree
    right: Tree

    def __post_init__(self):
        if self.op not in OPERATORS:
            raise ValueError(f"Unknown operator {self.op!r}, expected one of {OPERATORS}")


Tree = Union[Leaf, Binary]
