# Core type aliases for iota's data model.
# Every evaluated value is a plain Python int (arbitrary precision, so the
# arithmetic never overflows). Trees are built from the frozen dataclasses in
# iota.types.tree.

Value = int

from iota.interpreter import evaluate_expression, Interpreter  # noqa: E402

__all__ = ["Value", "evaluate_expression", "Interpreter"]
