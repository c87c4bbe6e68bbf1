from __future__ import annotations
import os
import sys


# Defaults
DEFAULT_MAX_DEPTH = 200

# Frames kept free for the caller's own stack (test runners, CLI framework).
_STACK_HEADROOM = 200


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    # Zero or negative limits would reject every parenthesized expression
    return value if value > 0 else default


def recursion_safe_depth() -> int:
    """Deepest nesting the parser can follow without hitting sys.getrecursionlimit().

    Each nesting level costs two parser frames plus one evaluator frame.
    """
    return max(1, (sys.getrecursionlimit() - _STACK_HEADROOM) // 3)


def clamp_depth(depth: int) -> int:
    return min(depth, recursion_safe_depth())


def get_max_depth() -> int:
    return clamp_depth(int_from_env('IOTA_MAX_DEPTH', DEFAULT_MAX_DEPTH))
