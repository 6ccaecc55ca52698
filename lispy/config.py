from __future__ import annotations
import os


# Reader limit on symbol names, in characters
SYMBOL_MAX_LEN = 200

# Nesting ceiling for evaluate(); host RecursionError is mapped to the same error
DEFAULT_MAX_DEPTH = 3000

# Python frames reserved per level of evaluation nesting, and the most the
# interpreter will ever ask sys.setrecursionlimit for
FRAMES_PER_DEPTH = 8
RECURSION_LIMIT_CAP = 100_000

DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_depth() -> int:
    return int_from_env('LISPY_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_log_level() -> str:
    raw = os.environ.get('LISPY_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else DEFAULT_LOG_LEVEL
