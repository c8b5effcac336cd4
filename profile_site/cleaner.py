"""
Shared coercions for the loosely-typed site document.
Every helper tolerates None / wrong types and falls back to a default.
"""
from __future__ import annotations
import re
from typing import Any, Dict, List, Tuple

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# ───────────────────────────────────────── helpers ──
def text(value: Any, default: str = "") -> str:
    """Field value as a string; None and containers give the default."""
    if value is None or isinstance(value, (dict, list, tuple)):
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def strings(value: Any) -> Tuple[str, ...]:
    """List of bullet strings; anything that isn't a list is empty."""
    if not isinstance(value, list):
        return ()
    return tuple(text(x) for x in value if x is not None)

def records(value: Any) -> List[Dict[str, Any]]:
    """List of objects; non-object entries are dropped."""
    if not isinstance(value, list):
        return []
    return [x for x in value if isinstance(x, dict)]

def mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}

def leading_int(value: Any, default: int = 0) -> int:
    """parseInt-style year: leading integer of the value, else default.

    >>> leading_int("2021 (accepted)")
    2021
    >>> leading_int("n.d.")
    0
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else default
    if m := _LEADING_INT.match(text(value)):
        return int(m.group(1))
    return default

def is_blank(value: str | None) -> bool:
    return not (value or "").strip()
