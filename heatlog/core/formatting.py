"""Message construction in the three styles a line logger offers."""
from __future__ import annotations
from typing import Any


def sprint(*args: Any) -> str:
    """Concatenate operands, adding a space only between two non-strings."""
    parts = []
    prev_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_str = is_str
    return "".join(parts)


def sprintln(*args: Any) -> str:
    return " ".join(str(a) for a in args) + "\n"


def sprintf(fmt: str, *args: Any) -> str:
    """%-format; a mismatched format renders instead of raising."""
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        return f"{fmt}%!(BADFORMAT " + " ".join(repr(a) for a in args) + ")"
