"""ANSI escapes and the byte transforms used to paint a hot log line.

Provides:
  RESET, YELLOW, RED, GREEN: escape sequences (bold variants for the colors)
  Transform: which rendering the heat machine currently selects
  warming / fire / blazing / announce: pure bytes -> bytes helpers
  strip_ansi: drop escapes from rendered text (handy for assertions)
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict
import re

from colorama import Style
from colorama.ansi import code_to_chars

RESET = Style.RESET_ALL            # \033[0m
YELLOW = code_to_chars("1;33")     # warming
RED = code_to_chars("1;31")        # fire
GREEN = code_to_chars("1;32")      # announcement

_RESET_B = RESET.encode("ascii")
_YELLOW_B = YELLOW.encode("ascii")
_RED_B = RED.encode("ascii")
_GREEN_B = GREEN.encode("ascii")


def _wrap(code: bytes, txt: bytes) -> bytes:
    return code + bytes(txt) + _RESET_B


def warming(txt: bytes) -> bytes:
    return _wrap(_YELLOW_B, txt)


def fire(txt: bytes) -> bytes:
    return _wrap(_RED_B, txt)


def blazing(txt: bytes) -> bytes:
    """Two-tone flicker: even bytes red, odd bytes yellow."""
    out = bytearray()
    for i, c in enumerate(bytes(txt)):
        out += _RED_B if i & 1 == 0 else _YELLOW_B
        out.append(c)
    out += _RESET_B
    return bytes(out)


def announce(banner: str) -> bytes:
    return _wrap(_GREEN_B, banner.encode("utf-8"))


class Transform(Enum):
    NONE = "none"
    WARMING = "warming"
    FIRE = "fire"
    BLAZING = "blazing"

    def apply(self, txt: bytes) -> bytes:
        fn = _TRANSFORMS.get(self)
        if fn is None:
            return bytes(txt)
        return fn(txt)


_TRANSFORMS: Dict[Transform, Callable[[bytes], bytes]] = {
    Transform.WARMING: warming,
    Transform.FIRE: fire,
    Transform.BLAZING: blazing,
}

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = [
    'RESET','YELLOW','RED','GREEN','Transform',
    'warming','fire','blazing','announce','strip_ansi'
]
