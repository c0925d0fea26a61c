"""Boundary policy for the fatal and panic convenience calls.

HeatLogger itself never exits or raises on its own: it emits the line and
hands a FatalSignal to a handler. The default handler here does what a
classic logger does (exit status 1, or raise the message).
"""
from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import Callable, Literal

from heatlog.core.errors import HeatPanic

FatalKind = Literal["exit","panic"]

EXIT_CODE = 1

@dataclass(frozen=True)
class FatalSignal:
    kind: FatalKind
    message: str
    written: bool = True

FatalHandler = Callable[[FatalSignal], None]

def default_fatal_handler(signal: FatalSignal) -> None:
    if signal.kind == "exit":
        sys.exit(EXIT_CODE)
    raise HeatPanic(signal.message)
