"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class HeatLogError(Exception):
    pass

class SinkWriteError(HeatLogError):
    def __init__(self, size: int, detail: str):
        super().__init__(f"Failed writing {size} bytes to log destination: {detail}")
        self.size = size
        self.detail = detail

class HeatPanic(HeatLogError):
    """Raised by the default panic policy after the line has been emitted."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
