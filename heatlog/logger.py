"""HeatLogger: a line logger whose output heats up with the line rate.

Every public method takes the same lock for its whole duration, so lines
reach the destination whole and in order, and the heat machine is sampled
exactly once per wall-clock second no matter how many threads log.
"""
from __future__ import annotations
import sys
import threading
import time
from typing import Any, Callable, Optional

from heatlog.core.colors import Transform, announce
from heatlog.core.errors import SinkWriteError
from heatlog.core.formatting import sprint, sprintf, sprintln
from heatlog.core.heat import HeatMachine, HeatSnapshot
from heatlog.core.logging import logger as diag
from heatlog.system.fatal import FatalHandler, FatalKind, FatalSignal, default_fatal_handler
from heatlog.system.settings import HeatSettings, color_disabled

Clock = Callable[[], float]


def _default_output():
    return getattr(sys.stderr, "buffer", sys.stderr)


class HeatLogger:
    def __init__(self, out=None, prefix: str = "", *, clock: Clock = time.time,
                 terminal: Optional[bool] = None, settings: Optional[HeatSettings] = None,
                 fatal_handler: Optional[FatalHandler] = None):
        self._mu = threading.Lock()
        self._prefix = prefix
        self._out = out if out is not None else _default_output()
        self._buf = bytearray()
        self._clock = clock
        self._fatal_handler = fatal_handler or default_fatal_handler
        self._heat = HeatMachine()
        if settings is not None:
            self._heat.heating_up_rate = settings.heating_up_rate
            self._heat.on_fire_rate = settings.on_fire_rate
            self._heat.blazing_after = settings.blazing_after
        if terminal is None:
            terminal = settings.terminal if settings is not None else not color_disabled()
        self._term = terminal

    @classmethod
    def from_settings(cls, settings: HeatSettings, out=None, prefix: str = "", **kw) -> "HeatLogger":
        return cls(out, prefix, settings=settings, **kw)

    # -- output -----------------------------------------------------------

    def output(self, s: str) -> None:
        """Write one line, colored according to the current heat.

        Raises SinkWriteError if the destination rejects the write; the heat
        state is not rolled back.
        """
        before = after = None
        try:
            with self._mu:
                # read under the lock so periods reach the machine in order
                now = self._clock()
                buf = self._buf
                del buf[:]
                before = self._heat.state
                self._heat.advance(now)
                after = self._heat.state

                banner = self._heat.take_announcement()
                if banner and self._term:
                    buf += announce(banner)

                nl = not s.endswith("\n")
                txt = s.encode("utf-8", errors="replace")
                if self._term and self._heat.transform is not Transform.NONE:
                    buf += self._heat.transform.apply(txt)
                else:
                    buf += txt
                if nl:
                    buf += b"\n"

                try:
                    self._out.write(bytes(buf))
                    flush = getattr(self._out, "flush", None)
                    if flush is not None:
                        flush()
                except (OSError, ValueError, TypeError) as e:
                    raise SinkWriteError(len(buf), str(e)) from e
        finally:
            if after is not before:
                diag.debug("HeatTransition", old=before.value, new=after.value)

    def print(self, *v: Any) -> None:
        self.output(sprint(*v))

    def printf(self, fmt: str, *v: Any) -> None:
        self.output(sprintf(fmt, *v))

    def println(self, *v: Any) -> None:
        self.output(sprintln(*v))

    # -- fatal / panic ----------------------------------------------------

    def _terminate(self, kind: FatalKind, s: str) -> None:
        written = True
        try:
            self.output(s)
        except SinkWriteError as e:
            written = False
            diag.error("FatalLineNotWritten", kind=kind, error=str(e))
        with self._mu:
            handler = self._fatal_handler
        handler(FatalSignal(kind, s, written))

    def fatal(self, *v: Any) -> None:
        self._terminate("exit", sprint(*v))

    def fatalf(self, fmt: str, *v: Any) -> None:
        self._terminate("exit", sprintf(fmt, *v))

    def fatalln(self, *v: Any) -> None:
        self._terminate("exit", sprintln(*v))

    def panic(self, *v: Any) -> None:
        self._terminate("panic", sprint(*v))

    def panicf(self, fmt: str, *v: Any) -> None:
        self._terminate("panic", sprintf(fmt, *v))

    def panicln(self, *v: Any) -> None:
        self._terminate("panic", sprintln(*v))

    # -- configuration ----------------------------------------------------

    def writer(self):
        with self._mu:
            return self._out

    def set_output(self, w) -> None:
        with self._mu:
            self._out = w

    def prefix(self) -> str:
        """Return the stored prefix.

        The prefix is kept for API compatibility only; it is not written in
        front of emitted lines.
        """
        with self._mu:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        with self._mu:
            self._prefix = prefix

    def heating_up(self) -> int:
        with self._mu:
            return self._heat.heating_up_rate

    def set_heating_up(self, rate: int) -> None:
        with self._mu:
            self._heat.heating_up_rate = rate

    def on_fire(self) -> int:
        with self._mu:
            return self._heat.on_fire_rate

    def set_on_fire(self, rate: int) -> None:
        with self._mu:
            self._heat.on_fire_rate = rate

    def blazing(self) -> int:
        with self._mu:
            return self._heat.blazing_after

    def set_blazing(self, seconds: int) -> None:
        with self._mu:
            self._heat.blazing_after = seconds

    def terminal(self) -> bool:
        with self._mu:
            return self._term

    def set_terminal(self, enabled: bool) -> None:
        with self._mu:
            self._term = bool(enabled)

    def fatal_handler(self) -> FatalHandler:
        with self._mu:
            return self._fatal_handler

    def set_fatal_handler(self, handler: Optional[FatalHandler]) -> None:
        with self._mu:
            self._fatal_handler = handler or default_fatal_handler

    def snapshot(self) -> HeatSnapshot:
        with self._mu:
            return self._heat.snapshot()


def new(out=None, prefix: str = "") -> HeatLogger:
    return HeatLogger(out, prefix)
