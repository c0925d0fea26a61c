"""
heatlog - a line logger that heats up.

As more lines per second are written, output turns yellow, then red, then
flickers red/yellow once the stream has been on fire for a while.

    from heatlog import HeatLogger
    log = HeatLogger(sys.stdout.buffer, "app: ")
    log.printf("handled %d requests", n)
"""
from heatlog.core.colors import Transform
from heatlog.core.errors import HeatLogError, HeatPanic, SinkWriteError
from heatlog.core.heat import HeatSnapshot, HeatState
from heatlog.logger import HeatLogger, new
from heatlog.system.fatal import FatalSignal
from heatlog.system.settings import HeatSettings

__all__ = [
    "HeatLogger", "new", "HeatState", "HeatSnapshot", "Transform",
    "HeatSettings", "FatalSignal", "HeatPanic", "SinkWriteError", "HeatLogError",
]
