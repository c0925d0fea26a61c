import pytest

from heatlog import FatalSignal, HeatLogger, HeatPanic
from heatlog.system.fatal import default_fatal_handler, EXIT_CODE


class RecordingSink:
    def __init__(self):
        self.writes = []

    def write(self, data):
        self.writes.append(bytes(data))


class BrokenSink:
    def write(self, data):
        raise OSError("closed")


def test_fatal_emits_then_signals():
    seen = []
    sink = RecordingSink()
    log = HeatLogger(sink, terminal=False, fatal_handler=seen.append)
    log.fatalf("bad %s", "thing")
    log.fatal("x", 1)
    log.fatalln("y", 2)
    assert sink.writes == [b"bad thing\n", b"x1\n", b"y 2\n"]
    assert [s.kind for s in seen] == ["exit", "exit", "exit"]
    assert seen[0] == FatalSignal("exit", "bad thing", True)


def test_panic_variants_signal_panic():
    seen = []
    log = HeatLogger(RecordingSink(), terminal=False, fatal_handler=seen.append)
    log.panic("boom")
    log.panicf("%d", 7)
    log.panicln("a", "b")
    assert [(s.kind, s.message) for s in seen] == [
        ("panic", "boom"), ("panic", "7"), ("panic", "a b\n"),
    ]


def test_default_policy_exits_with_status_one():
    log = HeatLogger(RecordingSink(), terminal=False)
    with pytest.raises(SystemExit) as exc:
        log.fatal("going down")
    assert exc.value.code == EXIT_CODE == 1


def test_default_policy_raises_panic():
    sink = RecordingSink()
    log = HeatLogger(sink, terminal=False)
    with pytest.raises(HeatPanic) as exc:
        log.panicf("lost %d lines", 3)
    assert exc.value.message == "lost 3 lines"
    assert sink.writes == [b"lost 3 lines\n"]


def test_termination_ignores_write_failure():
    seen = []
    log = HeatLogger(BrokenSink(), terminal=False, fatal_handler=seen.append)
    log.fatal("unwritten")
    assert seen == [FatalSignal("exit", "unwritten", False)]
    with pytest.raises(HeatPanic):
        default_fatal_handler(FatalSignal("panic", "unwritten", False))


def test_handler_accessors():
    log = HeatLogger(RecordingSink())
    assert log.fatal_handler() is default_fatal_handler
    seen = []
    log.set_fatal_handler(seen.append)
    assert log.fatal_handler() == seen.append
    log.set_fatal_handler(None)
    assert log.fatal_handler() is default_fatal_handler
