import pytest
from kungfu import Error, Ok

import pushseq as ps
from pushseq.writer import Exhausted, Log, Stopped, TracePolicy, WriterResult, Yielded, drive_traced


class TestLog:
    """Monoid laws and helpers"""

    def test_identity(self):
        x = Log.of(1, 2)
        assert Log().combine(x) == x
        assert x.combine(Log()) == x

    def test_associativity(self):
        x, y, z = Log.of(1), Log.of(2), Log.of(3)
        assert x.combine(y).combine(z) == x.combine(y.combine(z))

    def test_tell_returns_new_log(self):
        base = Log.of("a")
        extended = base.tell("b")
        assert base == ["a"]
        assert extended == ["a", "b"]

    def test_select(self):
        log = Log.of(Yielded(0, "a"), Yielded(1, "b"), Exhausted(2))
        assert log.select(Yielded) == [Yielded(0, "a"), Yielded(1, "b")]
        assert log.select(Exhausted) == [Exhausted(2)]


class TestTracePolicy:
    """Configuration validation"""

    def test_defaults(self):
        assert TracePolicy() == TracePolicy.full()
        assert TracePolicy().record_values is True
        assert TracePolicy().max_events is None

    def test_counts_only(self):
        assert TracePolicy.counts_only().record_values is False

    def test_bounded(self):
        policy = TracePolicy.bounded(2)
        assert policy.admits(1) is True
        assert policy.admits(2) is False

    def test_negative_cap_rejected(self):
        with pytest.raises(ValueError, match="max_events"):
            TracePolicy(max_events=-1)


class TestDriveTraced:
    """Trace structure"""

    def test_exhausted_trace(self):
        log = drive_traced(ps.from_collection(["a", "b"]), lambda v: True)
        assert log == [Yielded(0, "a"), Yielded(1, "b"), Exhausted(count=2)]

    def test_stopped_trace(self):
        log = drive_traced(ps.from_collection([1, 2, 3]), lambda v: v < 2)
        assert log == [Yielded(0, 1), Yielded(1, 2), Stopped(after=2)]

    def test_empty_trace(self):
        assert drive_traced(ps.from_collection([]), lambda v: True) == [Exhausted(count=0)]

    def test_counts_only_drops_values(self):
        log = drive_traced(ps.from_collection(["x"]), lambda v: True, policy=TracePolicy.counts_only())
        assert log == [Yielded(0, None), Exhausted(count=1)]

    def test_bounded_keeps_terminal_entry(self):
        log = drive_traced(ps.from_collection(range(5)), lambda v: True, policy=TracePolicy.bounded(2))
        assert log == [Yielded(0, 0), Yielded(1, 1), Exhausted(count=5)]

    def test_exactly_one_terminal_event(self):
        log = drive_traced(ps.from_collection(range(4)).filter(lambda x: x > 0), lambda v: v < 2)
        terminals = [e for e in log if isinstance(e, (Stopped, Exhausted))]
        assert terminals == [Stopped(after=2)]
        assert log[-1] == Stopped(after=2)


class TestWriterConsumers:
    """*_w terminals return WriterResult(result, trace)"""

    def test_collect_w(self):
        wr = ps.collect_w(ps.from_collection([1, 2]))
        assert isinstance(wr, WriterResult)
        assert wr.unwrap() == [1, 2]
        assert wr.log[-1] == Exhausted(count=2)

    def test_count_w(self):
        wr = ps.count_w(ps.from_collection("abc"), policy=TracePolicy.counts_only())
        assert wr.result.unwrap() == 3
        assert wr.log.select(Yielded) == [Yielded(0, None), Yielded(1, None), Yielded(2, None)]

    def test_reduce_w(self):
        wr = ps.reduce_w(ps.from_collection([1, 2, 3]), 0, lambda acc, x: acc + x)
        assert wr.unwrap() == 6

    def test_any_w_records_stop(self):
        wr = ps.any_w(ps.from_collection([1, 2, 3, 4]), lambda v: v == 3)
        assert wr.unwrap() is True
        assert wr.log[-1] == Stopped(after=3)

    def test_all_w_vacuous(self):
        wr = ps.all_w(ps.from_collection([]), lambda v: False)
        assert wr.unwrap() is True
        assert wr.log == [Exhausted(count=0)]

    def test_for_each_w(self):
        seen = []
        wr = ps.for_each_w(ps.from_collection([1]), seen.append)
        assert seen == [1]
        assert wr.log == [Yielded(0, 1), Exhausted(count=1)]

    def test_first_w(self):
        wr = ps.first_w(ps.from_collection([4, 5]))
        assert wr.unwrap() == 4
        assert wr.log == [Yielded(0, 4), Stopped(after=1)]

    def test_first_w_empty(self):
        wr = ps.first_w(ps.from_collection([]))
        match wr.result:
            case Error(err):
                assert isinstance(err, ps.EmptySequenceError)
            case Ok(value):
                pytest.fail(f"Unexpected value {value!r}")
        assert wr.log == [Exhausted(count=0)]

    def test_find_w_and_nth_w(self):
        assert ps.find_w(ps.from_collection([1, 5]), lambda x: x > 2).unwrap() == 5
        assert ps.nth_w(ps.from_collection("xyz"), 1).unwrap() == "y"

    def test_last_w(self):
        wr = ps.last_w(ps.from_collection([1, 2]))
        assert wr.unwrap() == 2
        assert wr.log[-1] == Exhausted(count=2)
