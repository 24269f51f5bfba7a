"""Tests for histconsole.hooks: per-kind save hooks."""

import math
import os
import re

import pytest

from histconsole.errors import MissingArgumentError
from histconsole.hooks import TRACE_UNSUPPORTED, SaveHooks


class FakeClock:
    """Millisecond clock that returns queued values."""

    def __init__(self, *values):
        self.values = list(values)

    def __call__(self):
        return self.values.pop(0)


class StubRandom:
    """randint() replacement returning queued values."""

    def __init__(self, *values):
        self.values = list(values)

    def randint(self, a, b):
        return self.values.pop(0)


@pytest.fixture
def hooks():
    return SaveHooks()


class TestRegistry:
    """Which kinds have hooks."""

    def test_hooked_kinds(self, hooks):
        for kind in ('assert', 'count', 'time', 'time_end', 'time_stamp', 'trace'):
            assert kind in hooks
            assert callable(hooks.get(kind))

    def test_unhooked_kinds(self, hooks):
        for kind in ('log', 'debug', 'warn', 'table', 'alert'):
            assert kind not in hooks
            assert hooks.get(kind) is None


class TestAssert:

    def test_successful(self, hooks):
        assert hooks.assert_(True, "sky is up") == ["Assertion successful: sky is up"]

    def test_failed(self, hooks):
        assert hooks.assert_(0, "sky is down") == ["Assertion failed: sky is down"]

    def test_missing_message(self, hooks):
        """No arguments counts as a failed assertion with no message."""
        assert hooks.assert_() == ["Assertion failed: None"]


class TestCount:

    def test_titled_counter_increments(self, hooks):
        """count('x') three times reports x 1, x 2, x 3."""
        results = [hooks.count('x') for _ in range(3)]
        assert results == [["x 1"], ["x 2"], ["x 3"]]

    def test_untitled_counters_are_distinct(self, hooks):
        """Two untitled calls create two counters, each at 1."""
        first = hooks.count()
        second = hooks.count()
        assert first != second
        assert first[0].endswith(" 1")
        assert second[0].endswith(" 1")
        assert len(hooks.counters) == 2

    def test_untitled_title_is_numeric(self, hooks):
        title, count = hooks.count()[0].split(" ")
        assert 1 <= int(title) <= 100000
        assert count == "1"

    def test_untitled_title_redrawn_on_collision(self):
        hooks = SaveHooks(rng=StubRandom(7, 7, 8))
        assert hooks.count() == ["7 1"]
        assert hooks.count() == ["8 1"]

    def test_counters_independent_per_instance(self):
        a, b = SaveHooks(), SaveHooks()
        a.count('x')
        a.count('x')
        assert b.count('x') == ["x 1"]


class TestTimers:

    def test_time_requires_name(self, hooks):
        with pytest.raises(MissingArgumentError, match="needs a title"):
            hooks.time()

    def test_missing_name_is_type_error(self, hooks):
        with pytest.raises(TypeError):
            hooks.time()

    def test_time_returns_name(self):
        hooks = SaveHooks(clock=FakeClock(1000))
        assert hooks.time('lookup') == ['lookup']
        assert hooks.start_times == {'lookup': 1000}

    def test_time_end_reports_elapsed(self):
        hooks = SaveHooks(clock=FakeClock(1000, 1250))
        hooks.time('lookup')
        assert hooks.time_end('lookup') == ['lookup: 250ms']

    def test_time_end_keeps_start(self):
        """time_end reads the start time without consuming it."""
        hooks = SaveHooks(clock=FakeClock(1000, 1010, 1030))
        hooks.time('t')
        assert hooks.time_end('t') == ['t: 10ms']
        assert hooks.time_end('t') == ['t: 30ms']

    def test_time_end_real_clock(self, hooks):
        """time then time_end with the wall clock gives a small non-negative value."""
        hooks.time('t')
        result = hooks.time_end('t')[0]
        match = re.fullmatch(r"t: (-?\d+)ms", result)
        assert match
        assert 0 <= int(match.group(1)) < 1000

    def test_time_end_never_started(self, hooks):
        """An unknown timer reports NaN instead of raising."""
        result = hooks.time_end('never-started')[0]
        name, _, value = result.partition(": ")
        assert name == 'never-started'
        assert math.isnan(float(value[:-2]))

    def test_time_end_unhashable_name(self, hooks):
        """A list name never started reports NaN like any other name."""
        assert hooks.time_end(['a']) == ["['a']: nanms"]

    def test_unhashable_name_round_trip(self):
        hooks = SaveHooks(clock=FakeClock(1000, 1040))
        assert hooks.time(['a']) == [['a']]
        assert hooks.time_end(['a']) == ["['a']: 40ms"]
        assert hooks.start_times == {"['a']": 1000}

    def test_numeric_name_matches_string(self):
        """Timers are keyed by str(name), so 1 and '1' are the same timer."""
        hooks = SaveHooks(clock=FakeClock(1000, 1005))
        hooks.time(1)
        assert hooks.time_end('1') == ['1: 5ms']

    def test_time_stamp(self):
        hooks = SaveHooks(clock=FakeClock(123456))
        assert hooks.time_stamp('boot') == [123456, 'boot']

    def test_time_stamp_without_label(self):
        hooks = SaveHooks(clock=FakeClock(5))
        assert hooks.time_stamp() == [5, None]


class TestTrace:

    def test_trace_contains_calling_function(self, hooks):
        def outer_function_for_trace():
            return hooks.trace()

        result = outer_function_for_trace()
        assert len(result) == 1
        assert result[0].startswith("console.trace()")
        assert "outer_function_for_trace" in result[0]

    def test_trace_excludes_library_frames(self, hooks):
        result = hooks.trace()[0]
        assert os.path.join("histconsole", "hooks.py") not in result

    def test_trace_fallback(self, hooks, monkeypatch):
        def broken():
            raise AttributeError("no frames")
        monkeypatch.setattr("histconsole.hooks.traceback.extract_stack", broken)
        assert hooks.trace() == [TRACE_UNSUPPORTED]
