"""
Tests for execution timing.
"""

import pytest

from survcurve.core.compute.timing import Timer, timed
from survcurve.survival import kaplan_meier


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        with timer.section("b"):
            pass
        timer.stop()

        result = timer.result()
        assert set(result) == {"total_seconds", "a", "b"}
        assert all(v >= 0 for v in result.values())

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert timer.result()["total_seconds"] >= 0


class TestFitTiming:

    def test_fit_records_sections(self, six_patients):
        timing = kaplan_meier(*six_patients).timing
        assert {"total_seconds", "estimate", "diagnostics"} <= set(timing)
