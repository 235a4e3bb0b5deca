"""
Tests for left-truncated (counting-process) data.

R:
    tm_Enter <- c(2, 5, 3, 3, 2, 5)
    tm_Exit  <- c(9, 11, 9, 8, 4, 9)
    status   <- c(0, 1, 0, 0, 1, 1)
    summary(survfit(Surv(tm_Enter, tm_Exit, status, type = "counting") ~ 1,
                    conf.type = "none"))
    # time n.risk n.event survival
    #    4      4       1    0.750
    #    9      4       1    0.562
    #   11      1       1    0.000
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from survcurve.core.exceptions import EmptyRiskSetError, InvalidInputError
from survcurve.survival import kaplan_meier, survfit


class TestLeftTruncation:

    def test_risk_set_increases_then_decreases(self, six_truncated):
        entry, exit_, event = six_truncated
        fit = kaplan_meier(exit_, event, entry=entry, truncation=True)

        assert fit.truncated
        assert_allclose(fit.time, [4, 8, 9, 11])
        assert_allclose(fit.n_risk, [4, 5, 4, 1])
        diffs = np.diff(fit.n_risk)
        assert diffs[0] > 0
        assert np.all(diffs[1:] < 0)

    def test_survival_matches_r(self, six_truncated):
        entry, exit_, event = six_truncated
        fit = survfit(exit_, event, entry=entry, truncation=True,
                      conf_type="none")

        events = fit.n_events > 0
        assert_allclose(fit.time[events], [4, 9, 11])
        assert_allclose(fit.n_risk[events], [4, 4, 1])
        assert_allclose(fit.survival[events], [0.75, 0.5625, 0.0], rtol=1e-12)
        assert np.all(np.isnan(fit.ci_lower))
        assert np.all(np.isnan(fit.ci_upper))

    def test_late_entries_counted(self, six_truncated):
        entry, exit_, event = six_truncated
        fit = kaplan_meier(exit_, event, entry=entry, truncation=True)
        assert_allclose(fit.n_enter, [4, 2, 0, 0])

    def test_entry_zero_matches_right_censored(self, six_patients):
        time, event = six_patients
        plain = kaplan_meier(time, event)
        counting = kaplan_meier(time, event, entry=np.zeros(6), truncation=True)
        assert_allclose(counting.survival, plain.survival)
        assert_allclose(counting.n_risk, plain.n_risk)

    def test_entry_requires_truncation_flag(self, six_truncated):
        entry, exit_, event = six_truncated
        with pytest.raises(InvalidInputError, match="truncation=True"):
            kaplan_meier(exit_, event, entry=entry)

    def test_all_zero_entry_without_flag_accepted(self, six_patients):
        time, event = six_patients
        fit = kaplan_meier(time, event, entry=np.zeros(6))
        assert not fit.truncated

    def test_exit_must_follow_entry(self):
        with pytest.raises(InvalidInputError, match="greater than entry"):
            kaplan_meier([3, 5], [1, 1], entry=[3, 1], truncation=True)


class TestEmptyRiskSet:
    """A gap in follow-up must be surfaced, not bridged."""

    def test_gap_raises(self):
        entry = [0, 0, 5, 5]
        time = [2, 3, 8, 9]
        event = [1, 1, 1, 0]
        with pytest.raises(EmptyRiskSetError) as excinfo:
            kaplan_meier(time, event, entry=entry, truncation=True)

        assert excinfo.value.time == pytest.approx(3.0)
        assert excinfo.value.resumes_at == pytest.approx(5.0)
        assert "empty" in str(excinfo.value)

    def test_gap_raises_for_nelson_aalen_too(self):
        with pytest.raises(EmptyRiskSetError):
            survfit([2, 8], [1, 1], entry=[0, 4], truncation=True,
                    method="nelson-aalen")

    def test_touching_intervals_are_not_a_gap(self):
        """(0, 3] followed by (3, 8] leaves nobody out."""
        fit = kaplan_meier([3, 8], [1, 1], entry=[0, 3], truncation=True)
        assert_allclose(fit.n_risk, [1, 1])

    def test_all_fail_at_single_time(self):
        """n == d: S = 0 at t0, no extrapolation beyond it."""
        fit = kaplan_meier([5, 5, 5, 5], [1, 1, 1, 1])

        assert_allclose(fit.time, [5.0])
        assert_allclose(fit.n_risk, [4])
        assert_allclose(fit.survival, [0.0])
        assert np.isinf(fit.var_log_survival[0])
        assert np.isnan(fit.std_err[0])
        assert np.isnan(fit.ci_lower[0])
        assert np.isnan(fit.ci_upper[0])

        assert fit.survival_at(5.0) == 0.0
        assert fit.survival_at(4.0) == 1.0
        with pytest.raises(EmptyRiskSetError):
            fit.survival_at(6.0)
