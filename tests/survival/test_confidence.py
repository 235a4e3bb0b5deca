"""
Tests for confidence interval types: log-log, plain, log, none.

Plain and log intervals are not clipped; rows whose bounds leave [0, 1]
are flagged in out_of_range and a RuntimeWarning is issued.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from survcurve.survival import kaplan_meier
from survcurve.survival._ci import confidence_bounds, normal_quantile

Z95 = 1.959963984540054


class TestPlainInterval:

    def test_plain_bounds_not_clipped(self, six_patients):
        with pytest.warns(RuntimeWarning, match="not clipped"):
            fit = kaplan_meier(*six_patients, conf_type="plain")

        se = fit.std_err
        assert_allclose(fit.ci_lower, fit.survival - Z95 * se, rtol=1e-12)
        assert_allclose(fit.ci_upper, fit.survival + Z95 * se, rtol=1e-12)

        # S(2) = 0.833, se = 0.152: upper ≈ 1.13
        assert fit.ci_upper[0] > 1.0
        assert fit.out_of_range[0]
        assert not fit.out_of_range[3]
        assert fit.has_warning("outside [0, 1]")

    def test_summary_marks_out_of_range(self, six_patients):
        with pytest.warns(RuntimeWarning):
            fit = kaplan_meier(*six_patients, conf_type="plain")
        assert "not clipped" in fit.summary()


class TestLogInterval:

    def test_log_upper_exceeds_one(self, six_patients):
        with pytest.warns(RuntimeWarning):
            fit = kaplan_meier(*six_patients, conf_type="log")
        expected_upper = (5/6) * np.exp(Z95 * np.sqrt(1/30))
        assert fit.ci_upper[0] == pytest.approx(expected_upper, rel=1e-12)
        assert fit.out_of_range[0]
        assert np.all(fit.ci_lower[fit.survival > 0] > 0)


class TestLogLogInterval:

    def test_always_inside_unit_interval(self, exponential_sample):
        fit = kaplan_meier(*exponential_sample)
        defined = ~np.isnan(fit.ci_lower)
        assert np.all(fit.ci_lower[defined] >= 0)
        assert np.all(fit.ci_upper[defined] <= 1)
        assert not np.any(fit.out_of_range)

    def test_brackets_survival(self, exponential_sample):
        fit = kaplan_meier(*exponential_sample)
        mask = (fit.survival > 0) & (fit.survival < 1)
        assert np.all(fit.ci_lower[mask] <= fit.survival[mask])
        assert np.all(fit.ci_upper[mask] >= fit.survival[mask])


class TestConfidenceBoundsFunction:
    """Direct tests of the transform helper."""

    def test_no_events_gives_degenerate_interval(self):
        lower, upper, flag = confidence_bounds(
            np.array([1.0, 1.0]), np.array([0.0, 0.0]), 0.95, "log-log",
        )
        assert_allclose(lower, [1.0, 1.0])
        assert_allclose(upper, [1.0, 1.0])
        assert not np.any(flag)

    def test_zero_survival_undefined(self):
        for conf_type in ("log-log", "plain", "log"):
            lower, upper, flag = confidence_bounds(
                np.array([0.5, 0.0]), np.array([0.25, np.inf]), 0.95, conf_type,
            )
            assert np.isnan(lower[1]) and np.isnan(upper[1])
            assert not flag[1]

    def test_infinite_variance_undefined(self):
        for conf_type in ("log-log", "plain", "log"):
            lower, upper, flag = confidence_bounds(
                np.array([0.5, 0.2]), np.array([0.25, np.inf]), 0.95, conf_type,
            )
            assert np.isfinite(lower[0]) and np.isfinite(upper[0])
            assert np.isnan(lower[1]) and np.isnan(upper[1])
            assert not flag[1]

    def test_none(self):
        lower, upper, flag = confidence_bounds(
            np.array([0.5]), np.array([0.25]), 0.95, "none",
        )
        assert np.isnan(lower[0]) and np.isnan(upper[0])
        assert not flag[0]

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="conf_type"):
            confidence_bounds(np.array([0.5]), np.array([0.1]), 0.95, "arcsine")

    def test_normal_quantile(self):
        assert normal_quantile(0.95) == pytest.approx(Z95, rel=1e-12)
        assert normal_quantile(0.90) == pytest.approx(1.6448536269514722, rel=1e-12)
