# statlab - Integration Tests: Inferential Analysis
# Statistical primitives and the procedure-selection logic

import math
import os
import sys
import unittest

import numpy as np
import pytest
from scipy import stats as scipy_stats

# Add parent to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from statlab.core.exceptions import (
    ComputationException,
    EmptyDatasetException,
    InsufficientDataException,
    MissingVariableException,
    ZeroVarianceException,
)
from statlab.stats.inferential import (
    NO_EVIDENCE_OF_DIFFERENCE,
    SIGNIFICANT_DIFFERENCE,
    AnalysisType,
    CorrelationStrength,
    InferentialAnalysisEngine,
)
from statlab.stats.primitives import (
    confidence_interval,
    linear_regression,
    pearson_correlation,
    two_sample_t_test,
)


class TestPrimitives(unittest.TestCase):
    """Tests for the statistical building blocks."""

    def test_perfect_linear_relationship(self):
        xs, ys = [1, 2, 3, 4], [2, 4, 6, 8]

        r = pearson_correlation(xs, ys)
        line = linear_regression(xs, ys)

        self.assertAlmostEqual(r, 1.0, places=12)
        self.assertAlmostEqual(line.slope, 2.0, places=12)
        self.assertAlmostEqual(line.intercept, 0.0, places=12)
        self.assertAlmostEqual(line.r_squared, 1.0, places=12)

    def test_confidence_interval(self):
        ci = confidence_interval([1, 2, 3, 4], 1.96)
        margin = 1.96 * math.sqrt(5 / 3) / 2

        self.assertAlmostEqual(ci.mean, 2.5)
        self.assertAlmostEqual(ci.lower, 2.5 - margin)
        self.assertAlmostEqual(ci.upper, 2.5 + margin)
        self.assertAlmostEqual(ci.margin, margin)

    def test_confidence_interval_single_value_collapses(self):
        ci = confidence_interval([5], 2.576)
        self.assertEqual((ci.lower, ci.upper), (5.0, 5.0))

    def test_confidence_interval_needs_data(self):
        with self.assertRaises(InsufficientDataException):
            confidence_interval([], 1.96)

    def test_correlation_errors(self):
        with self.assertRaises(InsufficientDataException):
            pearson_correlation([1], [2])
        with self.assertRaises(ComputationException):
            pearson_correlation([1, 2, 3], [1, 2])
        with self.assertRaises(ZeroVarianceException):
            pearson_correlation([1, 2, 3], [5, 5, 5])

    def test_regression_constant_x(self):
        with self.assertRaises(ZeroVarianceException):
            linear_regression([3, 3, 3], [1, 2, 3])

    def test_t_statistic_matches_pooled_formula(self):
        a, b = [1.0, 3.0], [2.0, 4.0]
        test = two_sample_t_test(a, b)

        self.assertAlmostEqual(test.t, -1 / math.sqrt(2))
        self.assertEqual((test.n1, test.n2), (2, 2))
        self.assertEqual(test.degrees_of_freedom, 2)

    def test_t_statistic_matches_scipy(self):
        rng = np.random.default_rng(1)
        a, b = list(rng.normal(0, 1, 30)), list(rng.normal(0.5, 2, 45))
        expected = scipy_stats.ttest_ind(a, b, equal_var=True).statistic

        self.assertAlmostEqual(two_sample_t_test(a, b).t, float(expected))

    def test_t_test_zero_variance(self):
        with self.assertRaises(ZeroVarianceException):
            two_sample_t_test([7, 7, 7], [7, 7])

    def test_t_test_needs_two_per_group(self):
        with self.assertRaises(InsufficientDataException):
            two_sample_t_test([1, 2, 3], [4])


class TestInferentialEngine(unittest.TestCase):
    """Tests for procedure selection and result content."""

    @classmethod
    def setUpClass(cls):
        cls.engine = InferentialAnalysisEngine(verbose=False)
        cls.rows = [
            {"x": 1, "y": 2, "label": "a"},
            {"x": 2, "y": 4, "label": "b"},
            {"x": 3, "y": 6, "label": "a"},
            {"x": 4, "y": 8, "label": "b"},
        ]

    def test_estimation_only(self):
        results = self.engine.analyze("x", None, self.rows)

        self.assertEqual([r.type for r in results], [AnalysisType.ESTIMATION])
        estimation = results[0]
        self.assertEqual(estimation.metric("Sample Mean").value, "2.5000")
        self.assertEqual(estimation.metric("N").value, 4)
        self.assertEqual(estimation.metric("95% CI").value, "[1.2348, 3.7652]")
        self.assertIsNotNone(estimation.metric("99% CI"))

    def test_numeric_pair_runs_correlation_and_regression(self):
        results = self.engine.analyze("x", "y", self.rows)

        self.assertEqual(
            [r.type for r in results],
            [AnalysisType.ESTIMATION, AnalysisType.CORRELATION, AnalysisType.REGRESSION]
        )
        correlation, regression = results[1], results[2]
        self.assertEqual(correlation.metric("Coefficient (r)").value, "1.0000")
        self.assertEqual(correlation.metric("Interpretation").value, "strong")
        self.assertEqual(regression.metric("Slope (m)").value, "2.0000")
        self.assertEqual(regression.metric("Intercept (b)").value, "0.0000")
        self.assertEqual(regression.metric("R² (coef. of determination)").value, "1.0000")
        self.assertEqual(regression.metric("Equation").value, "y = 2.00x + 0.00")

    def test_negative_intercept_equation(self):
        rows = [{"x": x, "y": 3 * x - 4} for x in range(1, 6)]
        regression = self.engine.analyze("x", "y", rows)[2]
        self.assertEqual(regression.metric("Equation").value, "y = 3.00x - 4.00")

    def test_constant_response_keeps_flat_regression(self):
        rows = [{"x": x, "y": 4} for x in range(1, 6)]
        results = self.engine.analyze("x", "y", rows)

        self.assertEqual([r.type for r in results], [AnalysisType.ESTIMATION, AnalysisType.REGRESSION])
        self.assertEqual(results[1].metric("R² (coef. of determination)").value, "0.0000")
        self.assertEqual(results[1].metric("Equation").value, "y = 0.00x + 4.00")

    def test_two_groups_t_test(self):
        results = self.engine.analyze("x", "label", self.rows)

        self.assertEqual([r.type for r in results], [AnalysisType.ESTIMATION, AnalysisType.HYPOTHESIS])
        t_test = results[1]
        self.assertEqual(t_test.metric("t Statistic").value, "-0.7071")
        self.assertFalse(t_test.metric("t Statistic").is_significant)
        self.assertEqual(t_test.metric("Size G1").value, 2)
        self.assertEqual(t_test.metric("Size G2").value, 2)
        self.assertEqual(t_test.conclusion, NO_EVIDENCE_OF_DIFFERENCE)

    def test_equal_means_give_small_t(self):
        rows = [{"v": v, "g": g} for g in ["p", "q"] for v in [1, 2, 3, 4]]
        t_test = self.engine.analyze("v", "g", rows)[1]

        self.assertAlmostEqual(float(t_test.metric("t Statistic").value), 0.0)
        self.assertEqual(t_test.conclusion, "no strong evidence of difference")

    def test_zero_variance_groups_drop_only_the_t_test(self):
        rows = [{"value": 7, "group": g} for g in ["a", "b"] * 5]
        results = self.engine.analyze("value", "group", rows)

        self.assertEqual([r.type for r in results], [AnalysisType.ESTIMATION])

    def test_more_than_two_groups_gives_anova_placeholder(self):
        rows = [{"v": i, "g": g} for i, g in enumerate(["n", "s", "e"] * 4)]
        results = self.engine.analyze("v", "g", rows)

        self.assertEqual(results[-1].type, AnalysisType.ANOVA)
        self.assertEqual(results[-1].metric("Groups").value, "n, s, e")
        self.assertIn("not computed", results[-1].metric("Note").value)

    def test_unequal_counts_skip_correlation(self):
        rows = [{"x": 1, "y": 1}, {"x": 2, "y": ""}, {"x": 3, "y": 5}, {"x": 4, "y": 2}]
        results = self.engine.analyze("x", "y", rows)

        self.assertEqual([r.type for r in results], [AnalysisType.ESTIMATION])

    def test_pairs_are_row_aligned(self):
        # Equal valid counts, different gap positions: only rows 2 and 3 pair up
        rows = [
            {"x": 1, "y": ""},
            {"x": 2, "y": 10},
            {"x": 3, "y": 20},
            {"x": "", "y": 30},
        ]
        results = self.engine.analyze("x", "y", rows)

        self.assertEqual(results[1].metric("Pairs").value, 2)
        self.assertEqual(results[2].metric("Slope (m)").value, "10.0000")

    def test_missing_secondary_column(self):
        results = self.engine.analyze("x", "nope", self.rows)
        self.assertEqual([r.type for r in results], [AnalysisType.ESTIMATION])

    def test_missing_primary_column(self):
        self.assertEqual(self.engine.analyze("nope", "y", self.rows), [])

    def test_non_numeric_primary(self):
        rows = [{"name": "a", "g": "x"}, {"name": "b", "g": "y"}]
        self.assertEqual(self.engine.analyze("name", None, rows), [])

    def test_request_errors(self):
        with self.assertRaises(MissingVariableException):
            self.engine.analyze("", "y", self.rows)
        with self.assertRaises(MissingVariableException):
            self.engine.analyze(None, None, self.rows)
        with self.assertRaises(EmptyDatasetException):
            self.engine.analyze("x", None, [])

    def test_correlation_strength_bands(self):
        self.assertEqual(self.engine.correlation_strength(-0.71), CorrelationStrength.STRONG)
        self.assertEqual(self.engine.correlation_strength(0.7), CorrelationStrength.MODERATE)
        self.assertEqual(self.engine.correlation_strength(0.31), CorrelationStrength.MODERATE)
        self.assertEqual(self.engine.correlation_strength(0.3), CorrelationStrength.WEAK)

    def test_to_dict(self):
        data = self.engine.analyze("x", "label", self.rows)[1].to_dict()

        self.assertEqual(data["type"], "hypothesis")
        self.assertEqual(data["metrics"][0]["isSignificant"], False)
        self.assertNotIn("isSignificant", data["metrics"][1])
        self.assertIn("conclusion", data)


# =============================================================================
# Fixture-driven checks
# =============================================================================

def test_separated_groups_are_significant(separated_groups):
    engine = InferentialAnalysisEngine(verbose=False)
    t_test = engine.analyze("value", "arm", separated_groups)[1]

    assert abs(float(t_test.metric("t Statistic").value)) > 1.96
    assert t_test.metric("t Statistic").is_significant is True
    assert t_test.conclusion.startswith(SIGNIFICANT_DIFFERENCE)


def test_linear_fixture_recovers_line(linear_rows):
    engine = InferentialAnalysisEngine(verbose=False)
    results = engine.analyze("x", "y", linear_rows)

    assert results[2].metric("Equation").value == "y = 2.00x + 5.00"
    assert float(results[1].metric("Coefficient (r)").value) == pytest.approx(1.0)


def test_survey_rows_with_three_regions(survey_rows):
    from statlab.stats.sanitizer import normalize_row

    rows = [normalize_row(r) for r in survey_rows]
    results = InferentialAnalysisEngine(verbose=False).analyze("income", "region", rows)

    assert [r.type for r in results] == [AnalysisType.ESTIMATION, AnalysisType.ANOVA]
