# statlab - Unit Tests: Variable Type Classifier

import os
import sys
import unittest

# Add parent to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from statlab.stats.classification import VariableKind, classify, numeric_fraction


class TestClassify(unittest.TestCase):
    """Tests for the prefix-sample classifier."""

    def test_category_labels_are_categorical(self):
        labels = ["red", "blue", "green", "red", "blue", "green", "red", "blue", "green", "red"]
        self.assertEqual(classify(labels), VariableKind.CATEGORICAL)

    def test_numbers_are_numeric(self):
        self.assertEqual(classify([1, 2.5, 3, 4, 5, 6, 7, 8, 9, 10]), VariableKind.NUMERIC)

    def test_numeric_strings_are_numeric(self):
        self.assertEqual(classify(["1", " 2 ", "3.5", "4e2"]), VariableKind.NUMERIC)

    def test_booleans_do_not_count_as_numeric(self):
        self.assertEqual(classify([True, False] * 5), VariableKind.CATEGORICAL)

    def test_threshold_boundary(self):
        # 8 of 10 numeric -> exactly 0.8 -> numeric
        self.assertEqual(classify([1] * 8 + ["x", "y"]), VariableKind.NUMERIC)
        # 7 of 10 numeric -> categorical
        self.assertEqual(classify([1] * 7 + ["x", "y", "z"]), VariableKind.CATEGORICAL)

    def test_only_prefix_is_sampled(self):
        values = [1] * 10 + ["label"] * 100
        self.assertEqual(classify(values), VariableKind.NUMERIC)
        self.assertEqual(classify(values, sample_size=110), VariableKind.CATEGORICAL)

    def test_missing_cells_are_skipped(self):
        values = [None, "", "  "] * 4 + [1, 2, 3]
        self.assertEqual(classify(values), VariableKind.NUMERIC)

    def test_short_column(self):
        self.assertEqual(classify([3]), VariableKind.NUMERIC)
        self.assertEqual(classify(["a"]), VariableKind.CATEGORICAL)

    def test_explicit_zero_sample_is_empty(self):
        self.assertEqual(classify([1, 2, 3], sample_size=0), VariableKind.CATEGORICAL)

    def test_empty_column_is_categorical(self):
        self.assertEqual(classify([]), VariableKind.CATEGORICAL)
        self.assertEqual(numeric_fraction([]), 0.0)

    def test_sample_size_from_settings(self):
        from statlab.core.config import get_settings

        os.environ["STATS_CLASSIFIER_SAMPLE_SIZE"] = "2"
        try:
            get_settings.cache_clear()
            self.assertEqual(classify([1, 2, "a", "b", "c"]), VariableKind.NUMERIC)
        finally:
            del os.environ["STATS_CLASSIFIER_SAMPLE_SIZE"]
            get_settings.cache_clear()


if __name__ == '__main__':
    unittest.main()
