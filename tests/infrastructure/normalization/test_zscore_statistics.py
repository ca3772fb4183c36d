import unittest

import numpy as np

from src.keyanalytics.infrastructure.dispatch import KernelStrategy
from src.keyanalytics.infrastructure.numeric_table import HomogenNumericTable
from src.keyanalytics.infrastructure.normalization.zscore import (
    ColumnStatistics,
    Normalizer,
    StatisticsEngine,
    constant_columns,
)


class TestStatisticsEngine(unittest.TestCase):
    def test_two_pass_is_stable_with_large_offset(self):
        # the naive E[x^2] - E[x]^2 form loses all digits here
        x = 1e9 + np.array([[4.0], [7.0], [13.0], [16.0]])
        stats = StatisticsEngine().from_table(HomogenNumericTable(x))
        np.testing.assert_allclose(stats.means, [1e9 + 10.0])
        np.testing.assert_allclose(stats.variances, [22.5], rtol=1e-9)

    def test_blocked_reduction_matches_vectorized(self):
        x = np.random.default_rng(3).normal(size=(1001, 5))
        t = HomogenNumericTable(x)
        a = StatisticsEngine(KernelStrategy.VECTORIZED).from_table(t)
        b = StatisticsEngine(KernelStrategy.BLOCKED, block_size=100).from_table(t)
        np.testing.assert_allclose(a.means, b.means, atol=1e-14)
        np.testing.assert_allclose(a.variances, b.variances, rtol=1e-12)
        self.assertEqual(b.n_rows, 1001)

    def test_block_larger_than_table(self):
        x = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        stats = StatisticsEngine(KernelStrategy.BLOCKED, block_size=1000).from_table(
            HomogenNumericTable(x)
        )
        np.testing.assert_allclose(stats.means, [3.0, 4.0])
        np.testing.assert_allclose(stats.variances, [8.0 / 3.0, 8.0 / 3.0])

    def test_from_sums(self):
        stats = StatisticsEngine().from_sums(
            np.array([9.0, 12.0]), np.array([35.0, 56.0]), 3
        )
        np.testing.assert_allclose(stats.means, [3.0, 4.0])
        np.testing.assert_allclose(stats.variances, [8.0 / 3.0, 8.0 / 3.0])
        np.testing.assert_allclose(stats.stddevs, np.sqrt([8.0 / 3.0, 8.0 / 3.0]))

    def test_invalid_block_size(self):
        with self.assertRaises(ValueError):
            StatisticsEngine(KernelStrategy.BLOCKED, block_size=0)


class TestNormalizer(unittest.TestCase):
    def test_constant_column_mask(self):
        stats = ColumnStatistics(
            means=np.array([5.0, 0.0, 1.0]),
            variances=np.array([0.0, 0.0, 4.0]),
            n_rows=3,
        )
        np.testing.assert_array_equal(constant_columns(stats), [True, True, False])

    def test_sum_derived_statistics_use_wider_noise_floor(self):
        means = np.array([0.1, 0.1])
        variances = np.array([1e-18, 1e-4])
        two_pass = ColumnStatistics(means, variances, n_rows=7)
        summed = ColumnStatistics(means, variances, n_rows=7, from_sums=True)
        np.testing.assert_array_equal(constant_columns(two_pass), [False, False])
        np.testing.assert_array_equal(constant_columns(summed), [True, False])

    def test_from_sums_marks_statistics(self):
        stats = StatisticsEngine().from_sums([9.0, 12.0], [35.0, 56.0], 3)
        self.assertTrue(stats.from_sums)
        self.assertFalse(
            StatisticsEngine().from_table(HomogenNumericTable([[1.0], [2.0]])).from_sums
        )

    def test_scale_factors(self):
        stats = ColumnStatistics(
            means=np.array([5.0, 1.0]), variances=np.array([0.0, 4.0]), n_rows=3
        )
        n = Normalizer()
        np.testing.assert_array_equal(n.scale_factors(stats), [0.0, 0.5])
        np.testing.assert_array_equal(n.scale_factors(stats, do_scale=False), [1.0, 1.0])

    def test_blocked_transform_matches_vectorized(self):
        x = np.random.default_rng(5).normal(size=(257, 3))
        t = HomogenNumericTable(x)
        stats = StatisticsEngine().from_table(t)
        a = Normalizer(KernelStrategy.VECTORIZED).transform(t, stats)
        b = Normalizer(KernelStrategy.BLOCKED, block_size=16).transform(t, stats)
        np.testing.assert_array_equal(a, b)
        self.assertEqual(a.shape, (257, 3))


if __name__ == "__main__":
    unittest.main()
