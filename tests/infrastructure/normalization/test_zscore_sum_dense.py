import unittest

import numpy as np

from src.keyanalytics.domain import DimensionMismatchError, ErrorId
from src.keyanalytics.infrastructure.numeric_table import HomogenNumericTable
from src.keyanalytics.infrastructure.normalization.zscore import (
    Method,
    ResultToCompute,
    ZScoreBatch,
    ZScoreParameter,
    zscore,
)


class TestZScoreSumDense(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(42)
        self.x = rng.uniform(-5.0, 5.0, size=(200, 4))
        self.table = HomogenNumericTable(self.x)

    def _sum_parameter(self, **kwargs) -> ZScoreParameter:
        return ZScoreParameter(
            method=Method.SUM_DENSE,
            sums=self.x.sum(axis=0),
            sums_of_squares=(self.x * self.x).sum(axis=0),
            **kwargs,
        )

    def test_matches_default_dense(self):
        dense = zscore(self.table).normalized_data.to_numpy()
        summed = zscore(self.table, self._sum_parameter()).normalized_data.to_numpy()
        np.testing.assert_allclose(summed, dense, atol=1e-8)

    def test_statistics_from_sums(self):
        res = zscore(
            self.table,
            self._sum_parameter(
                result_to_compute=ResultToCompute.MEAN | ResultToCompute.VARIANCE
            ),
        )
        np.testing.assert_allclose(res.means.to_numpy()[0], self.x.mean(axis=0), atol=1e-12)
        np.testing.assert_allclose(
            res.variances.to_numpy()[0], self.x.var(axis=0), atol=1e-9
        )

    def test_row_vector_sums_are_accepted(self):
        param = self._sum_parameter()
        param.sums = param.sums.reshape(1, -1)
        param.sums_of_squares = param.sums_of_squares.reshape(1, -1)
        batch = ZScoreBatch(Method.SUM_DENSE)
        batch.parameter = param
        batch.input.data = self.table
        self.assertTrue(batch.compute().ok)

    def test_sums_length_mismatch(self):
        batch = ZScoreBatch(Method.SUM_DENSE)
        batch.parameter.sums = np.zeros(3)
        batch.parameter.sums_of_squares = np.zeros(4)
        batch.input.data = self.table
        status = batch.compute()
        self.assertEqual(status.errors, (ErrorId.DIMENSION_MISMATCH,))
        self.assertIsNone(batch.get_result().normalized_data)

    def test_missing_sums(self):
        batch = ZScoreBatch(Method.SUM_DENSE)
        batch.input.data = self.table
        status = batch.compute()
        self.assertEqual(
            status.errors, (ErrorId.DIMENSION_MISMATCH, ErrorId.DIMENSION_MISMATCH)
        )

    def test_zscore_raises_dimension_mismatch(self):
        param = ZScoreParameter(
            method=Method.SUM_DENSE, sums=[1.0], sums_of_squares=[1.0]
        )
        with self.assertRaises(DimensionMismatchError):
            zscore(self.table, param)

    def test_inconsistent_sums_do_not_produce_nan(self):
        # sum of squares too small for the sums: variance clipped to zero
        param = ZScoreParameter(
            method=Method.SUM_DENSE,
            sums=self.x.sum(axis=0),
            sums_of_squares=np.zeros(4),
        )
        y = zscore(self.table, param).normalized_data.to_numpy()
        self.assertTrue(np.isfinite(y).all())
        np.testing.assert_array_equal(y, np.zeros_like(y))

    def test_sums_assigned_as_lists(self):
        x = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        batch = ZScoreBatch(Method.SUM_DENSE)
        batch.parameter.sums = [9.0, 12.0]
        batch.parameter.sums_of_squares = [35.0, 56.0]
        batch.input.data = HomogenNumericTable(x)
        self.assertTrue(batch.compute().ok)
        self.assertIsInstance(batch.parameter.sums, np.ndarray)
        expected = np.sqrt(1.5) * np.array([[-1.0, -1.0], [0.0, 0.0], [1.0, 1.0]])
        np.testing.assert_allclose(
            batch.get_result().normalized_data.to_numpy(), expected, atol=1e-12
        )

    def test_list_sums_with_wrong_length_report_status(self):
        batch = ZScoreBatch(Method.SUM_DENSE)
        batch.parameter.sums = [1.0, 2.0]
        batch.parameter.sums_of_squares = [1.0, 2.0, 3.0, 4.0]
        batch.input.data = self.table
        self.assertEqual(batch.compute().errors, (ErrorId.DIMENSION_MISMATCH,))

    def test_non_numeric_sums_report_status(self):
        batch = ZScoreBatch(Method.SUM_DENSE)
        batch.parameter.sums = ["a", "b", "c", "d"]
        batch.parameter.sums_of_squares = (self.x * self.x).sum(axis=0)
        batch.input.data = self.table
        self.assertEqual(batch.compute().errors, (ErrorId.DIMENSION_MISMATCH,))

    def test_constant_columns_are_zero(self):
        for value, n_rows in ((0.1, 7), (1.0 / 3.0, 50), (1e6 + 0.7, 1000), (-2.5, 3)):
            x = np.full((n_rows, 2), value)
            x[:, 1] = np.arange(n_rows)
            table = HomogenNumericTable(x)
            param = ZScoreParameter(
                method=Method.SUM_DENSE,
                sums=x.sum(axis=0),
                sums_of_squares=(x * x).sum(axis=0),
            )
            summed = zscore(table, param).normalized_data.to_numpy()
            dense = zscore(table).normalized_data.to_numpy()
            np.testing.assert_array_equal(summed[:, 0], np.zeros(n_rows))
            np.testing.assert_array_equal(summed[:, 0], dense[:, 0])
            self.assertTrue(np.isfinite(summed).all())
            np.testing.assert_allclose(summed[:, 1], dense[:, 1], atol=1e-8)

    def test_parameter_copy_is_independent(self):
        param = self._sum_parameter()
        other = param.copy()
        other.sums[0] = 123.0
        self.assertNotEqual(param.sums[0], 123.0)


if __name__ == "__main__":
    unittest.main()
