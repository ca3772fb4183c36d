import unittest

import numpy as np

from src.keyanalytics.domain import ErrorId
from src.keyanalytics.infrastructure.dispatch import KernelStrategy
from src.keyanalytics.infrastructure.numeric_table import HomogenNumericTable
from src.keyanalytics.infrastructure.normalization.zscore import (
    KernelOutput,
    Method,
    ZScoreBatch,
    ZScoreKernel,
    ZScoreParameter,
)


class TestZScoreKernelRegistry(unittest.TestCase):
    def test_builtin_kernels_registered(self):
        available = set(ZScoreKernel.available())
        for method in Method:
            for strategy in KernelStrategy:
                self.assertIn((method, strategy), available)

    def test_dispatch_runs_kernel(self):
        t = HomogenNumericTable([[1.0], [3.0]])
        kernel = ZScoreKernel(Method.DEFAULT_DENSE, KernelStrategy.VECTORIZED)
        out = kernel(t, ZScoreParameter(), dtype=np.float64)
        self.assertIsInstance(out, KernelOutput)
        np.testing.assert_allclose(out.normalized, [[-1.0], [1.0]])
        np.testing.assert_allclose(out.statistics.means, [2.0])

    def test_duplicate_registration_rejected(self):
        with self.assertRaises(ValueError):
            ZScoreKernel.register_kernel(Method.DEFAULT_DENSE, KernelStrategy.BLOCKED)(
                lambda *a, **k: None
            )

    def test_missing_kernel_reports_unsupported_method(self):
        key = (Method.SUM_DENSE, KernelStrategy.BLOCKED)
        saved = ZScoreKernel.KERNELS.pop(key)
        try:
            with self.assertRaises(KeyError):
                ZScoreKernel(*key)

            batch = ZScoreBatch(Method.SUM_DENSE, strategy=KernelStrategy.BLOCKED)
            batch.parameter.sums = np.array([4.0])
            batch.parameter.sums_of_squares = np.array([10.0])
            batch.input.data = HomogenNumericTable([[1.0], [3.0]])
            self.assertEqual(batch.compute().errors, (ErrorId.UNSUPPORTED_METHOD,))
        finally:
            ZScoreKernel.KERNELS[key] = saved


if __name__ == "__main__":
    unittest.main()
