"""
Z-score transform.

Applies `y_ij = (x_ij - mean_j) / stddev_j` column-wise, given statistics
produced by `StatisticsEngine`. The output is written into a scratch array
owned by the caller; committing it to the result happens elsewhere.

Zero-variance policy
--------------------
A column whose standard deviation is zero, or indistinguishable from the
rounding noise of its statistics, is treated as constant: its normalized
values are all zero. No NaN or Inf is produced.

The noise floor depends on how the variance was obtained:

- two-pass (`DEFAULT_DENSE`): `stddev <= 4 * eps * |mean|`;
- from sums (`SUM_DENSE`): `stddev <= sqrt(4 * n * eps) * |mean|`, since
  `sumSq/n - mean^2` cancels two quantities of size `mean^2` that each
  carry up to `n * eps` relative error;

and in both cases `stddev` below the smallest normal number.
"""

from __future__ import annotations

import numpy as np

from ....domain._numeric_table import INumericTable
from ..._typing import FloatArray
from ...dispatch import KernelStrategy, resolve_block_size
from ._statistics import ColumnStatistics

_NOISE_ULPS = 4


def constant_columns(stats: ColumnStatistics, dtype=np.float64) -> np.ndarray:
    """Return a boolean mask of columns treated as having zero variance."""
    finfo = np.finfo(dtype)
    std = stats.stddevs
    if stats.from_sums:
        rel = np.sqrt(_NOISE_ULPS * max(stats.n_rows, 1) * finfo.eps)
    else:
        rel = _NOISE_ULPS * finfo.eps
    noise = rel * np.abs(stats.means)
    return (std <= noise) | (std < finfo.tiny)


class Normalizer:
    """
    Writes z-scores of a table into an output array.

    Parameters
    ----------
    strategy : KernelStrategy
        Whole-table or row-block traversal.
    dtype : np.dtype | type
        Computation and output type.
    block_size : Optional[int]
        Rows per block for the blocked strategy.
    """

    def __init__(
        self,
        strategy: KernelStrategy = KernelStrategy.VECTORIZED,
        *,
        dtype=np.float64,
        block_size: int | None = None,
    ) -> None:
        self.strategy = strategy
        self.dtype = np.dtype(dtype)
        self.block_size = resolve_block_size(block_size)

    def scale_factors(self, stats: ColumnStatistics, do_scale: bool = True) -> FloatArray:
        """
        Return per-column multipliers applied after centering.

        `1 / stddev` for regular columns, `0` for constant columns and `1`
        everywhere when `do_scale` is False.
        """
        if not do_scale:
            return np.ones_like(stats.means, dtype=self.dtype)
        const = constant_columns(stats, self.dtype)
        std = np.where(const, 1, stats.stddevs).astype(self.dtype, copy=False)
        inv = 1 / std
        inv[const] = 0
        return inv

    def transform(
        self, table: INumericTable, stats: ColumnStatistics, *, do_scale: bool = True
    ) -> FloatArray:
        """
        Normalize `table` with the given statistics.

        Returns
        -------
        np.ndarray
            New array of shape `table.shape`.
        """
        means = np.asarray(stats.means, dtype=self.dtype)
        factors = self.scale_factors(stats, do_scale)
        n_rows, n_columns = table.shape

        if self.strategy is KernelStrategy.BLOCKED:
            out = np.empty((n_rows, n_columns), dtype=self.dtype)
            for start in range(0, n_rows, self.block_size):
                block = table.get_block_of_rows(start, self.block_size, dtype=self.dtype)
                out[start : start + block.shape[0]] = (block - means) * factors
            return out

        x = table.get_block_of_rows(0, n_rows, dtype=self.dtype)
        x -= means
        x *= factors
        return x
