"""
Per-column statistics for z-score normalization.

Variance algorithm
------------------
Column variances are computed with the corrected two-pass algorithm:

    mean_j = (1/n) * sum_i x_ij
    d_ij   = x_ij - mean_j
    var_j  = (sum_i d_ij^2 - (sum_i d_ij)^2 / n) / n

The second term is zero in exact arithmetic and cancels the rounding error
of the computed mean. This avoids the cancellation of the naive
`E[x^2] - E[x]^2` form. Variances are population variances (divided by n).

Both passes are sums over rows, so they are reducible across row blocks:
the blocked strategy accumulates per-block partial sums and adds them.

The `SUM_DENSE` method cannot re-scan the data and derives statistics from
caller-supplied sums with the two-moment formula, clipped at zero.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ....domain._numeric_table import INumericTable
from ..._typing import FloatArray
from ...dispatch import KernelStrategy, resolve_block_size


@dataclass(frozen=True)
class ColumnStatistics:
    """
    Per-column means and population variances of a table with `n_rows` rows.

    `from_sums` marks statistics derived with the two-moment formula, whose
    variances carry rounding noise of order `eps * mean**2`.
    """

    means: FloatArray
    variances: FloatArray
    n_rows: int
    from_sums: bool = False

    @property
    def stddevs(self) -> FloatArray:
        return np.sqrt(self.variances)


class StatisticsEngine:
    """
    Computes column means and variances of a numeric table.

    Parameters
    ----------
    strategy : KernelStrategy
        Whole-table (`VECTORIZED`) or row-block (`BLOCKED`) reduction.
    dtype : np.dtype | type
        Accumulation type.
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

    def from_table(self, table: INumericTable) -> ColumnStatistics:
        """Scan `table` and return its column statistics (two-pass)."""
        if self.strategy is KernelStrategy.BLOCKED:
            return self._two_pass_blocked(table)
        return self._two_pass_vectorized(table)

    def from_sums(
        self, sums: FloatArray, sums_of_squares: FloatArray, n_rows: int
    ) -> ColumnStatistics:
        """
        Derive column statistics from precomputed sums.

        Parameters
        ----------
        sums : np.ndarray
            Per-column sums, shape `(p,)` or `(1, p)`.
        sums_of_squares : np.ndarray
            Per-column sums of squared values, same shape as `sums`.
        n_rows : int
            Number of observations the sums were taken over.
        """
        s = np.asarray(sums, dtype=self.dtype).reshape(-1)
        ss = np.asarray(sums_of_squares, dtype=self.dtype).reshape(-1)
        n = self.dtype.type(n_rows)
        means = s / n
        variances = np.maximum(ss / n - means * means, 0)
        return ColumnStatistics(means, variances, int(n_rows), from_sums=True)

    def _two_pass_vectorized(self, table: INumericTable) -> ColumnStatistics:
        n_rows = table.n_rows
        x = table.get_block_of_rows(0, n_rows, dtype=self.dtype)
        n = self.dtype.type(n_rows)
        means = x.sum(axis=0) / n
        d = x - means
        s1 = d.sum(axis=0)
        s2 = np.einsum("ij,ij->j", d, d)
        return ColumnStatistics(means, self._finish_variance(s1, s2, n), n_rows)

    def _two_pass_blocked(self, table: INumericTable) -> ColumnStatistics:
        n_rows, n_columns = table.shape
        n = self.dtype.type(n_rows)

        sums = np.zeros(n_columns, dtype=self.dtype)
        for start in range(0, n_rows, self.block_size):
            sums += table.get_block_of_rows(start, self.block_size, dtype=self.dtype).sum(
                axis=0
            )
        means = sums / n

        s1 = np.zeros(n_columns, dtype=self.dtype)
        s2 = np.zeros(n_columns, dtype=self.dtype)
        for start in range(0, n_rows, self.block_size):
            d = table.get_block_of_rows(start, self.block_size, dtype=self.dtype) - means
            s1 += d.sum(axis=0)
            s2 += np.einsum("ij,ij->j", d, d)
        return ColumnStatistics(means, self._finish_variance(s1, s2, n), n_rows)

    @staticmethod
    def _finish_variance(s1: FloatArray, s2: FloatArray, n) -> FloatArray:
        return np.maximum((s2 - s1 * s1 / n) / n, 0)
