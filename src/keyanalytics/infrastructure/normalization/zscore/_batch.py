"""
Batch z-score normalization algorithm.

`ZScoreBatch` binds an input table and a parameter, allocates the result
immediately before the pass, runs the kernel selected by
`(parameter.method, strategy)` and commits its output to the result.

Failure handling
----------------
`compute()` never raises for invalid input. It returns a `Status` listing
every detected problem. A result is never partially committed: the kernel
writes into scratch arrays, and the result buffers are only written after
the kernel has returned.

Concurrency
-----------
Instances are independent. Several instances (e.g. clones) may compute
concurrently as long as no thread mutates a shared input table meanwhile.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ....domain._numeric_table import INumericTable
from ....domain._status import ErrorId, Status
from ....utils import get_logger, log_context
from ...dispatch import KernelStrategy, select_kernel_strategy
from ._kernel import KernelOutput, ZScoreKernel
from ._types import (
    Method,
    ResultId,
    ZScoreInput,
    ZScoreParameter,
    ZScoreResult,
)

logger = get_logger(__name__)


class ZScoreBatch:
    """
    Normalizes a dataset to zero mean and unit variance per column.

    Parameters
    ----------
    method : Method
        Computation method. Defaults to `Method.DEFAULT_DENSE`.
    dtype : np.dtype | type
        Type used for intermediate computations and allocated results
        (float32 or float64).
    strategy : Optional[KernelStrategy | str]
        Kernel strategy. Resolved once via `select_kernel_strategy` when
        omitted.
    block_size : Optional[int]
        Rows per block for the blocked strategy.

    Attributes
    ----------
    input : ZScoreInput
        Input objects; set `input.data` before computing.
    parameter : ZScoreParameter
        Algorithm parameters, owned by this instance.
    """

    def __init__(
        self,
        method: Method = Method.DEFAULT_DENSE,
        *,
        dtype: Any = np.float64,
        strategy: Optional[KernelStrategy | str] = None,
        block_size: Optional[int] = None,
    ) -> None:
        dt = np.dtype(dtype)
        if dt not in (np.dtype(np.float32), np.dtype(np.float64)):
            raise ValueError(f"ZScoreBatch dtype must be float32 or float64, got {dt}")
        self.dtype = dt
        self.strategy = select_kernel_strategy(strategy)
        self.block_size = block_size
        self.input = ZScoreInput()
        self.parameter: Optional[ZScoreParameter] = ZScoreParameter(method=method)
        self._result: Optional[ZScoreResult] = ZScoreResult()
        self._result_registered = False

    def get_method(self) -> Optional[Method]:
        return None if self.parameter is None else self.parameter.method

    def get_result(self) -> Optional[ZScoreResult]:
        """Return the result populated by the last successful `compute()`."""
        return self._result

    def set_result(self, result: Optional[ZScoreResult]) -> Status:
        """
        Register caller-allocated memory to store the results.

        Buffers already present in `result` are validated and written in
        place by `compute()`; empty slots are allocated.

        Returns
        -------
        Status
            `NullResult` when `result` is None (the previous result is kept).
        """
        if result is None:
            return Status(ErrorId.NULL_RESULT, "cannot register a null result")
        self._result = result
        self._result_registered = True
        return Status()

    def clone(self) -> "ZScoreBatch":
        """
        Return a new algorithm with a copy of this one's input and parameter.

        The clone shares the input table reference, owns a value-copy of
        the parameter and starts with a fresh, empty result.
        """
        other = ZScoreBatch.__new__(ZScoreBatch)
        other.dtype = self.dtype
        other.strategy = self.strategy
        other.block_size = self.block_size
        other.input = ZScoreInput()
        other.input.data = self.input.data
        other.parameter = None if self.parameter is None else self.parameter.copy()
        other._result = ZScoreResult()
        other._result_registered = False
        return other

    def allocate_result(self) -> Status:
        """Size and allocate result buffers for the bound input and parameter."""
        if self._result is None:
            return Status(ErrorId.NULL_RESULT, "no result registered")
        if self.parameter is None:
            return Status(ErrorId.NULL_PARAMETER, "z-score parameter is not set")
        if not self._result_registered:
            self._result = ZScoreResult()
        return self._result.allocate(
            self.input, self.parameter, self.parameter.method, dtype=self.dtype
        )

    def check(self) -> Status:
        """Validate input and parameter without computing."""
        if self.parameter is None:
            return Status(ErrorId.NULL_PARAMETER, "z-score parameter is not set")
        status = self.input.check()
        if not status:
            return status
        status |= self.parameter.check(self.input.data.n_columns)
        if status and (self.parameter.method, self.strategy) not in ZScoreKernel.KERNELS:
            status.add(
                ErrorId.UNSUPPORTED_METHOD,
                f"no kernel for {self.parameter.method.value}/{self.strategy.value}",
            )
        return status

    def compute(self) -> Status:
        """
        Compute z-scores of the bound input table.

        Returns
        -------
        Status
            Empty on success. Otherwise lists `NullParameter`,
            `NullInputTable`, `EmptyInputTable`, `DimensionMismatch`,
            `UnsupportedMethod`, `NullResult` or `AllocationFailure`.
        """
        method = self.get_method()
        with log_context(
            algorithm="zscore",
            method=getattr(method, "value", method),
            strategy=self.strategy.value,
        ):
            status = self.check()
            if status:
                status |= self.allocate_result()
            if not status:
                logger.warning(
                    "zscore_compute_failed",
                    errors=[e.value for e in status.errors],
                    detail=status.description(),
                )
                return status

            table: INumericTable = self.input.data
            logger.debug(
                "zscore_compute_start", shape=table.shape, dtype=str(self.dtype)
            )
            kernel = ZScoreKernel(self.parameter.method, self.strategy)
            output = kernel(
                table, self.parameter, dtype=self.dtype, block_size=self.block_size
            )
            self._commit(output)
            logger.debug("zscore_compute_done", shape=table.shape)
            return status

    def _commit(self, output: KernelOutput) -> None:
        result = self._result
        result.get(ResultId.NORMALIZED_DATA).set_block_of_rows(0, output.normalized)
        means = result.get(ResultId.MEANS)
        if means is not None:
            means.set_block_of_rows(0, output.statistics.means.reshape(1, -1))
        variances = result.get(ResultId.VARIANCES)
        if variances is not None:
            variances.set_block_of_rows(0, output.statistics.variances.reshape(1, -1))


def zscore(
    table: INumericTable,
    parameter: Optional[ZScoreParameter] = None,
    *,
    method: Optional[Method] = None,
    dtype: Any = np.float64,
    strategy: Optional[KernelStrategy | str] = None,
) -> ZScoreResult:
    """
    Normalize `table` and return the result, raising on failure.

    Parameters
    ----------
    table : INumericTable
        Input observations.
    parameter : Optional[ZScoreParameter]
        Parameters; a default one is created when omitted.
    method : Optional[Method]
        Overrides `parameter.method` when given.
    dtype, strategy
        Forwarded to `ZScoreBatch`.

    Raises
    ------
    KeyAnalyticsError
        The exception mapped from the first error of the failed status.
    """
    batch = ZScoreBatch(dtype=dtype, strategy=strategy)
    if parameter is not None:
        batch.parameter = parameter.copy()
    if method is not None:
        batch.parameter.method = method
    batch.input.data = table
    batch.compute().raise_for_status()
    return batch.get_result()
