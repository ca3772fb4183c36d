"""
Types of the z-score normalization algorithm.

This module defines the identifiers, parameter, input and result objects
of the batch z-score normalization algorithm, including the result
allocation step that sizes every buffer before the computation runs.

Enumerations
------------
- Method: computation method (`DEFAULT_DENSE`, `SUM_DENSE`).
- InputId: identifiers of input objects.
- ResultId: identifiers of result objects.
- ResultToCompute: flags selecting optional results.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag
from typing import Optional

import numpy as np

from ....domain._numeric_table import INumericTable
from ....domain._slots import KeyedSlots
from ....domain._status import ErrorId, Status
from ..._typing import FloatArray
from ...numeric_table import HomogenNumericTable


class Method(Enum):
    """
    Z-score normalization computation methods.

    Attributes
    ----------
    DEFAULT_DENSE : Method
        Statistics are computed from the input table (two-pass algorithm).
    SUM_DENSE : Method
        Statistics are derived from caller-supplied per-column sums and
        sums of squares, avoiding a full scan of the table.
    """

    DEFAULT_DENSE = "defaultDense"
    SUM_DENSE = "sumDense"


class InputId(Enum):
    DATA = "data"


class ResultId(Enum):
    """
    Identifiers of z-score normalization results.

    Attributes
    ----------
    NORMALIZED_DATA : ResultId
        Table of normalized observations, same shape as the input.
    MEANS : ResultId
        `1 x p` table of column means (optional).
    VARIANCES : ResultId
        `1 x p` table of column population variances (optional).
    """

    NORMALIZED_DATA = "normalizedData"
    MEANS = "means"
    VARIANCES = "variances"


class ResultToCompute(Flag):
    """Optional results to compute in addition to the normalized data."""

    NONE = 0
    MEAN = 1
    VARIANCE = 2


@dataclass
class BaseParameter:
    """
    Common parameter base carrying the computation method tag.

    The tag selects which variant-specific payload of a subclass is
    meaningful. Parameters are plain values: copying one (`copy()`)
    produces an independent parameter.
    """

    method: Method = Method.DEFAULT_DENSE

    def copy(self):
        return replace(self)


@dataclass
class ZScoreParameter(BaseParameter):
    """
    Parameters of the z-score normalization algorithm.

    Attributes
    ----------
    result_to_compute : ResultToCompute
        Optional results to produce. Defaults to none.
    do_scale : bool
        If False, only centering is performed (`y = x - mean`).
    sums : Optional[np.ndarray]
        Per-column sums of the input table, required by `SUM_DENSE`.
    sums_of_squares : Optional[np.ndarray]
        Per-column sums of squared values, required by `SUM_DENSE`.
    """

    result_to_compute: ResultToCompute = ResultToCompute.NONE
    do_scale: bool = True
    sums: Optional[FloatArray] = field(default=None, repr=False)
    sums_of_squares: Optional[FloatArray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.sums is not None:
            self.sums = np.asarray(self.sums, dtype=np.float64)
        if self.sums_of_squares is not None:
            self.sums_of_squares = np.asarray(self.sums_of_squares, dtype=np.float64)

    def copy(self) -> "ZScoreParameter":
        return replace(
            self,
            sums=None if self.sums is None else self.sums.copy(),
            sums_of_squares=(
                None if self.sums_of_squares is None else self.sums_of_squares.copy()
            ),
        )

    def check(self, n_columns: int) -> Status:
        """
        Validate the method-specific payload against the input width.

        Returns
        -------
        Status
            `UnsupportedMethod` for an unknown method tag; for `SUM_DENSE`,
            `DimensionMismatch` when sums are missing, not numeric or not
            of length `n_columns`. Sums assigned as sequences are stored
            back as float64 arrays.
        """
        status = Status()
        if not isinstance(self.method, Method):
            return status.add(
                ErrorId.UNSUPPORTED_METHOD, f"unknown method {self.method!r}"
            )
        if self.method is not Method.SUM_DENSE:
            return status

        for name in ("sums", "sums_of_squares"):
            arr = getattr(self, name)
            if arr is None:
                status.add(ErrorId.DIMENSION_MISMATCH, f"{name} not supplied")
                continue
            try:
                arr = np.asarray(arr, dtype=np.float64)
            except (TypeError, ValueError) as e:
                status.add(ErrorId.DIMENSION_MISMATCH, f"{name} is not numeric: {e}")
                continue
            # kernels read the converted array from the attribute
            setattr(self, name, arr)
            if arr.shape not in ((n_columns,), (1, n_columns)):
                status.add(
                    ErrorId.DIMENSION_MISMATCH,
                    f"{name} has shape {arr.shape}, expected ({n_columns},)",
                )
        return status


class ZScoreInput(KeyedSlots[InputId]):
    """Input objects of the z-score normalization algorithm."""

    KEYS = InputId

    @property
    def data(self) -> Optional[INumericTable]:
        return self.get(InputId.DATA)

    @data.setter
    def data(self, table: Optional[INumericTable]) -> None:
        self.set(InputId.DATA, table)

    def check(self) -> Status:
        """
        Validate the bound input table.

        Returns
        -------
        Status
            `NullInputTable` when no table (or a non-table) is bound,
            `EmptyInputTable` when it has no rows or no columns.
        """
        table = self.data
        if table is None:
            return Status(ErrorId.NULL_INPUT_TABLE, "input data table is not set")
        if not isinstance(table, INumericTable):
            return Status(
                ErrorId.NULL_INPUT_TABLE,
                f"input data is not a numeric table: {type(table).__name__}",
            )
        n_rows, n_columns = table.shape
        if n_rows < 1 or n_columns < 1:
            return Status(
                ErrorId.EMPTY_INPUT_TABLE, f"input table has shape {(n_rows, n_columns)}"
            )
        return Status()


class ZScoreResult(KeyedSlots[ResultId]):
    """
    Results of the z-score normalization algorithm.

    Invariants
    ----------
    - `normalized_data.shape == input.shape`.
    - `means` / `variances` are `1 x p` and present iff requested.
    """

    KEYS = ResultId

    @property
    def normalized_data(self) -> Optional[HomogenNumericTable]:
        return self.get(ResultId.NORMALIZED_DATA)

    @property
    def means(self) -> Optional[HomogenNumericTable]:
        return self.get(ResultId.MEANS)

    @property
    def variances(self) -> Optional[HomogenNumericTable]:
        return self.get(ResultId.VARIANCES)

    def _required_shapes(
        self, input: ZScoreInput, parameter: ZScoreParameter
    ) -> dict[ResultId, tuple[int, int]]:
        n_rows, n_columns = input.data.shape
        shapes = {ResultId.NORMALIZED_DATA: (n_rows, n_columns)}
        if ResultToCompute.MEAN in parameter.result_to_compute:
            shapes[ResultId.MEANS] = (1, n_columns)
        if ResultToCompute.VARIANCE in parameter.result_to_compute:
            shapes[ResultId.VARIANCES] = (1, n_columns)
        return shapes

    def allocate(
        self,
        input: ZScoreInput,
        parameter: ZScoreParameter,
        method: Method,
        dtype=np.float64,
    ) -> Status:
        """
        Size and allocate result buffers for the given input and parameter.

        Empty slots receive newly allocated zero-filled tables; buffers the
        caller registered are validated instead. Optional results that were
        not requested are removed once validation has passed; a failed
        allocation leaves the result untouched.

        Parameters
        ----------
        input : ZScoreInput
            Bound input; its table determines the result shapes.
        parameter : ZScoreParameter
            Selects the optional results.
        method : Method
            Computation method (all methods share one result layout).
        dtype : np.dtype | type
            Element type of newly allocated tables.

        Returns
        -------
        Status
            `AllocationFailure` (plus `DimensionMismatch` for shape errors)
            when buffers cannot be provided.
        """
        status = input.check()
        if not status:
            return Status(ErrorId.ALLOCATION_FAILURE, "no valid input to size from").merge(
                status
            )
        if not isinstance(method, Method):
            return Status(ErrorId.ALLOCATION_FAILURE).add(
                ErrorId.UNSUPPORTED_METHOD, f"unknown method {method!r}"
            )

        shapes = self._required_shapes(input, parameter)
        mismatches = Status()
        for key, shape in shapes.items():
            existing = self.get(key)
            if existing is None:
                continue
            if not isinstance(existing, INumericTable) or existing.shape != shape:
                got = getattr(existing, "shape", type(existing).__name__)
                mismatches.add(
                    ErrorId.DIMENSION_MISMATCH,
                    f"{key.value} has shape {got}, expected {shape}",
                )
        if not mismatches:
            return Status(ErrorId.ALLOCATION_FAILURE, "registered result is inconsistent").merge(
                mismatches
            )

        for key in (ResultId.MEANS, ResultId.VARIANCES):
            if key not in shapes:
                self.set(key, None)
        try:
            for key, shape in shapes.items():
                if self.get(key) is None:
                    self.set(key, HomogenNumericTable.empty(*shape, dtype=dtype))
        except MemoryError as e:
            return Status(ErrorId.ALLOCATION_FAILURE, str(e) or "out of memory")
        return Status()
