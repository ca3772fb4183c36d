"""
Homogeneous numeric table backed by a single 2-D NumPy array.

All columns share one dtype. Reads return converted copies; writes cast
into the table's storage. This is the table type normalization results
are allocated with.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ._base import NumericTableBase


class HomogenNumericTable(NumericTableBase):
    """
    Row-major numeric table with a single dtype.

    Parameters
    ----------
    data : array-like
        2-D array of observations. 1-D input is treated as a single row.
    dtype : np.dtype | type | None
        Storage dtype. Defaults to the dtype of `data` when it is floating,
        otherwise float64.
    copy : bool
        If False and `data` is already a C-contiguous array of the target
        dtype, the table wraps it without copying.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any, *, dtype=None, copy: bool = True) -> None:
        arr = np.asarray(data)
        if dtype is None:
            dtype = arr.dtype if np.issubdtype(arr.dtype, np.floating) else np.float64
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        if arr.ndim != 2:
            raise ValueError(f"Numeric table data must be 2-D, got ndim={arr.ndim}")
        if copy:
            self._data = np.array(arr, dtype=dtype, order="C")
        else:
            self._data = np.ascontiguousarray(arr, dtype=dtype)

    @classmethod
    def empty(cls, n_rows: int, n_columns: int, dtype=np.float64) -> "HomogenNumericTable":
        """Allocate a zero-filled table of the given shape."""
        if n_rows < 0 or n_columns < 0:
            raise ValueError(f"Invalid table shape ({n_rows}, {n_columns})")
        return cls(np.zeros((n_rows, n_columns), dtype=dtype), copy=False)

    @property
    def n_rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def n_columns(self) -> int:
        return int(self._data.shape[1])

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def get_column(self, j: int, dtype=np.float64) -> np.ndarray:
        self._check_column(j)
        return self._data[:, j].astype(dtype, copy=True)

    def set_column(self, j: int, values: np.ndarray) -> None:
        self._check_column(j)
        v = np.asarray(values)
        if v.shape != (self.n_rows,):
            raise ValueError(
                f"Column write expects shape ({self.n_rows},), got {v.shape}"
            )
        self._data[:, j] = v

    def get_block_of_rows(self, start: int, n: int, dtype=np.float64) -> np.ndarray:
        stop = self._check_row_block(start, n)
        return self._data[start:stop].astype(dtype, copy=True)

    def set_block_of_rows(self, start: int, values: np.ndarray) -> None:
        v = np.asarray(values)
        if v.ndim != 2 or v.shape[1] != self.n_columns:
            raise ValueError(
                f"Row block must have shape (n, {self.n_columns}), got {v.shape}"
            )
        stop = self._check_row_block(start, v.shape[0])
        if stop - start != v.shape[0]:
            raise ValueError(
                f"Row block of {v.shape[0]} rows at {start} exceeds {self.n_rows} rows"
            )
        self._data[start:stop] = v

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the table contents as a 2-D array."""
        return self._data.copy()
