"""
Structure-of-arrays numeric table.

Each feature is stored as its own 1-D NumPy array, so columns may carry
different numeric dtypes (e.g. an int32 count next to a float64 ratio).
Row-block reads gather the columns and convert them to one floating type.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np

from ._base import NumericTableBase


class SOANumericTable(NumericTableBase):
    """
    Numeric table with one independently typed array per column.

    Parameters
    ----------
    columns : Sequence[array-like] | Mapping[str, array-like]
        Column arrays, all of the same length. When a mapping is given, its
        keys become the feature names.

    Raises
    ------
    ValueError
        If no columns are given, a column is not 1-D or non-numeric, or the
        column lengths differ.
    """

    __slots__ = ("_columns", "_names")

    def __init__(self, columns: Sequence | Mapping) -> None:
        if isinstance(columns, Mapping):
            names = tuple(str(k) for k in columns)
            arrays = list(columns.values())
        else:
            arrays = list(columns)
            names = tuple(f"x{j}" for j in range(len(arrays)))

        if not arrays:
            raise ValueError("SOANumericTable requires at least one column")

        cols: list[np.ndarray] = []
        for name, a in zip(names, arrays):
            col = np.array(a, copy=True)
            if col.ndim != 1:
                raise ValueError(f"Column {name!r} must be 1-D, got ndim={col.ndim}")
            if not (
                np.issubdtype(col.dtype, np.number) or col.dtype == np.bool_
            ):
                raise ValueError(f"Column {name!r} is not numeric: {col.dtype}")
            cols.append(col)

        lengths = {c.shape[0] for c in cols}
        if len(lengths) != 1:
            raise ValueError(f"Column lengths differ: {sorted(lengths)}")

        self._columns = cols
        self._names = names

    @property
    def n_rows(self) -> int:
        return int(self._columns[0].shape[0])

    @property
    def n_columns(self) -> int:
        return len(self._columns)

    @property
    def feature_names(self) -> tuple[str, ...]:
        return self._names

    @property
    def dtypes(self) -> tuple[np.dtype, ...]:
        return tuple(c.dtype for c in self._columns)

    def get_column(self, j: int, dtype=np.float64) -> np.ndarray:
        self._check_column(j)
        return self._columns[j].astype(dtype, copy=True)

    def set_column(self, j: int, values: np.ndarray) -> None:
        self._check_column(j)
        v = np.asarray(values)
        if v.shape != (self.n_rows,):
            raise ValueError(
                f"Column write expects shape ({self.n_rows},), got {v.shape}"
            )
        self._columns[j][:] = v

    def get_block_of_rows(self, start: int, n: int, dtype=np.float64) -> np.ndarray:
        stop = self._check_row_block(start, n)
        out = np.empty((stop - start, self.n_columns), dtype=dtype)
        for j, col in enumerate(self._columns):
            out[:, j] = col[start:stop]
        return out

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
        for j, col in enumerate(self._columns):
            col[start:stop] = v[:, j]
