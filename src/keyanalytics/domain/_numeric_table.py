"""
Numeric table interface definitions.

A numeric table is a 2-D container of observations: rows are samples and
columns are features. Algorithms depend only on the block-wise access
protocol defined here and never on a concrete storage layout, so a
homogeneous (single dtype) table and a structure-of-arrays table with
mixed column types are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class INumericTable(Protocol):
    """
    Domain-level interface for 2-D numeric tables.

    Notes
    -----
    - Reads return *copies* converted to the requested dtype; callers may
      modify them freely without affecting the table.
    - Writes copy the given values into the table's storage, casting to the
      table's column dtype.
    """

    @property
    def n_rows(self) -> int:
        """Number of observations (rows)."""
        ...

    @property
    def n_columns(self) -> int:
        """Number of features (columns)."""
        ...

    @property
    def shape(self) -> tuple[int, int]:
        """Return `(n_rows, n_columns)`."""
        ...

    def get_column(self, j: int, dtype: np.dtype | type = np.float64) -> np.ndarray:
        """
        Read feature `j` for all rows.

        Parameters
        ----------
        j : int
            Column index in `[0, n_columns)`.
        dtype : np.dtype | type
            Floating type of the returned array.

        Returns
        -------
        np.ndarray
            1-D array of length `n_rows`.
        """
        ...

    def set_column(self, j: int, values: np.ndarray) -> None:
        """Write feature `j` for all rows."""
        ...

    def get_block_of_rows(
        self, start: int, n: int, dtype: np.dtype | type = np.float64
    ) -> np.ndarray:
        """
        Read a row-major block of `n` rows starting at row `start`.

        The block is clipped at the end of the table, so the returned array
        has shape `(min(n, n_rows - start), n_columns)`.
        """
        ...

    def set_block_of_rows(self, start: int, values: np.ndarray) -> None:
        """Write a row-major block starting at row `start`."""
        ...
