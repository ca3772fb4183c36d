"""
Shared behavior for concrete numeric tables.

Concrete tables implement the storage-specific accessors; this base class
provides shape reporting and index validation in one place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class NumericTableBase(ABC):
    """Abstract base implementing the `INumericTable` protocol scaffolding."""

    __slots__ = ()

    @property
    @abstractmethod
    def n_rows(self) -> int: ...

    @property
    @abstractmethod
    def n_columns(self) -> int: ...

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_columns

    @abstractmethod
    def get_column(self, j: int, dtype=np.float64) -> np.ndarray: ...

    @abstractmethod
    def set_column(self, j: int, values: np.ndarray) -> None: ...

    @abstractmethod
    def get_block_of_rows(self, start: int, n: int, dtype=np.float64) -> np.ndarray: ...

    @abstractmethod
    def set_block_of_rows(self, start: int, values: np.ndarray) -> None: ...

    def _check_column(self, j: int) -> None:
        if not 0 <= j < self.n_columns:
            raise IndexError(
                f"Column index {j} out of range for table with {self.n_columns} columns"
            )

    def _check_row_block(self, start: int, n: int) -> int:
        """Validate a row block request and return its clipped stop index."""
        if n < 0:
            raise ValueError(f"Row block size must be non-negative, got {n}")
        if not 0 <= start <= self.n_rows:
            raise IndexError(
                f"Row index {start} out of range for table with {self.n_rows} rows"
            )
        return min(start + n, self.n_rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape})"
