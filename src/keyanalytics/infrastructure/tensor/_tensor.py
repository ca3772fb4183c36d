"""
N-dimensional numeric buffer used as an initializer target.

`HomogenTensor` is a thin wrapper around a C-contiguous NumPy array. It
exists so initializer results can hold a stable object whose *contents*
are filled in place by a downstream kernel: the tensor's identity never
changes, only its data.
"""

from __future__ import annotations

from typing import Any

import numpy as np


class HomogenTensor:
    """
    Single-dtype N-D buffer with in-place fill semantics.

    Parameters
    ----------
    shape : tuple[int, ...]
        Tensor dimensions.
    dtype : np.dtype | type
        Element type. Defaults to float32.
    """

    __slots__ = ("_data",)

    def __init__(self, shape: tuple[int, ...], dtype: Any = np.float32) -> None:
        shape = tuple(int(d) for d in shape)
        if any(d < 0 for d in shape):
            raise ValueError(f"Tensor shape must be non-negative, got {shape}")
        self._data = np.zeros(shape, dtype=dtype)

    @classmethod
    def from_numpy(cls, arr: np.ndarray, dtype: Any = None) -> "HomogenTensor":
        """Create a tensor holding a copy of `arr`."""
        a = np.asarray(arr)
        t = cls(a.shape, dtype=a.dtype if dtype is None else dtype)
        t.copy_from_numpy(a)
        return t

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._data.shape)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def numel(self) -> int:
        return int(self._data.size)

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the tensor contents."""
        return self._data.copy()

    def copy_from_numpy(self, arr: np.ndarray) -> None:
        """
        Overwrite the tensor contents with `arr` (cast to this dtype).

        Raises
        ------
        ValueError
            If `arr.shape` differs from the tensor shape.
        """
        a = np.asarray(arr)
        if a.shape != self._data.shape:
            raise ValueError(
                f"Shape mismatch in copy_from_numpy: {a.shape} vs {self._data.shape}"
            )
        self._data[...] = a

    def fill(self, value: float) -> None:
        self._data.fill(value)

    def __repr__(self) -> str:
        return f"HomogenTensor(shape={self.shape}, dtype={self.dtype})"
