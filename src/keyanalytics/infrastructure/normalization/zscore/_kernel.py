"""
Z-score kernel registry and the built-in kernels.

A kernel runs the whole statistics + normalization pass for one
computation method and one kernel strategy, and returns its outputs as
scratch arrays. Kernels never touch the algorithm's result; the batch
algorithm commits their output only after the kernel has succeeded.

Usage example
-------------
Registering a kernel:

    @ZScoreKernel.register_kernel(Method.DEFAULT_DENSE, KernelStrategy.BLOCKED)
    def dense_blocked(table, parameter, *, dtype, block_size) -> KernelOutput:
        ...

Dispatching:

    kernel = ZScoreKernel(Method.DEFAULT_DENSE, KernelStrategy.BLOCKED)
    out = kernel(table, parameter, dtype=np.float64)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, TypeVar

import numpy as np

from ....domain._numeric_table import INumericTable
from ..._typing import FloatArray
from ...dispatch import KernelStrategy
from ._normalizer import Normalizer
from ._statistics import ColumnStatistics, StatisticsEngine
from ._types import Method, ZScoreParameter


@dataclass(frozen=True)
class KernelOutput:
    """Scratch outputs of one kernel run."""

    normalized: FloatArray
    statistics: ColumnStatistics


KernelFn = Callable[..., KernelOutput]
T = TypeVar("T", bound=KernelFn)


class ZScoreKernel:
    """
    Registry-backed kernel dispatcher keyed by `(Method, KernelStrategy)`.

    Notes
    -----
    - Kernels are stored in a class-level registry.
    - Construction fails with `KeyError` when no kernel matches; the batch
      algorithm converts that into an `UnsupportedMethod` status.
    """

    KERNELS: ClassVar[Dict[Tuple[Method, KernelStrategy], KernelFn]] = {}

    def __init__(self, method: Method, strategy: KernelStrategy) -> None:
        try:
            self._kernel: KernelFn = self.KERNELS[(method, strategy)]
        except KeyError as e:
            available = ", ".join(
                f"{m.value}/{s.value}" for m, s in sorted(self.KERNELS, key=str)
            )
            raise KeyError(
                f"No z-score kernel for {method!r} with {strategy!r}. "
                f"Available: {available or '<none>'}"
            ) from e
        self.method = method
        self.strategy = strategy

    @classmethod
    def register_kernel(
        cls, method: Method, strategy: KernelStrategy, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register a kernel for `(method, strategy)`.

        Parameters
        ----------
        method:
            Computation method served by the kernel.
        strategy:
            Kernel strategy served by the kernel.
        overwrite:
            If False (default), raises if the key is already registered.
        """

        def decorator(func: T) -> T:
            key = (method, strategy)
            if not overwrite and key in cls.KERNELS:
                raise ValueError(f"Kernel already registered: {key!r}")
            cls.KERNELS[key] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[Tuple[Method, KernelStrategy], ...]:
        return tuple(cls.KERNELS)

    def __call__(
        self,
        table: INumericTable,
        parameter: ZScoreParameter,
        *,
        dtype: Any = np.float64,
        block_size: Optional[int] = None,
    ) -> KernelOutput:
        return self._kernel(table, parameter, dtype=dtype, block_size=block_size)


def _run(
    table: INumericTable,
    parameter: ZScoreParameter,
    strategy: KernelStrategy,
    *,
    dtype: Any,
    block_size: Optional[int],
    from_sums: bool,
) -> KernelOutput:
    engine = StatisticsEngine(strategy, dtype=dtype, block_size=block_size)
    if from_sums:
        stats = engine.from_sums(
            parameter.sums, parameter.sums_of_squares, table.n_rows
        )
    else:
        stats = engine.from_table(table)
    normalizer = Normalizer(strategy, dtype=dtype, block_size=block_size)
    normalized = normalizer.transform(table, stats, do_scale=parameter.do_scale)
    return KernelOutput(normalized, stats)


@ZScoreKernel.register_kernel(Method.DEFAULT_DENSE, KernelStrategy.VECTORIZED)
def dense_vectorized(table, parameter, *, dtype, block_size=None) -> KernelOutput:
    return _run(
        table,
        parameter,
        KernelStrategy.VECTORIZED,
        dtype=dtype,
        block_size=block_size,
        from_sums=False,
    )


@ZScoreKernel.register_kernel(Method.DEFAULT_DENSE, KernelStrategy.BLOCKED)
def dense_blocked(table, parameter, *, dtype, block_size=None) -> KernelOutput:
    return _run(
        table,
        parameter,
        KernelStrategy.BLOCKED,
        dtype=dtype,
        block_size=block_size,
        from_sums=False,
    )


@ZScoreKernel.register_kernel(Method.SUM_DENSE, KernelStrategy.VECTORIZED)
def sum_vectorized(table, parameter, *, dtype, block_size=None) -> KernelOutput:
    return _run(
        table,
        parameter,
        KernelStrategy.VECTORIZED,
        dtype=dtype,
        block_size=block_size,
        from_sums=True,
    )


@ZScoreKernel.register_kernel(Method.SUM_DENSE, KernelStrategy.BLOCKED)
def sum_blocked(table, parameter, *, dtype, block_size=None) -> KernelOutput:
    return _run(
        table,
        parameter,
        KernelStrategy.BLOCKED,
        dtype=dtype,
        block_size=block_size,
        from_sums=True,
    )
