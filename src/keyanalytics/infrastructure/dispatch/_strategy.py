"""
Kernel strategy selection.

Kernels for the statistics / normalization pass exist in several variants
that compute the same result with different memory access patterns. The
variant is chosen once, as an explicit `KernelStrategy` value, and then
passed to the algorithms as an ordinary argument. Nothing in the compute
path consults global state.

Resolution policy
-----------------
Unless an explicit strategy is given, `select_kernel_strategy` resolves in
this priority order:

1. The `KEYANALYTICS_KERNEL` environment variable ("vectorized"/"blocked").
2. `KernelStrategy.VECTORIZED`.

The result is cached, so the environment is read at most once per process
(call `select_kernel_strategy.cache_clear()` to re-resolve).

Configuration
-------------
- ``KEYANALYTICS_KERNEL``: preferred strategy name.
- ``KEYANALYTICS_BLOCK_SIZE``: rows per block for the blocked strategy
  (positive integer, default 1024).
"""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache
from typing import Optional, Union

from ...utils import get_logger

logger = get_logger(__name__)

KERNEL_ENV_VAR = "KEYANALYTICS_KERNEL"
BLOCK_SIZE_ENV_VAR = "KEYANALYTICS_BLOCK_SIZE"
DEFAULT_BLOCK_SIZE = 1024


class KernelStrategy(Enum):
    """
    Kernel variants for column statistics and normalization.

    Attributes
    ----------
    VECTORIZED : KernelStrategy
        Whole-table NumPy reductions (fastest on typical CPUs).
    BLOCKED : KernelStrategy
        Row-block reduction with per-block partial results merged at the
        end; bounded scratch memory for tall tables.
    """

    VECTORIZED = "vectorized"
    BLOCKED = "blocked"


def _parse_strategy(value: Union[str, KernelStrategy]) -> KernelStrategy:
    if isinstance(value, KernelStrategy):
        return value
    try:
        return KernelStrategy(str(value).strip().lower())
    except ValueError as e:
        available = ", ".join(s.value for s in KernelStrategy)
        raise ValueError(
            f"Unsupported kernel strategy: {value!r}. Available: {available}"
        ) from e


@lru_cache(maxsize=None)
def select_kernel_strategy(
    preferred: Optional[Union[str, KernelStrategy]] = None,
) -> KernelStrategy:
    """
    Resolve the kernel strategy to use for this process.

    Parameters
    ----------
    preferred : Optional[str | KernelStrategy]
        Explicit choice. If provided, it always wins.

    Returns
    -------
    KernelStrategy
        The resolved strategy.

    Raises
    ------
    ValueError
        If `preferred` or the environment variable names an unknown strategy.
    """
    if preferred is not None:
        strategy = _parse_strategy(preferred)
        source = "argument"
    elif os.environ.get(KERNEL_ENV_VAR):
        strategy = _parse_strategy(os.environ[KERNEL_ENV_VAR])
        source = "environment"
    else:
        strategy = KernelStrategy.VECTORIZED
        source = "default"

    logger.debug("kernel_strategy_selected", strategy=strategy.value, source=source)
    return strategy


def resolve_block_size(block_size: Optional[int] = None) -> int:
    """
    Return the row block size for the blocked strategy.

    An explicit `block_size` wins over ``KEYANALYTICS_BLOCK_SIZE``.

    Raises
    ------
    ValueError
        If the value is not a positive integer.
    """
    raw: Union[int, str, None] = block_size
    if raw is None:
        raw = os.environ.get(BLOCK_SIZE_ENV_VAR, DEFAULT_BLOCK_SIZE)
    try:
        value = int(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Block size must be a positive integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"Block size must be a positive integer, got {raw!r}")
    return value
