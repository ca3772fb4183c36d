"""
CPU kernel dispatch.

Exports
-------
- KernelStrategy:
    Enumeration of kernel variants.
- select_kernel_strategy:
    Cached, once-per-process strategy resolution (argument, environment,
    default).
- resolve_block_size:
    Row block size for the blocked strategy.
"""

from ._strategy import (
    KernelStrategy,
    select_kernel_strategy,
    resolve_block_size,
    KERNEL_ENV_VAR,
    BLOCK_SIZE_ENV_VAR,
    DEFAULT_BLOCK_SIZE,
)

__all__ = [
    KernelStrategy.__name__,
    select_kernel_strategy.__name__,
    resolve_block_size.__name__,
    "KERNEL_ENV_VAR",
    "BLOCK_SIZE_ENV_VAR",
    "DEFAULT_BLOCK_SIZE",
]
