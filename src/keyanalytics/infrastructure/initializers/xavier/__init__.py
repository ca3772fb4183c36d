"""
Xavier (Glorot) weight initializer.

Exports
-------
- XavierParameter:
    Engine and layer references.
- XavierInitializerTaskDescriptor:
    Non-owning bundle consumed by a fill kernel.
- build_xavier_task_descriptor:
    Status-returning descriptor builder.
"""

from ._types import XavierParameter
from ._task_descriptor import (
    XavierInitializerTaskDescriptor,
    build_xavier_task_descriptor,
)

__all__ = [
    XavierParameter.__name__,
    XavierInitializerTaskDescriptor.__name__,
    build_xavier_task_descriptor.__name__,
]
