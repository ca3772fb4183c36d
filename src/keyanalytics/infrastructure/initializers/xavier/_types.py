"""
Types of the Xavier initializer.

Xavier initialization draws weights with a scale derived from the layer's
fan-in and fan-out; it needs nothing beyond the common initializer
payload (engine and layer).
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import InitializerParameter, InitializerResult, InitializerResultId


@dataclass
class XavierParameter(InitializerParameter):
    """Parameters of the Xavier initializer (engine and layer references)."""


__all__ = [
    XavierParameter.__name__,
    InitializerResult.__name__,
    InitializerResultId.__name__,
]
