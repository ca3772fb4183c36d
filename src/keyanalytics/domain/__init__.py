"""
Domain layer of KeyAnalytics.

Backend-agnostic contracts (numeric tables, random engines, layers),
the keyed-slot store shared by algorithm inputs and results, and the
status / error taxonomy.
"""

from ._status import ErrorId, Status, StatusEntry
from ._errors import (
    KeyAnalyticsError,
    NullInputTableError,
    EmptyInputTableError,
    NullResultError,
    NullParameterError,
    DimensionMismatchError,
    UnsupportedMethodError,
    AllocationFailureError,
    NullEngineOrLayerError,
    MissingTargetTensorError,
)
from ._numeric_table import INumericTable
from ._initializer import IRandomEngine, ILayer
from ._slots import KeyedSlots

__all__ = [
    ErrorId.__name__,
    Status.__name__,
    StatusEntry.__name__,
    KeyAnalyticsError.__name__,
    NullInputTableError.__name__,
    EmptyInputTableError.__name__,
    NullResultError.__name__,
    NullParameterError.__name__,
    DimensionMismatchError.__name__,
    UnsupportedMethodError.__name__,
    AllocationFailureError.__name__,
    NullEngineOrLayerError.__name__,
    MissingTargetTensorError.__name__,
    INumericTable.__name__,
    IRandomEngine.__name__,
    ILayer.__name__,
    KeyedSlots.__name__,
]
