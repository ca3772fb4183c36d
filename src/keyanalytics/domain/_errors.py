"""
Exceptions raised by KeyAnalytics when a failed `Status` is escalated.

Algorithms report failures through `Status` objects. Callers that prefer
exceptions call `Status.raise_for_status()`, which raises one of the
exceptions defined here. Each exception keeps a reference to the status it
was raised from so that secondary errors are not lost.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ._status import ErrorId

if TYPE_CHECKING:
    from ._status import Status


class KeyAnalyticsError(RuntimeError):
    """
    Base class for all KeyAnalytics failures.

    Attributes
    ----------
    status : Optional[Status]
        The status this error was raised from, if any.
    """

    error_id: Optional[ErrorId] = None

    def __init__(self, message: str, *, status: Optional["Status"] = None) -> None:
        super().__init__(message)
        self.status = status


class NullInputTableError(KeyAnalyticsError, ValueError):
    """Raised when an algorithm is computed without an input table."""

    error_id = ErrorId.NULL_INPUT_TABLE


class EmptyInputTableError(KeyAnalyticsError, ValueError):
    """Raised when the input table has no rows or no columns."""

    error_id = ErrorId.EMPTY_INPUT_TABLE


class NullResultError(KeyAnalyticsError, ValueError):
    """Raised when a `None` result is registered with an algorithm."""

    error_id = ErrorId.NULL_RESULT


class NullParameterError(KeyAnalyticsError, ValueError):
    error_id = ErrorId.NULL_PARAMETER


class DimensionMismatchError(KeyAnalyticsError, ValueError):
    """
    Raised when supplied buffers disagree with the input dimensions.

    Typical cause: precomputed sums whose length differs from the number
    of columns of the input table.
    """

    error_id = ErrorId.DIMENSION_MISMATCH


class UnsupportedMethodError(KeyAnalyticsError, NotImplementedError):
    """Raised when no kernel is registered for the requested method."""

    error_id = ErrorId.UNSUPPORTED_METHOD


class AllocationFailureError(KeyAnalyticsError, MemoryError):
    error_id = ErrorId.ALLOCATION_FAILURE


class NullEngineOrLayerError(KeyAnalyticsError, ValueError):
    """Raised when an initializer parameter lacks its engine or layer."""

    error_id = ErrorId.NULL_ENGINE_OR_LAYER


class MissingTargetTensorError(KeyAnalyticsError, KeyError):
    """Raised when an initializer result holds no target tensor."""

    error_id = ErrorId.MISSING_TARGET_TENSOR

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


_ERROR_CLASSES: dict[ErrorId, type[KeyAnalyticsError]] = {
    cls.error_id: cls
    for cls in (
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
}


def error_class_for(error: ErrorId) -> type[KeyAnalyticsError]:
    """Return the exception class mapped to `error`."""
    return _ERROR_CLASSES.get(error, KeyAnalyticsError)
