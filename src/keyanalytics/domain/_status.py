"""
Composite computation status for KeyAnalytics algorithms.

Algorithms in this package do not raise on invalid input during `compute()`.
Instead they return a `Status`, an ordered collection of error entries that
the caller inspects (or converts into an exception via `raise_for_status`).

A `Status` with no entries is successful. Several independent failures
(e.g. an allocation failure caused by a dimension mismatch) may be reported
by a single status; the first entry is treated as the primary cause.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class ErrorId(Enum):
    """
    Identifiers of the failure conditions reported through `Status`.

    Attributes
    ----------
    NULL_INPUT_TABLE : ErrorId
        No input table was bound to the algorithm.
    EMPTY_INPUT_TABLE : ErrorId
        The input table has zero rows or zero columns.
    NULL_RESULT : ErrorId
        A `None` result was registered.
    NULL_PARAMETER : ErrorId
        The parameter object is missing.
    DIMENSION_MISMATCH : ErrorId
        A supplied buffer does not agree with the input's column count.
    UNSUPPORTED_METHOD : ErrorId
        The requested computation method has no registered kernel.
    ALLOCATION_FAILURE : ErrorId
        Result buffers could not be sized or allocated.
    NULL_ENGINE_OR_LAYER : ErrorId
        An initializer parameter lacks its random engine or layer.
    MISSING_TARGET_TENSOR : ErrorId
        An initializer result does not hold the target tensor.
    """

    NULL_INPUT_TABLE = "NullInputTable"
    EMPTY_INPUT_TABLE = "EmptyInputTable"
    NULL_RESULT = "NullResult"
    NULL_PARAMETER = "NullParameter"
    DIMENSION_MISMATCH = "DimensionMismatch"
    UNSUPPORTED_METHOD = "UnsupportedMethod"
    ALLOCATION_FAILURE = "AllocationFailure"
    NULL_ENGINE_OR_LAYER = "NullEngineOrLayer"
    MISSING_TARGET_TENSOR = "MissingTargetTensor"


@dataclass(frozen=True)
class StatusEntry:
    """A single error code with an optional human-readable detail."""

    error: ErrorId
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.error.value}: {self.detail}" if self.detail else self.error.value


class Status:
    """
    Ordered collection of error entries returned by algorithm operations.

    Notes
    -----
    - `bool(status)` is True when the status carries no errors.
    - Statuses are merged with `|=`; entry order is preserved.
    """

    __slots__ = ("_entries",)

    def __init__(
        self, error: Optional[ErrorId] = None, detail: str = ""
    ) -> None:
        self._entries: list[StatusEntry] = []
        if error is not None:
            self.add(error, detail)

    def add(self, error: ErrorId, detail: str = "") -> "Status":
        """Append an error entry and return `self` for chaining."""
        self._entries.append(StatusEntry(error, detail))
        return self

    def merge(self, other: "Status") -> "Status":
        """Append every entry of `other` to this status."""
        self._entries.extend(other._entries)
        return self

    def __ior__(self, other: "Status") -> "Status":
        return self.merge(other)

    @property
    def ok(self) -> bool:
        return not self._entries

    def __bool__(self) -> bool:
        return self.ok

    @property
    def errors(self) -> tuple[ErrorId, ...]:
        """Error identifiers in the order they were reported."""
        return tuple(e.error for e in self._entries)

    @property
    def entries(self) -> tuple[StatusEntry, ...]:
        return tuple(self._entries)

    def __contains__(self, error: object) -> bool:
        return error in self.errors

    def __iter__(self) -> Iterator[StatusEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def description(self) -> str:
        if self.ok:
            return "OK"
        return "; ".join(str(e) for e in self._entries)

    def __repr__(self) -> str:
        return f"Status({self.description()})"

    def raise_for_status(self) -> None:
        """
        Raise the exception mapped from the first reported error.

        Raises
        ------
        KeyAnalyticsError
            A subclass selected by the first entry's `ErrorId`; the message
            lists every entry of this status.
        """
        if self.ok:
            return
        from ._errors import error_class_for

        exc_cls = error_class_for(self._entries[0].error)
        raise exc_cls(self.description(), status=self)
