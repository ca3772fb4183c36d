"""
Keyed-slot containers for algorithm inputs and results.

Inputs, parameters and results expose their buffers through a small set
of enumerated symbolic keys (for example `ResultId.MEANS`). `KeyedSlots`
implements that get/set-by-key store once, so each algorithm only declares
its key enum.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Enum)


class KeyedSlots(Generic[K]):
    """
    Store of optional objects addressed by members of a single enum.

    Subclasses set `KEYS` to the enum class accepted as keys. Using a key
    of any other type raises `TypeError`, which catches the common mistake
    of mixing up input and result identifiers.
    """

    KEYS: ClassVar[type[Enum]]

    def __init__(self) -> None:
        self._slots: Dict[K, Any] = {}

    def _check_key(self, key: K) -> None:
        if not isinstance(key, self.KEYS):
            raise TypeError(
                f"{type(self).__name__} keys must be {self.KEYS.__name__}, "
                f"got {key!r}"
            )

    def get(self, key: K) -> Optional[Any]:
        """Return the object stored under `key`, or None when the slot is empty."""
        self._check_key(key)
        return self._slots.get(key)

    def set(self, key: K, value: Optional[Any]) -> None:
        """Store `value` under `key`; `None` clears the slot."""
        self._check_key(key)
        if value is None:
            self._slots.pop(key, None)
        else:
            self._slots[key] = value

    def has(self, key: K) -> bool:
        self._check_key(key)
        return key in self._slots

    def keys(self) -> Iterator[K]:
        return iter(tuple(self._slots))

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        filled = ", ".join(k.name for k in self._slots)
        return f"{type(self).__name__}({filled})"
