"""
Collaborator interfaces for weight initialization tasks.

Initializer descriptors bundle references to a random engine, a layer and
the tensor to be filled. The concrete engine, layer and fill kernel live
outside the descriptor; this module only defines the structural contracts
the descriptor relies on.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IRandomEngine(Protocol):
    """
    Stateful pseudo-random number generator.

    Engines are shared mutable state: every draw advances the internal
    state. Engines do not synchronize access, so concurrent users must
    serialize draws themselves (e.g. one engine per thread).
    """

    @property
    def seed(self) -> int:
        """Seed the engine was created with."""
        ...

    def clone(self) -> "IRandomEngine":
        """Return an independent engine positioned at the same state."""
        ...


@runtime_checkable
class ILayer(Protocol):
    """
    Layer shape provider used to scale random initialization.

    Only the weight tensor shape and the derived fan-in / fan-out are
    required by initializer kernels.
    """

    @property
    def weights_shape(self) -> tuple[int, ...]:
        ...

    def fan_in_and_fan_out(self) -> tuple[int, int]:
        """
        Return `(fan_in, fan_out)` of the layer's weight tensor.

        Returns
        -------
        tuple[int, int]
            Number of input and output connections per unit.
        """
        ...
