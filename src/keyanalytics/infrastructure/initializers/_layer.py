"""
Layer shape descriptor.

`LayerShape` is the minimal layer collaborator initializers need: the
shape of the weight tensor and the fan-in / fan-out derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.utils import calculate_fan_in_and_fan_out


@dataclass(frozen=True)
class LayerShape:
    """
    Weight shape of a layer.

    Parameters
    ----------
    weights_shape : tuple[int, ...]
        `(out_features, in_features)` for dense layers,
        `(out_channels, in_channels, k1, k2, ...)` for convolutions.
    name : str
        Optional label used in logs.
    """

    weights_shape: tuple[int, ...]
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights_shape", tuple(int(d) for d in self.weights_shape))
        calculate_fan_in_and_fan_out(self.weights_shape)  # rejects negative dims

    @classmethod
    def dense(cls, in_features: int, out_features: int, name: str = "") -> "LayerShape":
        """Shape of a fully-connected layer mapping `in_features` to `out_features`."""
        return cls((out_features, in_features), name=name)

    def fan_in_and_fan_out(self) -> tuple[int, int]:
        return calculate_fan_in_and_fan_out(self.weights_shape)
