"""
Common types of neural-network weight initializers.

Every initializer shares one result layout (a single target tensor stored
under `InitializerResultId.VALUE`) and one parameter payload: the random
engine to draw from and the layer whose fan-in / fan-out scale the draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...domain._initializer import ILayer, IRandomEngine
from ...domain._slots import KeyedSlots
from ..tensor import HomogenTensor


class InitializerResultId(Enum):
    VALUE = "value"


class InitializerResult(KeyedSlots[InitializerResultId]):
    """
    Result of a weight initializer: the tensor to be filled in place.

    Parameters
    ----------
    value : Optional[HomogenTensor]
        Target tensor to register under `InitializerResultId.VALUE`.
    """

    KEYS = InitializerResultId

    def __init__(self, value: Optional[HomogenTensor] = None) -> None:
        super().__init__()
        self.set(InitializerResultId.VALUE, value)

    @property
    def value(self) -> Optional[HomogenTensor]:
        return self.get(InitializerResultId.VALUE)


@dataclass
class InitializerParameter:
    """
    Parameters shared by all weight initializers.

    Attributes
    ----------
    engine : Optional[IRandomEngine]
        Random engine to draw from. Held by reference; never copied.
    layer : Optional[ILayer]
        Layer whose weights are initialized. Held by reference.
    """

    engine: Optional[IRandomEngine] = None
    layer: Optional[ILayer] = None
