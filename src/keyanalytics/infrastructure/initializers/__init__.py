"""
Neural-network weight initializers.

Exports
-------
- InitializerParameter, InitializerResult, InitializerResultId:
    Payload and result layout shared by all initializers.
- LayerShape:
    Weight-shape based layer descriptor providing fan-in / fan-out.
- xavier:
    The Xavier initializer task descriptor.
"""

from ._types import InitializerParameter, InitializerResult, InitializerResultId
from ._layer import LayerShape
from . import xavier

__all__ = [
    InitializerParameter.__name__,
    InitializerResult.__name__,
    InitializerResultId.__name__,
    LayerShape.__name__,
    "xavier",
]
