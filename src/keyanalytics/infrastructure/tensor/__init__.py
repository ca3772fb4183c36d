from ._tensor import HomogenTensor

__all__ = [
    HomogenTensor.__name__,
]
