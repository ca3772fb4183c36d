from ._engine import MT19937Engine

__all__ = [
    MT19937Engine.__name__,
]
