from . import zscore

__all__ = ["zscore"]
