"""
Batch z-score normalization.

Exports
-------
- ZScoreBatch:
    The batch algorithm (input / parameter / result / compute / clone).
- zscore:
    One-call convenience wrapper that raises on failure.
- Method, InputId, ResultId, ResultToCompute:
    Identifiers of methods, inputs, results and optional results.
- ZScoreParameter, ZScoreInput, ZScoreResult:
    Parameter, input and result containers.
- StatisticsEngine, ColumnStatistics, Normalizer, ZScoreKernel:
    Building blocks of the computation, exposed for reuse and extension.
"""

from ._types import (
    Method,
    InputId,
    ResultId,
    ResultToCompute,
    BaseParameter,
    ZScoreParameter,
    ZScoreInput,
    ZScoreResult,
)
from ._statistics import ColumnStatistics, StatisticsEngine
from ._normalizer import Normalizer, constant_columns
from ._kernel import KernelOutput, ZScoreKernel
from ._batch import ZScoreBatch, zscore

__all__ = [
    Method.__name__,
    InputId.__name__,
    ResultId.__name__,
    ResultToCompute.__name__,
    BaseParameter.__name__,
    ZScoreParameter.__name__,
    ZScoreInput.__name__,
    ZScoreResult.__name__,
    ColumnStatistics.__name__,
    StatisticsEngine.__name__,
    Normalizer.__name__,
    constant_columns.__name__,
    KernelOutput.__name__,
    ZScoreKernel.__name__,
    ZScoreBatch.__name__,
    zscore.__name__,
]
