"""
KeyAnalytics: batch z-score normalization and neural-network initializer
task descriptors on top of NumPy.
"""

from .domain import ErrorId, Status, KeyAnalyticsError
from .infrastructure.numeric_table import HomogenNumericTable, SOANumericTable
from .infrastructure.normalization.zscore import (
    Method,
    ResultId,
    ResultToCompute,
    ZScoreBatch,
    ZScoreParameter,
    ZScoreResult,
    zscore,
)
from .infrastructure.initializers import InitializerResult, LayerShape
from .infrastructure.initializers.xavier import (
    XavierParameter,
    XavierInitializerTaskDescriptor,
    build_xavier_task_descriptor,
)
from .infrastructure.random import MT19937Engine
from .infrastructure.tensor import HomogenTensor
from .infrastructure.dispatch import KernelStrategy, select_kernel_strategy

__version__ = "0.1.0"

__all__ = [
    ErrorId.__name__,
    Status.__name__,
    KeyAnalyticsError.__name__,
    HomogenNumericTable.__name__,
    SOANumericTable.__name__,
    Method.__name__,
    ResultId.__name__,
    ResultToCompute.__name__,
    ZScoreBatch.__name__,
    ZScoreParameter.__name__,
    ZScoreResult.__name__,
    zscore.__name__,
    InitializerResult.__name__,
    LayerShape.__name__,
    XavierParameter.__name__,
    XavierInitializerTaskDescriptor.__name__,
    build_xavier_task_descriptor.__name__,
    MT19937Engine.__name__,
    HomogenTensor.__name__,
    KernelStrategy.__name__,
    select_kernel_strategy.__name__,
]
