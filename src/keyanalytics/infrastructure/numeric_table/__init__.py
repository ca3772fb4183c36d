"""
Concrete numeric tables.

Exports
-------
- HomogenNumericTable:
    Single-dtype, row-major table backed by one 2-D NumPy array.
- SOANumericTable:
    Structure-of-arrays table whose columns may carry different dtypes.
"""

from ._base import NumericTableBase
from ._homogen import HomogenNumericTable
from ._soa import SOANumericTable

__all__ = [
    NumericTableBase.__name__,
    HomogenNumericTable.__name__,
    SOANumericTable.__name__,
]
