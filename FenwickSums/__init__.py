from .BIT.FenwickTree import FenwickTree
from .BIT.Synchronized_FenwickTree import SynchronizedFenwickTree
from .BIT.applications import batch_range_sums, count_inversions

__all__ = [
    "FenwickTree",
    "SynchronizedFenwickTree",
    "batch_range_sums",
    "count_inversions",
]
