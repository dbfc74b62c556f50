import numpy as np

from .FenwickTree import FenwickTree


def count_inversions(values):
    """
    Count the pairs ``i < j`` with ``values[i] > values[j]``.

    Values are replaced by their rank among the distinct values, then scanned
    right to left: the tree counts the ranks already seen, and every seen rank
    strictly below the current one is an inversion. O(n log n).

    :param array-like values:
        One-dimensional sequence of comparable numbers.

    :returns: int
    """
    values = np.asarray(values)
    if values.size == 0:
        return 0
    _, ranks = np.unique(values, return_inverse=True)
    ranks = ranks.reshape(-1)
    counts = FenwickTree(int(ranks.max()) + 1)
    inversions = 0
    for rank in ranks[::-1]:
        inversions += counts.prefix_sum(rank - 1)
        counts.update(rank, 1)
    return inversions


def batch_range_sums(values, queries):
    """
    Answer a batch of inclusive ``(left, right)`` range queries over *values*.

    :param array-like values:
        Non-empty sequence of integers.

    :param list queries:
        Pairs ``(left, right)`` with ``0 <= left <= right < len(values)``.

    :returns: np.ndarray of shape (len(queries),)

    :raises ValueError: If ``values`` is empty or a query is out of range.
    """
    tree = FenwickTree()
    tree.build_optimized(values)
    sums = np.zeros(len(queries), dtype=FenwickTree.dtype)
    for i, (left, right) in enumerate(queries):
        sums[i] = tree.range_sum(left, right)
    return sums
