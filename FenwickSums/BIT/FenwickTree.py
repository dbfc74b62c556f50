import logging
import numbers

import numpy as np

from .utils import as_seed, lowbit, parent

logger = logging.getLogger(__name__)


class FenwickTree(object):
    """
    A data structure for maintaining cumulative (prefix) sums of integers.
    (aka "binary indexed tree")

    Updating a value is O(log n).
    Calculating a prefix or range sum is O(log n).
    Retrieving a single value is a special case of a range sum, and is thus O(log n).

    The partial sums live in a 1-based array ``_tree`` of length ``n + 1``. Slot
    ``i`` holds the sum of the ``lowbit(i)`` values ending at logical index
    ``i - 1``; slot 0 is never read. Public indices are 0-based.

    :param int size: (default=0)
        Number of values, all initialised to zero.

    .. rubric:: Notes

    - ``build`` and ``build_optimized`` replace both the values and the size, so
      the size given to the constructor does not bound later seeds.
    - ``prefix_sum`` is lenient about its index, ``range_sum`` is strict.
    - Instances are not thread-safe, see ``SynchronizedFenwickTree``.
    """

    dtype = np.int64

    def __init__(self, size=0):
        if size < 0:
            raise ValueError("Size must be non-negative, got {0}".format(size))
        self._n = size
        self._tree = np.zeros(size + 1, dtype=self.dtype)

    def _reset(self, n, method):
        logger.debug("%s: reseeding tree of size %d with %d values", method, self._n, n)
        self._n = n
        self._tree = np.zeros(n + 1, dtype=self.dtype)

    def build(self, arr):
        """ Seed the tree with *arr* by repeated updates, O(n log n). """
        values = as_seed(arr, self.dtype)
        self._reset(values.shape[0], "build")
        for idx in range(self._n):
            self.update(idx, values[idx])

    def build_optimized(self, arr):
        """
        Seed the tree with *arr* in O(n).

        Each value is copied to its own slot, then every slot is folded into its
        parent in increasing order, so a parent has received all of its block
        before being folded further up. The result equals ``build(arr)``.
        """
        values = as_seed(arr, self.dtype)
        self._reset(values.shape[0], "build_optimized")
        self._tree[1:] = values
        for idx in range(1, self._n + 1):
            parent_idx = parent(idx)
            if parent_idx <= self._n:
                self._tree[parent_idx] += self._tree[idx]

    def _check_index(self, index):
        if index < 0 or index >= self._n:
            raise IndexError("Index out of bounds: {0}".format(index))

    def update(self, index, delta):
        """ Adds *delta* to the value at *index* (0-based). """
        self._check_index(index)
        if not isinstance(delta, (numbers.Integral, np.integer)):
            raise TypeError("Delta must be an integer, got {0!r}".format(delta))
        idx = index + 1
        while idx <= self._n:
            self._tree[idx] += delta
            idx += lowbit(idx)

    def set(self, index, value):
        """ Replaces the value at *index* with *value*. """
        self._check_index(index)
        self.update(index, value - self.range_sum(index, index))

    def prefix_sum(self, index):
        """
        Returns the sum of values 0..*index*, inclusive.

        A negative index gives 0, an index past the end gives the total.
        """
        if index < 0:
            return 0
        if index >= self._n:
            index = self._n - 1
        idx = index + 1
        _sum = 0
        while idx > 0:
            _sum += int(self._tree[idx])
            idx -= lowbit(idx)
        return _sum

    def range_sum(self, left, right):
        """ Returns the sum of values *left*..*right*, both inclusive. """
        if left < 0 or right >= self._n or left > right:
            raise ValueError("Invalid range: [{0}, {1}]".format(left, right))
        if left == 0:
            return self.prefix_sum(right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    def total(self):
        return self.prefix_sum(self._n - 1)

    def size(self):
        return self._n

    def __len__(self):
        return self._n

    def to_array(self):
        """
        Retrieves all values in O(n).

        Every node's own value is its slot minus the slots folded into it, so
        each child is subtracted once from its parent.

        :returns: np.ndarray of shape (n,), a fresh copy.
        """
        values = self._tree[1:].copy()
        idx = np.arange(1, self._n + 1)
        parents = parent(idx)
        inside = parents <= self._n
        np.subtract.at(values, parents[inside] - 1, self._tree[idx[inside]])
        return values

    def render(self):
        return "FenwickTree[" + ", ".join(str(v) for v in self.to_array().tolist()) + "]"

    def __str__(self):
        return self.render()

    def __repr__(self):
        return self.render()

    def __getitem__(self, index):
        self._check_index(index)
        return self.range_sum(index, index)

    def __setitem__(self, index, value):
        # Costs a range_sum on top of the update; use update directly for deltas.
        self.set(index, value)

    def __iter__(self):
        return iter(self.to_array().tolist())

    def __eq__(self, other):
        return (
            isinstance(other, FenwickTree)
            and self._n == other._n
            and np.array_equal(self._tree, other._tree)
        )

    __hash__ = None
