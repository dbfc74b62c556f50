import threading

from .FenwickTree import FenwickTree


class SynchronizedFenwickTree(object):
    """
    Wraps a FenwickTree so that it can be shared between threads.

    Every operation holds one re-entrant lock for its whole duration, so a
    ``set`` (read then update) is atomic with respect to other callers. The
    wrapped tree must not be used directly while the wrapper is shared.

    :param FenwickTree or None tree: (default=None)
        Tree to wrap. A fresh tree of ``size`` zeros is created when omitted.

    :param int size: (default=0)
        Size of the fresh tree, ignored when ``tree`` is given.
    """

    def __init__(self, tree=None, size=0):
        self._tree = FenwickTree(size) if tree is None else tree
        self._lock = threading.RLock()

    def build(self, arr):
        with self._lock:
            self._tree.build(arr)

    def build_optimized(self, arr):
        with self._lock:
            self._tree.build_optimized(arr)

    def update(self, index, delta):
        with self._lock:
            self._tree.update(index, delta)

    def set(self, index, value):
        with self._lock:
            self._tree.set(index, value)

    def prefix_sum(self, index):
        with self._lock:
            return self._tree.prefix_sum(index)

    def range_sum(self, left, right):
        with self._lock:
            return self._tree.range_sum(left, right)

    def total(self):
        with self._lock:
            return self._tree.total()

    def size(self):
        with self._lock:
            return self._tree.size()

    def __len__(self):
        return self.size()

    def to_array(self):
        with self._lock:
            return self._tree.to_array()

    def render(self):
        with self._lock:
            return self._tree.render()

    def __str__(self):
        return self.render()

    def __getitem__(self, index):
        with self._lock:
            return self._tree[index]

    def __setitem__(self, index, value):
        with self._lock:
            self._tree[index] = value

    def __iter__(self):
        # iterates over a snapshot taken under the lock
        return iter(self.to_array().tolist())
