import numpy as np
import pytest

from experiments import benchmark_build
from FenwickSums import FenwickTree


def test_time_once_reports_every_operation():
    row = benchmark_build.time_once(64, 20, np.random.default_rng(0))
    assert set(row) == {'build', 'build_optimized', 'range_sum', 'update'}
    assert all(v >= 0 for v in row.values())


def test_time_once_raises_when_builds_disagree(monkeypatch):
    def broken_build_optimized(self, arr):
        FenwickTree.build(self, arr)
        self.update(0, 1)

    monkeypatch.setattr(FenwickTree, 'build_optimized', broken_build_optimized)
    with pytest.raises(RuntimeError):
        benchmark_build.time_once(8, 4, np.random.default_rng(0))
