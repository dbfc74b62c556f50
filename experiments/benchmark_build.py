import argparse
import time

import numpy as np
import pandas as pd
from tqdm import tqdm

from FenwickSums import FenwickTree


def time_once(size, n_queries, rng):
    arr = np.arange(1, size + 1, dtype=np.int64)
    row = {}

    curr = time.perf_counter()
    ft = FenwickTree(size)
    ft.build(arr)
    row['build'] = time.perf_counter() - curr

    curr = time.perf_counter()
    ft_opt = FenwickTree(size)
    ft_opt.build_optimized(arr)
    row['build_optimized'] = time.perf_counter() - curr
    if ft != ft_opt:
        raise RuntimeError("build and build_optimized disagree for size {0}".format(size))

    lefts = rng.integers(0, size, n_queries)
    curr = time.perf_counter()
    for left in lefts:
        ft.range_sum(left, min(left + 1000, size - 1))
    row['range_sum'] = time.perf_counter() - curr

    curr = time.perf_counter()
    for i in range(n_queries):
        ft.update(i % size, 1)
    row['update'] = time.perf_counter() - curr
    return row


def main():
    parser = argparse.ArgumentParser(description='Time Fenwick tree construction, queries and updates')
    parser.add_argument('--size', type=int, default=100000, help='Number of values in the tree')
    parser.add_argument('--queries', type=int, default=10000, help='Number of range queries and updates')
    parser.add_argument('--repeats', type=int, default=5, help='Number of timed repetitions')
    parser.add_argument('--seed', type=int, default=42, help='Random seed for query positions')
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    rows = [time_once(args.size, args.queries, rng) for _ in tqdm(range(args.repeats), desc='repeats')]
    df = pd.DataFrame(rows) * 1000

    print(f'Array size: {args.size}, {args.queries} queries/updates, {args.repeats} repeats (ms)')
    print(df.describe().loc[['mean', 'std', 'min']].round(2))
    print("Speedup of build_optimized: {0:.2f}x".format(df['build'].mean() / df['build_optimized'].mean()))


if __name__ == "__main__":
    main()
