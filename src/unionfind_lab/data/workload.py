import numbers
import os
import numpy as np
import pandas as pd


class Workload:
    """
    Ordered sequence of union operations over the elements 0..n-1
    """
    def __init__(self, n, pairs, name="custom"):
        """
        Initialize workload

        Args:
            n: number of elements in the universe
            pairs: iterable of (u, v) element pairs to merge, in order
            name: label used for result paths
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise ValueError(f"n must be a non-negative integer, got {n!r}")
        self.n = int(n)
        self.name = name
        self.pairs = [(int(u), int(v)) for u, v in pairs]

        for idx, (u, v) in enumerate(self.pairs):
            if not (0 <= u < self.n and 0 <= v < self.n):
                raise ValueError(f"Pair {idx} ({u}, {v}) out of range for {self.n} elements")

    def __len__(self):
        return len(self.pairs)

    def __iter__(self):
        return iter(self.pairs)

    @classmethod
    def random(cls, n, num_unions, seed=None):
        """Uniformly random pairs drawn with replacement"""
        if num_unions > 0 and n == 0:
            raise ValueError("Cannot draw pairs from an empty universe")
        rng = np.random.default_rng(seed)
        pairs = rng.integers(0, max(n, 1), size=(num_unions, 2))
        print(f"Generated {num_unions} random unions over {n} elements")
        return cls(n, pairs.tolist(), name="random")

    @classmethod
    def chain(cls, n):
        """
        Pairs (i + 1, i) for every i, which naive linking turns into one
        path of length n - 1
        """
        pairs = [(i + 1, i) for i in range(n - 1)]
        print(f"Generated chain of {len(pairs)} unions over {n} elements")
        return cls(n, pairs, name="chain")

    @classmethod
    def from_csv(cls, path, n=None):
        """
        Load union pairs from a CSV file with ``u`` and ``v`` columns

        Args:
            path: CSV file path
            n: universe size, defaults to the largest endpoint plus one
        """
        df = pd.read_csv(path)
        missing = {"u", "v"} - set(df.columns)
        if missing:
            raise ValueError(f"{path} is missing columns: {sorted(missing)}")

        pairs = df[["u", "v"]].to_numpy(dtype=np.int64)
        if n is None:
            n = int(pairs.max()) + 1 if len(pairs) else 0
        if len(pairs) and pairs.min() < 0:
            raise ValueError(f"{path} contains negative elements")

        name = os.path.splitext(os.path.basename(path))[0]
        print(f"Loaded {len(pairs)} unions over {n} elements from {path}")
        return cls(n, pairs.tolist(), name=name)
