from unionfind_lab.strategies.base import MergeStrategy


class NaiveStrategy(MergeStrategy):
    """Always hangs the root of v under the root of u, no balancing"""

    name = "naive"

    def merge(self, uf, u, v):
        uf.union_sets(u, v, by_rank=False)
