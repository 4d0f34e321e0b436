from unionfind_lab.strategies.base import MergeStrategy


class RankStrategy(MergeStrategy):
    """Union by rank"""

    name = "rank"

    def merge(self, uf, u, v):
        uf.union_sets(u, v)
