from unionfind_lab.strategies.base import BaseStrategy, MergeStrategy
from unionfind_lab.strategies.rank import RankStrategy
from unionfind_lab.strategies.naive import NaiveStrategy
from unionfind_lab.strategies.size import SizeStrategy

STRATEGIES = {
    RankStrategy.name: RankStrategy,
    NaiveStrategy.name: NaiveStrategy,
    SizeStrategy.name: SizeStrategy,
}


def get_strategy(name, **kwargs):
    """Build a strategy by name"""
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy {name!r}, choose from {sorted(STRATEGIES)}")
    return STRATEGIES[name](**kwargs)
