"""
Unit tests for the merge strategy runners.
"""
import json
import pytest
from unionfind_lab.data.workload import Workload
from unionfind_lab.strategies import (
    STRATEGIES, NaiveStrategy, RankStrategy, SizeStrategy, get_strategy,
)

pytestmark = [pytest.mark.unit]

@pytest.fixture
def chain_workload():
    return Workload.chain(64)

def test_registry():
    assert set(STRATEGIES) == {"rank", "naive", "size"}
    assert isinstance(get_strategy("size", checkpoint_every=5), SizeStrategy)
    with pytest.raises(ValueError):
        get_strategy("quick")

def test_invalid_checkpoint_interval():
    with pytest.raises(ValueError):
        RankStrategy(checkpoint_every=0)

def test_records_written_at_checkpoints(tmp_path, chain_workload):
    output_path = tmp_path / "chain" / "rank" / "1.json"
    results = RankStrategy(checkpoint_every=20).run(chain_workload, str(output_path))

    assert [r["unions"] for r in results] == [0, 20, 40, 60, 63]
    assert results[0]["num_sets"] == 64
    assert results[0]["max_depth"] == 0
    assert results[-1]["num_sets"] == 1
    assert json.loads(output_path.read_text()) == results

    expected_keys = {"unions", "union_time", "num_sets", "max_depth",
                     "mean_depth", "p50", "p90", "p99"}
    assert all(set(r) == expected_keys for r in results)

def test_naive_chain_is_a_path(tmp_path, chain_workload):
    naive = NaiveStrategy(checkpoint_every=100).run(chain_workload, str(tmp_path / "naive.json"))
    rank = RankStrategy(checkpoint_every=100).run(chain_workload, str(tmp_path / "rank.json"))
    size = SizeStrategy(checkpoint_every=100).run(chain_workload, str(tmp_path / "size.json"))

    assert naive[-1]["max_depth"] == 63
    assert rank[-1]["max_depth"] == 1
    assert size[-1]["max_depth"] == 1
    assert naive[-1]["num_sets"] == rank[-1]["num_sets"] == size[-1]["num_sets"] == 1

def test_size_strategy_tracks_sizes(tmp_path):
    workload = Workload(4, [(0, 1), (2, 3), (0, 2)])
    strategy = SizeStrategy()
    strategy.run(workload, str(tmp_path / "size.json"))
    root = strategy.uf.find(0)
    assert strategy.size[root] == 4
    assert strategy.uf.rank == [0] * 4

def test_empty_workload(tmp_path):
    results = NaiveStrategy().run(Workload(3, []), str(tmp_path / "empty.json"))
    assert len(results) == 1
    assert results[0]["num_sets"] == 3
