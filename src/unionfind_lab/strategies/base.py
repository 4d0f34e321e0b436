import json
import os
import time
from abc import ABC, abstractmethod
from unionfind_lab.utils.union_find import UnionFind
from unionfind_lab.utils.tree_shape import depth_stats


class BaseStrategy(ABC):
    """Base class for union strategies"""

    @abstractmethod
    def run(self, workload, output_path):
        """Run the strategy"""
        pass


class MergeStrategy(BaseStrategy):
    """Replays a workload through one merge policy and records tree shape"""

    name = None

    def __init__(self, checkpoint_every=100):
        if checkpoint_every < 1:
            raise ValueError(f"checkpoint_every must be positive, got {checkpoint_every}")
        self.checkpoint_every = checkpoint_every

    def setup(self, uf):
        """Prepare per-run state before the first merge"""
        pass

    @abstractmethod
    def merge(self, uf, u, v):
        """Merge the sets of u and v"""
        pass

    def run(self, workload, output_path):
        """
        Run the strategy over a workload

        Args:
            workload: Workload object with the union pairs
            output_path: Path to save results

        Returns:
            List of result records, one per checkpoint
        """
        uf = UnionFind(workload.n)
        self.setup(uf)
        results = []
        union_time = 0.0
        self.checkpoint(uf, 0, union_time, results, output_path)

        for done, (u, v) in enumerate(workload, start=1):
            start_time = time.time()
            self.merge(uf, u, v)
            union_time += time.time() - start_time

            if done % self.checkpoint_every == 0 or done == len(workload):
                self.checkpoint(uf, done, union_time, results, output_path)
                union_time = 0.0

        self.uf = uf
        return results

    def checkpoint(self, uf, unions, union_time, results, output_path):
        # stats come straight from the parent list, so nothing gets compressed
        record = {"unions": unions, "union_time": union_time}
        record.update(depth_stats(uf.parent))
        results.append(record)

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(results, f, indent=4)
