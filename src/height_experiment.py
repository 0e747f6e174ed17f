"""
Random BST height experiment.

Builds many trees from uniformly drawn integers and measures their heights.
For n random keys the height of an unbalanced BST grows asymptotically like
4.311 ln n - 1.953 ln ln n, far below the n - 1 of a degenerate tree.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ordered_tree import OrderedTree

logger = logging.getLogger(__name__)


@dataclass
class ExperimentConfig:
    n_trees: int = 100
    n_nodes: int = 1000
    max_value: int = 1_000_000
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.n_trees <= 0:
            raise ValueError(f"n_trees must be positive, got {self.n_trees}")
        if self.n_nodes <= 0:
            raise ValueError(f"n_nodes must be positive, got {self.n_nodes}")
        if self.max_value <= 0:
            raise ValueError(f"max_value must be positive, got {self.max_value}")


@dataclass
class HeightReport:
    config: ExperimentConfig
    heights: np.ndarray
    sizes: np.ndarray

    @property
    def mean_height(self) -> float:
        return float(np.mean(self.heights))

    @property
    def std_height(self) -> float:
        return float(np.std(self.heights))

    @property
    def min_height(self) -> int:
        return int(np.min(self.heights))

    @property
    def max_height(self) -> int:
        return int(np.max(self.heights))

    @property
    def mean_size(self) -> float:
        return float(np.mean(self.sizes))

    def summary(self) -> str:
        return (
            f"Average height = {self.mean_height:.2f} over {len(self.heights)} trees "
            f"(std {self.std_height:.2f}, min {self.min_height}, max {self.max_height}, "
            f"mean size {self.mean_size:.1f}, asymptotic estimate ~{asymptotic_height_estimate(self.config.n_nodes):.2f})"
        )


def asymptotic_height_estimate(n: int) -> float:
    """Leading terms of the expected height of a random BST; omits the O(1) term, so it overshoots measured heights at practical sizes."""
    if n < 3:
        return float(max(n - 1, 0))
    return float(4.311 * np.log(n) - 1.953 * np.log(np.log(n)))


def build_random_tree(n_nodes: int, max_value: int, rng: np.random.RandomState) -> OrderedTree[int]:
    """
    Insert n_nodes draws from [0, max_value) in draw order.

    Repeated draws are rejected by the tree, so the result may hold fewer
    than n_nodes elements.
    """
    tree: OrderedTree[int] = OrderedTree()
    for value in rng.randint(0, max_value, size=n_nodes):
        tree.insert(int(value))
    return tree


def run_experiment(config: Optional[ExperimentConfig] = None) -> HeightReport:
    if config is None:
        config = ExperimentConfig()
    rng = np.random.RandomState(config.seed) if config.seed is not None else np.random.RandomState()

    heights = np.zeros(config.n_trees, dtype=np.int64)
    sizes = np.zeros(config.n_trees, dtype=np.int64)
    for i in range(config.n_trees):
        tree = build_random_tree(config.n_nodes, config.max_value, rng)
        heights[i] = tree.height()
        sizes[i] = tree.size()
        logger.debug("tree %d: height=%d size=%d", i + 1, heights[i], sizes[i])

    report = HeightReport(config=config, heights=heights, sizes=sizes)
    logger.info(report.summary())
    return report
