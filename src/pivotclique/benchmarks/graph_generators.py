"""
Graph families for benchmarking maximal clique enumeration.

Each family is a function `(n, rng) -> [(graph, description), ...]`. Random
families draw their networkx seeds from the shared numpy RandomState, so a
whole sweep is reproducible from one seed.
"""

import networkx as nx
import numpy as np
from typing import Callable, Dict, List, Tuple, Iterator, Optional
from enum import Enum
from dataclasses import dataclass


class GraphType(Enum):
    """Graph families available to a scaling sweep."""
    ERDOS_RENYI = "erdos_renyi"
    BARABASI_ALBERT = "barabasi_albert"
    RANDOM_PARTITION = "random_partition"
    PATH = "path"
    CYCLE = "cycle"
    COMPLETE = "complete"
    STAR = "star"
    MOON_MOSER = "moon_moser"


@dataclass
class ScalingConfig:
    """Node counts for a sweep, grouped into size categories."""
    small_range: Tuple[int, int] = (6, 18)
    medium_range: Tuple[int, int] = (20, 60)
    large_range: Tuple[int, int] = (100, 200)
    step_size: int = 6

    # Edge probabilities and attachment counts for the random families
    er_probabilities: Tuple[float, ...] = (0.1, 0.3, 0.5)
    ba_attachments: Tuple[int, ...] = (2, 4)
    community_counts: Tuple[int, ...] = (2, 4)

    def categories(self) -> List[Tuple[str, List[int]]]:
        """Return (category, sizes) pairs; larger categories use coarser steps."""
        spans = [
            ("small", self.small_range, self.step_size),
            ("medium", self.medium_range, self.step_size * 2),
            ("large", self.large_range, self.step_size * 5),
        ]
        return [(name, list(range(lo, hi + 1, step))) for name, (lo, hi), step in spans]


def moon_moser_graph(n: int) -> nx.Graph:
    """
    Complete multipartite graph with parts of size 3 (plus a remainder part).

    For n divisible by 3 it has 3^(n/3) maximal cliques, the most any
    n-node graph can have.
    """
    parts = [3] * (n // 3)
    if n % 3:
        parts.append(n % 3)
    return nx.complete_multipartite_graph(*parts)


def _seed(rng: np.random.RandomState) -> int:
    return int(rng.randint(0, 2 ** 31 - 1))


def _erdos_renyi(n, rng, config):
    return [
        (nx.gnp_random_graph(n, p, seed=_seed(rng)), f"ER_n{n}_p{p:.1f}")
        for p in config.er_probabilities
    ]


def _barabasi_albert(n, rng, config):
    return [
        (nx.barabasi_albert_graph(n, m, seed=_seed(rng)), f"BA_n{n}_m{m}")
        for m in config.ba_attachments if m < n
    ]


def _random_partition(n, rng, config, p_in=0.7, p_out=0.1):
    """Dense communities give many overlapping maximal cliques."""
    graphs = []
    for k in config.community_counts:
        if k > n:
            continue
        # np.array_split gives near-equal block sizes
        blocks = [len(b) for b in np.array_split(np.arange(n), k)]
        G = nx.random_partition_graph(blocks, p_in, p_out, seed=_seed(rng))
        graphs.append((G, f"Community_n{n}_k{k}"))
    return graphs


def _path(n, rng, config):
    return [(nx.path_graph(n), f"Path_n{n}")]


def _cycle(n, rng, config):
    return [(nx.cycle_graph(n), f"Cycle_n{n}")] if n >= 3 else []


def _complete(n, rng, config):
    return [(nx.complete_graph(n), f"Complete_n{n}")] if n <= 30 else []


def _star(n, rng, config):
    return [(nx.star_graph(n - 1), f"Star_n{n}")] if n >= 2 else []


def _moon_moser(n, rng, config):
    # 3^(n/3) cliques: keep this bounded
    return [(moon_moser_graph(n), f"Moon_Moser_n{n}")] if n <= 24 else []


GENERATORS: Dict[GraphType, Callable] = {
    GraphType.ERDOS_RENYI: _erdos_renyi,
    GraphType.BARABASI_ALBERT: _barabasi_albert,
    GraphType.RANDOM_PARTITION: _random_partition,
    GraphType.PATH: _path,
    GraphType.CYCLE: _cycle,
    GraphType.COMPLETE: _complete,
    GraphType.STAR: _star,
    GraphType.MOON_MOSER: _moon_moser,
}


def generate_test_graphs(
    config: ScalingConfig,
    graph_types: Optional[List[GraphType]] = None,
    seed: int = 42
) -> Iterator[Tuple[nx.Graph, str, str]]:
    """
    Yield every graph of a scaling sweep.

    Args:
        config: Sizes and random-family parameters.
        graph_types: Families to include (None for all).
        seed: Seed for the RandomState every random family draws from.

    Yields:
        Tuple of (graph, description, size_category).
    """
    rng = np.random.RandomState(seed)
    families = list(GraphType) if graph_types is None else graph_types

    for category, sizes in config.categories():
        for n in sizes:
            for graph_type in families:
                for G, desc in GENERATORS[graph_type](n, rng, config):
                    yield G, desc, category


def create_small_test_graphs() -> List[Tuple[nx.Graph, str]]:
    """
    Create a small set of test graphs for validation and debugging.

    Returns:
        List of (graph, description) tuples.
    """
    return [
        (nx.path_graph(5), "Path_5"),
        (nx.cycle_graph(6), "Cycle_6"),
        (nx.complete_graph(4), "Complete_4"),
        (nx.star_graph(6), "Star_7"),
        (nx.petersen_graph(), "Petersen_10"),
        (moon_moser_graph(9), "Moon_Moser_9"),
        (nx.gnp_random_graph(8, 0.3, seed=42), "ER_8_p0.3"),
        (nx.barabasi_albert_graph(10, 2, seed=42), "BA_10_m2"),
        (nx.empty_graph(0), "Null_0"),
        (nx.empty_graph(5), "Empty_5"),
        (nx.trivial_graph(), "Trivial_1"),
        (nx.path_graph(2), "Edge_2"),
    ]
