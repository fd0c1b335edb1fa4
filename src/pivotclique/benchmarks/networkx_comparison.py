"""
Core benchmarking framework for comparing the pivot clique enumerator with NetworkX.

Every run is bounded by a SIGALRM timeout. Because the enumerator has no
checkpoint, a run that times out is reported as failed and its partial
output is discarded.
"""

import time
import signal
import logging
import networkx as nx
from typing import Dict, List, Optional, Any, Callable, Hashable
from dataclasses import dataclass

from ..cliques import maximal_cliques
from ..exceptions import BenchmarkTimeoutError
from ..verification import find_maximal_cliques_brute_force, same_clique_sets
from .graph_generators import GraphType, ScalingConfig, generate_test_graphs

logger = logging.getLogger(__name__)

# Name used for each algorithm key in run_algorithm_comparison
ALGORITHM_NAMES = {
    "pivot": "Pivot_Bron_Kerbosch",
    "nx_find_cliques": "NetworkX_Find_Cliques",
    "brute_force": "Brute_Force_Subsets",
}


def _describe(graph: nx.Graph, graph_description: str) -> str:
    return graph_description or f"Graph_n{graph.number_of_nodes()}_m{graph.number_of_edges()}"


@dataclass
class BenchmarkResult:
    """Results from running a single algorithm on a single graph."""
    algorithm_name: str
    graph_description: str
    graph_size: int
    graph_edges: int

    # Core results
    cliques: List[List[Hashable]]
    num_cliques: int
    clique_number: int
    runtime_seconds: float

    # Cross-check against another algorithm's output, if one was run
    matches_reference: Optional[bool] = None

    # Error handling
    success: bool = True
    error_message: Optional[str] = None
    timeout: bool = False


@dataclass
class CliqueBenchmark:
    """Benchmark settings for maximal clique enumeration runs."""

    # Timeout settings (in seconds)
    fast_timeout: float = 10.0      # For the pivot enumerator and NetworkX
    slow_timeout: float = 60.0      # For brute force

    # Brute force is skipped above this many nodes
    brute_force_max_nodes: int = 12

    verbose: bool = False

    def _timeout_handler(self, signum, frame):
        """Signal handler for timeout."""
        raise BenchmarkTimeoutError("Algorithm timed out")

    def _run_with_timeout(self, func: Callable, timeout: float, *args, **kwargs) -> Any:
        """Run a function with a timeout."""
        old_handler = signal.signal(signal.SIGALRM, self._timeout_handler)
        signal.alarm(max(1, int(timeout)))

        try:
            return func(*args, **kwargs)
        finally:
            signal.alarm(0)
            signal.signal(signal.SIGALRM, old_handler)

    def _run(
        self,
        name: str,
        func: Callable[[nx.Graph], List[List[Hashable]]],
        graph: nx.Graph,
        timeout: float,
        graph_description: str = ""
    ) -> BenchmarkResult:
        graph_desc = _describe(graph, graph_description)
        base = dict(
            algorithm_name=name,
            graph_description=graph_desc,
            graph_size=graph.number_of_nodes(),
            graph_edges=graph.number_of_edges(),
        )

        try:
            start_time = time.perf_counter()
            cliques = self._run_with_timeout(func, timeout, graph)
            runtime = time.perf_counter() - start_time
        except BenchmarkTimeoutError:
            logger.info("%s timed out after %.1fs on %s", name, timeout, graph_desc)
            return BenchmarkResult(
                **base,
                cliques=[],
                num_cliques=0,
                clique_number=0,
                runtime_seconds=timeout,
                success=False,
                timeout=True,
                error_message="Timeout exceeded"
            )
        except Exception as e:
            logger.warning("%s failed on %s: %s", name, graph_desc, e)
            return BenchmarkResult(
                **base,
                cliques=[],
                num_cliques=0,
                clique_number=0,
                runtime_seconds=0.0,
                success=False,
                error_message=str(e)
            )

        return BenchmarkResult(
            **base,
            cliques=cliques,
            num_cliques=len(cliques),
            clique_number=max((len(c) for c in cliques), default=0),
            runtime_seconds=runtime
        )

    def run_pivot_enumerator(self, graph: nx.Graph, graph_description: str = "") -> BenchmarkResult:
        """Run the explicit-stack pivot enumerator."""
        return self._run(
            ALGORITHM_NAMES["pivot"], maximal_cliques, graph,
            self.fast_timeout, graph_description
        )

    def run_networkx_find_cliques(self, graph: nx.Graph, graph_description: str = "") -> BenchmarkResult:
        """Run NetworkX's find_cliques, materialised so the timeout covers it."""
        return self._run(
            ALGORITHM_NAMES["nx_find_cliques"], lambda g: list(nx.find_cliques(g)), graph,
            self.fast_timeout, graph_description
        )

    def run_brute_force(self, graph: nx.Graph, graph_description: str = "") -> BenchmarkResult:
        """Run exhaustive subset enumeration; refuses graphs above brute_force_max_nodes."""
        if graph.number_of_nodes() > self.brute_force_max_nodes:
            return BenchmarkResult(
                algorithm_name=ALGORITHM_NAMES["brute_force"],
                graph_description=_describe(graph, graph_description),
                graph_size=graph.number_of_nodes(),
                graph_edges=graph.number_of_edges(),
                cliques=[],
                num_cliques=0,
                clique_number=0,
                runtime_seconds=0.0,
                success=False,
                error_message=f"Graph too large for brute force (> {self.brute_force_max_nodes} nodes)"
            )
        return self._run(
            ALGORITHM_NAMES["brute_force"],
            lambda g: [list(c) for c in find_maximal_cliques_brute_force(g)],
            graph, self.slow_timeout, graph_description
        )


def run_algorithm_comparison(
    graph: nx.Graph,
    graph_description: str = "",
    algorithms: Optional[List[str]] = None,
    benchmark_config: Optional[Dict] = None
) -> Dict[str, BenchmarkResult]:
    """
    Run the specified algorithms on a single graph and cross-check their cliques.

    The first successful algorithm in `algorithms` is the reference; every
    other successful result gets `matches_reference` set.

    Args:
        graph: NetworkX graph to analyze.
        graph_description: Description of the graph.
        algorithms: Algorithms to run. Options:
            - "pivot": the explicit-stack pivot enumerator
            - "nx_find_cliques": networkx.find_cliques
            - "brute_force": exhaustive subset enumeration (small graphs only)
        benchmark_config: Keyword arguments for CliqueBenchmark.

    Returns:
        Dictionary mapping algorithm keys to BenchmarkResult objects.

    Raises:
        ValueError: If an unknown algorithm key is given.
    """
    if algorithms is None:
        algorithms = ["pivot", "nx_find_cliques"]

    unknown = [alg for alg in algorithms if alg not in ALGORITHM_NAMES]
    if unknown:
        raise ValueError(f"Unknown algorithms: {unknown}. Options: {sorted(ALGORITHM_NAMES)}")

    benchmark = CliqueBenchmark(**(benchmark_config or {}))
    runners = {
        "pivot": benchmark.run_pivot_enumerator,
        "nx_find_cliques": benchmark.run_networkx_find_cliques,
        "brute_force": benchmark.run_brute_force,
    }

    results = {}
    reference = None

    for alg in algorithms:
        if benchmark.verbose:
            print(f"Running {alg} on {graph_description}...")

        result = runners[alg](graph, graph_description)
        results[alg] = result

        if result.success:
            if reference is None:
                reference = result
            else:
                result.matches_reference = same_clique_sets(result.cliques, reference.cliques)
            if benchmark.verbose:
                print(f"  ✓ {alg}: {result.num_cliques} cliques, omega = {result.clique_number}, "
                      f"Runtime = {result.runtime_seconds:.3f}s")
        elif benchmark.verbose:
            print(f"  ✗ {alg}: {result.error_message}")

    return results


def run_scaling_comparison(
    config: Optional[ScalingConfig] = None,
    graph_types: Optional[List[GraphType]] = None,
    algorithms: Optional[List[str]] = None,
    benchmark_config: Optional[Dict] = None,
    seed: int = 42
) -> Dict[str, List[BenchmarkResult]]:
    """
    Run run_algorithm_comparison over every graph of a scaling sweep.

    The result is keyed by algorithm, ready for analyze_benchmark_results.
    Graph descriptions are unique within a sweep, so runs of different
    algorithms on the same graph can be paired by description.

    Args:
        config: Sweep sizes (default ScalingConfig()).
        graph_types: Families to include (None for all).
        algorithms: Passed through to run_algorithm_comparison.
        benchmark_config: Keyword arguments for CliqueBenchmark.
        seed: Seed for the random graph families.

    Returns:
        Dictionary mapping algorithm keys to per-graph BenchmarkResults, in
        sweep order.
    """
    config = config or ScalingConfig()
    results: Dict[str, List[BenchmarkResult]] = {}

    for graph, desc, category in generate_test_graphs(config, graph_types, seed=seed):
        logger.debug("Sweep graph %s (%s): n=%d m=%d", desc, category,
                     graph.number_of_nodes(), graph.number_of_edges())
        per_graph = run_algorithm_comparison(graph, desc, algorithms, benchmark_config)
        for alg, result in per_graph.items():
            results.setdefault(alg, []).append(result)

    return results
