"""
Benchmarking framework for comparing the pivot clique enumerator with other algorithms.
"""

from .networkx_comparison import (
    CliqueBenchmark,
    BenchmarkResult,
    run_algorithm_comparison,
    run_scaling_comparison
)
from .graph_generators import (
    generate_test_graphs,
    create_small_test_graphs,
    moon_moser_graph,
    GraphType,
    ScalingConfig
)
from .analysis import (
    analyze_benchmark_results,
    create_comparison_dataframe,
    statistical_summary
)

__all__ = [
    "CliqueBenchmark",
    "BenchmarkResult",
    "run_algorithm_comparison",
    "run_scaling_comparison",
    "generate_test_graphs",
    "create_small_test_graphs",
    "moon_moser_graph",
    "GraphType",
    "ScalingConfig",
    "analyze_benchmark_results",
    "create_comparison_dataframe",
    "statistical_summary"
]
