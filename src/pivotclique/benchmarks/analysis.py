"""
Statistical analysis and result processing for clique enumeration benchmarks.
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Any
from dataclasses import dataclass

from .networkx_comparison import BenchmarkResult


@dataclass
class StatisticalSummary:
    """Statistical summary for a set of benchmark results."""
    algorithm_name: str
    num_graphs: int

    # Clique count statistics
    mean_num_cliques: float
    median_num_cliques: float
    max_num_cliques: int

    # Runtime statistics
    mean_runtime: float
    median_runtime: float
    std_runtime: float
    min_runtime: float
    max_runtime: float

    # Success rate
    success_rate: float
    timeout_rate: float
    error_rate: float

    # Fraction of cross-checked runs that agreed with the reference
    agreement_rate: float = float("nan")


def statistical_summary(
    results: List[BenchmarkResult],
    algorithm_name: str
) -> StatisticalSummary:
    """
    Compute statistical summary for a single algorithm's results.

    Args:
        results: List of BenchmarkResults for the algorithm.
        algorithm_name: Name of the algorithm.

    Returns:
        StatisticalSummary object.
    """
    if not results:
        return StatisticalSummary(
            algorithm_name=algorithm_name,
            num_graphs=0,
            mean_num_cliques=0.0, median_num_cliques=0.0, max_num_cliques=0,
            mean_runtime=0.0, median_runtime=0.0, std_runtime=0.0,
            min_runtime=0.0, max_runtime=0.0,
            success_rate=0.0, timeout_rate=0.0, error_rate=0.0
        )

    num_graphs = len(results)
    successful_results = [r for r in results if r.success]

    if successful_results:
        counts = [r.num_cliques for r in successful_results]
        mean_num_cliques = float(np.mean(counts))
        median_num_cliques = float(np.median(counts))
        max_num_cliques = max(counts)
    else:
        mean_num_cliques = median_num_cliques = 0.0
        max_num_cliques = 0

    # Runtime statistics (include all results)
    runtimes = [r.runtime_seconds for r in results]

    success_count = len(successful_results)
    timeout_count = sum(1 for r in results if r.timeout)
    error_count = num_graphs - success_count - timeout_count

    checked = [r.matches_reference for r in successful_results if r.matches_reference is not None]
    agreement_rate = float(np.mean(checked)) if checked else float("nan")

    return StatisticalSummary(
        algorithm_name=algorithm_name,
        num_graphs=num_graphs,
        mean_num_cliques=mean_num_cliques,
        median_num_cliques=median_num_cliques,
        max_num_cliques=max_num_cliques,
        mean_runtime=float(np.mean(runtimes)),
        median_runtime=float(np.median(runtimes)),
        std_runtime=float(np.std(runtimes)),
        min_runtime=min(runtimes),
        max_runtime=max(runtimes),
        success_rate=success_count / num_graphs,
        timeout_rate=timeout_count / num_graphs,
        error_rate=error_count / num_graphs,
        agreement_rate=agreement_rate
    )


def create_comparison_dataframe(
    results: Dict[str, List[BenchmarkResult]]
) -> pd.DataFrame:
    """
    Create a pandas DataFrame from benchmark results for easy analysis.

    Args:
        results: Dictionary mapping algorithm names to lists of BenchmarkResults.

    Returns:
        DataFrame with one row per (algorithm, graph) run.
    """
    rows = []

    for alg_name, alg_results in results.items():
        for i, result in enumerate(alg_results):
            rows.append({
                'algorithm': alg_name,
                'graph_id': i,
                'graph_description': result.graph_description,
                'graph_size': result.graph_size,
                'graph_edges': result.graph_edges,
                'num_cliques': result.num_cliques,
                'clique_number': result.clique_number,
                'runtime_seconds': result.runtime_seconds,
                'success': result.success,
                'timeout': result.timeout,
                'matches_reference': result.matches_reference,
                'error_message': result.error_message
            })

    columns = [
        'algorithm', 'graph_id', 'graph_description', 'graph_size', 'graph_edges',
        'num_cliques', 'clique_number', 'runtime_seconds', 'success', 'timeout',
        'matches_reference', 'error_message'
    ]
    return pd.DataFrame(rows, columns=columns)


def analyze_benchmark_results(
    results: Dict[str, List[BenchmarkResult]]
) -> Dict[str, Any]:
    """
    Summarise benchmark results per algorithm and compute runtime speedups.

    Speedups are relative to NetworkX's find_cliques when it was run, computed
    per graph over runs where both algorithms succeeded. Runs are paired by
    graph_description, not by list position; a description repeated within
    one algorithm's results counts once (first run kept).

    Returns:
        Dictionary with 'summary_statistics', 'speedup' and 'dataframe'.
    """
    df = create_comparison_dataframe(results)
    analysis = {
        'summary_statistics': {
            alg_name: statistical_summary(alg_results, alg_name)
            for alg_name, alg_results in results.items()
        },
        'speedup': {},
        'dataframe': df
    }

    baseline = 'nx_find_cliques'
    if baseline not in results or df.empty:
        return analysis

    ok = df[df['success']].drop_duplicates(['algorithm', 'graph_description'])
    base_times = ok[ok['algorithm'] == baseline].set_index('graph_description')['runtime_seconds']
    for alg_name in results:
        if alg_name == baseline:
            continue
        times = ok[ok['algorithm'] == alg_name].set_index('graph_description')['runtime_seconds']
        paired = pd.concat([base_times, times], axis=1, join='inner', keys=['base', 'alg'])
        paired = paired[paired['alg'] > 0]
        if not paired.empty:
            analysis['speedup'][alg_name] = float(np.median(paired['base'] / paired['alg']))

    return analysis
