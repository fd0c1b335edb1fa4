"""
Tests for the clique enumeration benchmarking framework.
"""

import math
import signal
import time

import pytest
import networkx as nx
import pandas as pd

from pivotclique.benchmarks import (
    CliqueBenchmark,
    BenchmarkResult,
    run_algorithm_comparison,
    run_scaling_comparison,
    generate_test_graphs,
    create_small_test_graphs,
    moon_moser_graph,
    GraphType,
    ScalingConfig,
    analyze_benchmark_results,
    create_comparison_dataframe,
    statistical_summary,
)
from pivotclique import maximal_cliques
from pivotclique.verification import same_clique_sets

requires_sigalrm = pytest.mark.skipif(
    not hasattr(signal, "SIGALRM"), reason="SIGALRM not available on this platform"
)


class TestGraphGenerators:
    """Test graph generation functions."""

    def test_create_small_test_graphs(self):
        graphs = create_small_test_graphs()

        assert len(graphs) > 0
        assert all(isinstance(G, nx.Graph) for G, desc in graphs)
        assert all(isinstance(desc, str) for G, desc in graphs)

        descriptions = [desc for G, desc in graphs]
        assert any("Path" in desc for desc in descriptions)
        assert any("Moon_Moser" in desc for desc in descriptions)
        assert any(G.number_of_nodes() == 0 for G, desc in graphs)

    def test_generate_test_graphs(self):
        config = ScalingConfig(
            small_range=(5, 10),
            medium_range=(15, 20),
            large_range=(25, 30),
            step_size=5
        )

        graph_types = [GraphType.PATH, GraphType.ERDOS_RENYI]
        graphs = list(generate_test_graphs(config, graph_types))

        assert len(graphs) > 0
        for G, desc, category in graphs:
            assert isinstance(G, nx.Graph)
            assert desc.startswith("Path_") or desc.startswith("ER_")
            assert category in ["small", "medium", "large"]
            assert G.number_of_nodes() >= 5

    def test_generation_is_reproducible(self):
        config = ScalingConfig(small_range=(8, 8), medium_range=(0, -1), large_range=(0, -1))
        first = [sorted(G.edges()) for G, _, _ in generate_test_graphs(config, [GraphType.ERDOS_RENYI])]
        second = [sorted(G.edges()) for G, _, _ in generate_test_graphs(config, [GraphType.ERDOS_RENYI])]
        assert first == second

    @pytest.mark.parametrize("n", [3, 6, 9, 12])
    def test_moon_moser_clique_count(self, n):
        G = moon_moser_graph(n)
        assert G.number_of_nodes() == n
        assert len(maximal_cliques(G)) == 3 ** (n // 3)

    def test_moon_moser_remainder_part(self):
        # Parts of size 3 and 2: 3 * 2 cliques
        assert len(maximal_cliques(moon_moser_graph(5))) == 6

    def test_categories(self):
        config = ScalingConfig(small_range=(6, 12), medium_range=(20, 30), large_range=(0, -1), step_size=6)
        assert config.categories() == [
            ("small", [6, 12]),
            ("medium", [20]),
            ("large", []),
        ]

    @pytest.mark.parametrize("graph_type,prefix", [
        (GraphType.BARABASI_ALBERT, "BA_"),
        (GraphType.RANDOM_PARTITION, "Community_"),
        (GraphType.ERDOS_RENYI, "ER_"),
    ])
    def test_random_families_agree_with_networkx(self, graph_type, prefix):
        config = ScalingConfig(small_range=(8, 16), medium_range=(0, -1), large_range=(0, -1), step_size=4)
        graphs = list(generate_test_graphs(config, [graph_type]))

        assert len(graphs) >= 3
        for G, desc, category in graphs:
            assert desc.startswith(prefix)
            assert category == "small"
            assert same_clique_sets(maximal_cliques(G), nx.find_cliques(G)), desc

    def test_community_blocks_cover_all_nodes(self):
        config = ScalingConfig(small_range=(10, 10), medium_range=(0, -1), large_range=(0, -1),
                               community_counts=(3,))
        (G, desc, _), = list(generate_test_graphs(config, [GraphType.RANDOM_PARTITION]))
        assert desc == "Community_n10_k3"
        assert G.number_of_nodes() == 10
        assert [len(block) for block in G.graph["partition"]] == [4, 3, 3]

    def test_barabasi_albert_skips_large_attachment(self):
        config = ScalingConfig(small_range=(3, 3), medium_range=(0, -1), large_range=(0, -1),
                               ba_attachments=(2, 4))
        descs = [desc for _, desc, _ in generate_test_graphs(config, [GraphType.BARABASI_ALBERT])]
        assert descs == ["BA_n3_m2"]

    def test_descriptions_unique_in_sweep(self):
        config = ScalingConfig(small_range=(6, 18), medium_range=(20, 30), large_range=(0, -1))
        descs = [desc for _, desc, _ in generate_test_graphs(config)]
        assert len(descs) == len(set(descs))


class TestCliqueBenchmark:
    """Test the benchmark runners."""

    def setup_method(self):
        self.benchmark = CliqueBenchmark(fast_timeout=5.0, slow_timeout=10.0)

    @requires_sigalrm
    def test_pivot_run(self):
        result = self.benchmark.run_pivot_enumerator(nx.cycle_graph(5), "Cycle_5")
        assert isinstance(result, BenchmarkResult)
        assert result.success
        assert result.num_cliques == 5
        assert result.clique_number == 2
        assert result.graph_description == "Cycle_5"
        assert result.runtime_seconds >= 0

    @requires_sigalrm
    def test_default_description(self):
        result = self.benchmark.run_networkx_find_cliques(nx.path_graph(4))
        assert result.graph_description == "Graph_n4_m3"
        assert result.num_cliques == 3

    @requires_sigalrm
    def test_brute_force_refuses_large_graph(self):
        result = self.benchmark.run_brute_force(nx.path_graph(20))
        assert not result.success
        assert "too large" in result.error_message

    @requires_sigalrm
    def test_timeout(self):
        benchmark = CliqueBenchmark(fast_timeout=1.0)
        result = benchmark._run("Sleeper", lambda g: time.sleep(5), nx.path_graph(2), 1.0)
        assert not result.success
        assert result.timeout
        assert result.cliques == []

    @requires_sigalrm
    def test_error_captured(self):
        result = self.benchmark.run_pivot_enumerator(nx.DiGraph([(0, 1)]))
        assert not result.success
        assert not result.timeout
        assert "directed" in result.error_message


@requires_sigalrm
class TestRunAlgorithmComparison:

    def test_all_algorithms_agree(self):
        results = run_algorithm_comparison(
            nx.petersen_graph(), "Petersen",
            algorithms=["pivot", "nx_find_cliques", "brute_force"]
        )
        assert set(results) == {"pivot", "nx_find_cliques", "brute_force"}
        assert all(r.success for r in results.values())
        assert results["pivot"].matches_reference is None
        assert results["nx_find_cliques"].matches_reference is True
        assert results["brute_force"].matches_reference is True

    def test_default_algorithms(self):
        results = run_algorithm_comparison(nx.complete_graph(5), "K5")
        assert set(results) == {"pivot", "nx_find_cliques"}
        assert results["nx_find_cliques"].clique_number == 5

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            run_algorithm_comparison(nx.path_graph(3), algorithms=["pivot", "gurobi"])

    def test_verbose_output(self, capsys):
        run_algorithm_comparison(
            nx.path_graph(3), "P3", algorithms=["pivot"],
            benchmark_config={"verbose": True}
        )
        out = capsys.readouterr().out
        assert "Running pivot on P3" in out


@requires_sigalrm
class TestRunScalingComparison:

    def setup_method(self):
        self.config = ScalingConfig(
            small_range=(8, 12), medium_range=(0, -1), large_range=(0, -1), step_size=4
        )

    def test_pivot_agrees_on_every_sweep_graph(self):
        graph_types = [GraphType.BARABASI_ALBERT, GraphType.RANDOM_PARTITION, GraphType.MOON_MOSER]
        results = run_scaling_comparison(self.config, graph_types)
        expected = [desc for _, desc, _ in generate_test_graphs(self.config, graph_types)]

        assert set(results) == {"pivot", "nx_find_cliques"}
        assert [r.graph_description for r in results["pivot"]] == expected
        assert [r.graph_description for r in results["nx_find_cliques"]] == expected
        assert all(r.success for r in results["pivot"])
        assert all(r.matches_reference is True for r in results["nx_find_cliques"])

    def test_feeds_analysis(self):
        results = run_scaling_comparison(
            self.config, [GraphType.CYCLE, GraphType.COMPLETE],
            algorithms=["nx_find_cliques", "pivot", "brute_force"]
        )
        analysis = analyze_benchmark_results(results)
        summaries = analysis["summary_statistics"]
        assert summaries["pivot"].agreement_rate == pytest.approx(1.0)
        assert summaries["brute_force"].agreement_rate == pytest.approx(1.0)
        assert "pivot" in analysis["speedup"]
        assert len(analysis["dataframe"]) == 3 * 4


class TestAnalysis:

    def _result(self, name, graph_id, runtime, success=True, matches=None):
        return BenchmarkResult(
            algorithm_name=name,
            graph_description=f"G{graph_id}",
            graph_size=5,
            graph_edges=4,
            cliques=[[0, 1]] if success else [],
            num_cliques=1 if success else 0,
            clique_number=2 if success else 0,
            runtime_seconds=runtime,
            matches_reference=matches,
            success=success,
            timeout=not success,
        )

    def test_empty_summary(self):
        summary = statistical_summary([], "pivot")
        assert summary.num_graphs == 0
        assert summary.success_rate == 0.0

    def test_summary(self):
        results = [
            self._result("pivot", 0, 1.0, matches=True),
            self._result("pivot", 1, 3.0, matches=False),
            self._result("pivot", 2, 5.0, success=False),
        ]
        summary = statistical_summary(results, "pivot")
        assert summary.num_graphs == 3
        assert summary.mean_runtime == pytest.approx(3.0)
        assert summary.success_rate == pytest.approx(2 / 3)
        assert summary.timeout_rate == pytest.approx(1 / 3)
        assert summary.error_rate == pytest.approx(0.0)
        assert summary.agreement_rate == pytest.approx(0.5)
        assert summary.max_num_cliques == 1

    def test_agreement_rate_without_cross_check(self):
        summary = statistical_summary([self._result("pivot", 0, 1.0)], "pivot")
        assert math.isnan(summary.agreement_rate)

    def test_dataframe(self):
        results = {
            "pivot": [self._result("pivot", 0, 1.0)],
            "nx_find_cliques": [self._result("nx", 0, 2.0)],
        }
        df = create_comparison_dataframe(results)
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2
        assert set(df["algorithm"]) == {"pivot", "nx_find_cliques"}

    def test_empty_dataframe_has_columns(self):
        df = create_comparison_dataframe({})
        assert df.empty
        assert "runtime_seconds" in df.columns

    def test_speedup(self):
        results = {
            "nx_find_cliques": [self._result("nx", 0, 2.0), self._result("nx", 1, 4.0)],
            "pivot": [self._result("pivot", 0, 1.0), self._result("pivot", 1, 1.0)],
        }
        analysis = analyze_benchmark_results(results)
        assert analysis["speedup"]["pivot"] == pytest.approx(3.0)
        assert set(analysis["summary_statistics"]) == {"nx_find_cliques", "pivot"}

    def test_no_speedup_without_baseline(self):
        analysis = analyze_benchmark_results({"pivot": [self._result("pivot", 0, 1.0)]})
        assert analysis["speedup"] == {}

    def test_speedup_pairs_runs_by_graph(self):
        # pivot ran an extra graph and in a different order
        results = {
            "nx_find_cliques": [self._result("nx", 0, 2.0), self._result("nx", 1, 4.0)],
            "pivot": [
                self._result("pivot", 1, 2.0),
                self._result("pivot", 2, 0.5),
                self._result("pivot", 0, 1.0),
            ],
        }
        analysis = analyze_benchmark_results(results)
        assert analysis["speedup"]["pivot"] == pytest.approx(2.0)
