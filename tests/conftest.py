"""
Pytest configuration and common fixtures for the test suite.
"""

import os
import sys
import pytest
import networkx as nx

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


@pytest.fixture
def small_test_graphs():
    """Fixture providing small graphs with known clique and independent set numbers."""
    graphs = []

    # Triangle (K3) - one maximal clique of size 3, MIS size 1
    graphs.append(("Triangle K3", nx.complete_graph(3),
                   {"clique_size": 3, "mis_size": 1, "num_cliques": 1, "num_mis": 3}))

    # Square (4-cycle) - every edge is a maximal clique
    graphs.append(("4-cycle", nx.cycle_graph(4),
                   {"clique_size": 2, "mis_size": 2, "num_cliques": 4, "num_mis": 2}))

    # Path of 4 nodes
    graphs.append(("4-path", nx.path_graph(4),
                   {"clique_size": 2, "mis_size": 2, "num_cliques": 3, "num_mis": 3}))

    # Complete graph K4
    graphs.append(("Complete K4", nx.complete_graph(4),
                   {"clique_size": 4, "mis_size": 1, "num_cliques": 1, "num_mis": 4}))

    # Star graph (5 nodes)
    graphs.append(("Star 5 nodes", nx.star_graph(4),
                   {"clique_size": 2, "mis_size": 4, "num_cliques": 4, "num_mis": 2}))

    # Petersen graph - triangle free, 15 edges
    graphs.append(("Petersen", nx.petersen_graph(),
                   {"clique_size": 2, "mis_size": 4, "num_cliques": 15}))

    return graphs


@pytest.fixture
def medium_test_graphs():
    """Fixture providing medium-sized test graphs."""
    return [
        ("Wheel 8", nx.wheel_graph(8)),
        ("Grid 3x3", nx.convert_node_labels_to_integers(nx.grid_2d_graph(3, 3))),
        ("Random G(10,0.3)", nx.erdos_renyi_graph(10, 0.3, seed=42)),
        ("Dense Random G(12,0.6)", nx.erdos_renyi_graph(12, 0.6, seed=7)),
        ("Circular ladder 6", nx.circular_ladder_graph(6)),
    ]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
