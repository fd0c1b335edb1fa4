"""
Independent-set queries, answered as clique queries on the complement graph.

Uses the identity alpha(G) = omega(G_complement): an independent set of G is
exactly a clique of its complement.
"""

from typing import Hashable, List

import networkx as nx

from .adjacency import require_undirected
from .cliques import maximal_cliques, maximum_clique, clique_number


def complement_graph(graph: nx.Graph) -> nx.Graph:
    """
    Build the simple complement of an undirected graph.

    Multigraphs are first collapsed to a simple `nx.Graph`, so parallel edges
    count as a single edge. Self loops never appear in the complement.

    Raises:
        GraphTypeError: If the graph is directed or not a networkx graph.
    """
    require_undirected(graph)
    if graph.is_multigraph():
        graph = nx.Graph(graph)
    return nx.complement(graph)


def maximal_independent_sets(graph: nx.Graph) -> List[List[Hashable]]:
    """
    Return every maximal independent set of an undirected graph.

    Example:
        >>> len(maximal_independent_sets(nx.cycle_graph(5)))
        5

    Returns:
        A list of node lists in no particular order.
    """
    return maximal_cliques(complement_graph(graph))


def maximum_independent_set(graph: nx.Graph) -> List[Hashable]:
    """
    Return a maximum independent set, sorted ascending.

    Example:
        >>> len(maximum_independent_set(nx.cycle_graph(7)))
        3
    """
    return maximum_clique(complement_graph(graph))


def independence_number(graph: nx.Graph) -> int:
    """Return the size of the largest independent set, 0 for an empty graph."""
    return clique_number(complement_graph(graph))
