"""
Verification helpers and brute-force reference solvers for cliques and independent sets.

The brute-force routines enumerate vertex subsets exhaustively. They are only
practical for small graphs but serve as ground truth for testing.
"""

import networkx as nx
from typing import Hashable, Iterable, Set, FrozenSet
from itertools import combinations


def verify_clique(graph: nx.Graph, node_set: Iterable[Hashable]) -> bool:
    """
    Verify that a set of nodes forms a clique.

    Args:
        graph: The input networkx graph.
        node_set: Node IDs to verify.

    Returns:
        True if every pair of distinct nodes is adjacent, False otherwise.
    """
    nodes = set(node_set)
    if not all(node in graph for node in nodes):
        return False
    for u, v in combinations(nodes, 2):
        if not graph.has_edge(u, v):
            return False
    return True


def verify_independent_set(graph: nx.Graph, node_set: Iterable[Hashable]) -> bool:
    """
    Verify that a set of nodes forms an independent set.

    Args:
        graph: The input networkx graph.
        node_set: Node IDs to verify.

    Returns:
        True if no two distinct nodes are adjacent, False otherwise.
    """
    nodes = set(node_set)
    if not all(node in graph for node in nodes):
        return False
    for u, v in combinations(nodes, 2):
        if graph.has_edge(u, v):
            return False
    return True


def is_maximal_clique(graph: nx.Graph, node_set: Iterable[Hashable]) -> bool:
    """
    Check that a node set is a clique that no outside node can extend.
    """
    nodes = set(node_set)
    if not verify_clique(graph, nodes):
        return False
    for v in graph.nodes():
        if v in nodes:
            continue
        if all(graph.has_edge(v, u) for u in nodes if u != v):
            return False
    return True


def is_maximal_independent_set(graph: nx.Graph, node_set: Iterable[Hashable]) -> bool:
    """
    Check that a node set is independent and every outside node has a neighbour in it.
    """
    nodes = set(node_set)
    if not verify_independent_set(graph, nodes):
        return False
    for v in graph.nodes():
        if v in nodes:
            continue
        if not any(graph.has_edge(v, u) for u in nodes if u != v):
            return False
    return True


def find_maximal_cliques_brute_force(graph: nx.Graph) -> Set[FrozenSet[Hashable]]:
    """
    Enumerate all maximal cliques by checking every vertex subset.

    Args:
        graph: The input networkx graph.

    Returns:
        A set of frozensets, one per maximal clique.
    """
    nodes = list(graph.nodes())
    cliques = set()

    # Largest first, so any clique already found can rule out its subsets
    for k in range(len(nodes), 0, -1):
        for combo in combinations(nodes, k):
            candidate = frozenset(combo)
            if any(candidate < found for found in cliques):
                continue
            if is_maximal_clique(graph, candidate):
                cliques.add(candidate)

    return cliques


def find_max_clique_brute_force(graph: nx.Graph) -> Set[Hashable]:
    """
    Find a Maximum Clique using brute force enumeration.

    Args:
        graph: The input networkx graph.

    Returns:
        A set of node IDs representing a maximum clique.
    """
    nodes = list(graph.nodes())

    # Try all combinations from largest to smallest
    for k in range(len(nodes), 0, -1):
        for combo in combinations(nodes, k):
            if verify_clique(graph, combo):
                return set(combo)  # First (largest) clique found

    return set()


def find_mis_brute_force(graph: nx.Graph) -> Set[Hashable]:
    """
    Find a Maximum Independent Set using brute force enumeration.

    Args:
        graph: The input networkx graph.

    Returns:
        A set of node IDs representing a maximum independent set.
    """
    nodes = list(graph.nodes())

    for k in range(len(nodes), 0, -1):
        for combo in combinations(nodes, k):
            if verify_independent_set(graph, combo):
                return set(combo)

    return set()


def same_clique_sets(first: Iterable[Iterable[Hashable]], second: Iterable[Iterable[Hashable]]) -> bool:
    """
    Compare two clique collections, ignoring the order of cliques and of nodes.

    Returns False when either collection lists the same clique twice.
    """
    first = [frozenset(c) for c in first]
    second = [frozenset(c) for c in second]
    if len(first) != len(second):
        return False
    return set(first) == set(second) and len(set(first)) == len(first)
