"""
Neighbourhood cache shared by the clique search.
"""

from typing import Dict, Hashable, Set, Tuple

import networkx as nx

from .exceptions import GraphTypeError


def require_undirected(graph) -> None:
    """
    Reject anything the clique search cannot work on.

    Raises:
        GraphTypeError: If `graph` is not a networkx graph or is directed.
    """
    if not isinstance(graph, nx.Graph):
        raise GraphTypeError(
            f"Expected a networkx graph, got {type(graph).__name__}"
        )
    if graph.is_directed():
        raise GraphTypeError("not implemented for directed type")


def build_adjacency_cache(graph: nx.Graph) -> Tuple[Dict[Hashable, Set[Hashable]], Set[Hashable]]:
    """
    Cache the open neighbourhood of every node and find the first pivot.

    Self loops are dropped. The initial pivot is the node with the largest
    neighbourhood; the first such node in iteration order wins.

    Args:
        graph: An undirected networkx graph.

    Returns:
        A tuple containing:
        - A dict mapping each node to the set of its neighbours
        - The neighbour set of the highest-degree node (empty for an empty graph)
    """
    nbrs = {}
    pivot_nbrs = set()
    max_conn = -1

    for n in graph.nodes():
        nn = set(graph.neighbors(n))
        nn.discard(n)
        nbrs[n] = nn
        if len(nn) > max_conn:
            pivot_nbrs = nn
            max_conn = len(nn)

    return nbrs, pivot_nbrs
