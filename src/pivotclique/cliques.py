"""
Maximal clique enumeration with pivoting, and the extremal queries built on it.

The search is the Bron-Kerbosch scheme with Tomita-style pivot selection,
run as a loop over an explicit stack of (cand, done, smallcand) frames so
that deep search trees never touch Python's recursion limit.

Runtime and the size of the result are exponential in the worst case
(Moon-Moser graphs have 3^(n/3) maximal cliques). Dense graphs beyond a few
hundred nodes should be expected to exhaust time or memory.
"""

import logging
from typing import Hashable, Iterator, List

import networkx as nx

from .adjacency import build_adjacency_cache, require_undirected

logger = logging.getLogger(__name__)


def iter_maximal_cliques(graph: nx.Graph) -> Iterator[List[Hashable]]:
    """
    Lazily yield every maximal clique of an undirected graph.

    The graph is validated immediately, before the first clique is requested.
    The order of the cliques, and of the nodes inside each clique, is not
    specified; only the set of cliques is.

    Args:
        graph: An undirected networkx graph.

    Returns:
        An iterator of lists of nodes, one list per maximal clique.

    Raises:
        GraphTypeError: If the graph is directed or not a networkx graph.
    """
    require_undirected(graph)
    return _pivot_search(graph)


def _pivot_search(graph: nx.Graph) -> Iterator[List[Hashable]]:
    nbrs, pivot_nbrs = build_adjacency_cache(graph)
    logger.debug(
        "Searching %d nodes, initial pivot degree %d", len(nbrs), len(pivot_nbrs)
    )

    cand = set(nbrs)
    done = set()
    smallcand = cand - pivot_nbrs
    stack = []
    clique_so_far = []
    found = 0
    pruned = 0

    while smallcand or stack:
        if smallcand:
            n = smallcand.pop()
        else:
            # Back out one level
            cand, done, smallcand = stack.pop()
            clique_so_far.pop()
            continue

        clique_so_far.append(n)
        cand.remove(n)
        done.add(n)
        nn = nbrs[n]
        new_cand = cand & nn
        new_done = done & nn

        if not new_cand:
            if not new_done:
                found += 1
                yield clique_so_far[:]
            clique_so_far.pop()
            continue

        # Only one way left to extend the clique
        if not new_done and len(new_cand) == 1:
            found += 1
            yield clique_so_far + list(new_cand)
            clique_so_far.pop()
            continue

        # Pivot: look in done first, then in cand
        numb_cand = len(new_cand)
        max_conn_done = -1
        pivot_done_nbrs = set()
        for d in new_done:
            cn = new_cand & nbrs[d]
            conn = len(cn)
            if conn > max_conn_done:
                pivot_done_nbrs = cn
                max_conn_done = conn
                if max_conn_done == numb_cand:
                    break

        # A done node covers every candidate: subtree already searched
        if max_conn_done == numb_cand:
            pruned += 1
            clique_so_far.pop()
            continue

        max_conn = -1
        for c in new_cand:
            cn = new_cand & nbrs[c]
            conn = len(cn)
            if conn > max_conn:
                pivot_nbrs = cn
                max_conn = conn
                if max_conn == numb_cand - 1:
                    break

        if max_conn_done > max_conn:
            pivot_nbrs = pivot_done_nbrs

        stack.append((cand, done, smallcand))
        cand = new_cand
        done = new_done
        smallcand = cand - pivot_nbrs

    logger.debug("Found %d maximal cliques, pruned %d subtrees", found, pruned)


def maximal_cliques(graph: nx.Graph) -> List[List[Hashable]]:
    """
    Return every maximal clique of an undirected graph.

    Example:
        >>> G = nx.Graph([(1, 2), (2, 3)])
        >>> sorted(sorted(c) for c in maximal_cliques(G))
        [[1, 2], [2, 3]]

    Args:
        graph: An undirected networkx graph.

    Returns:
        A list of cliques, each a list of nodes. Neither the order of the
        cliques nor the order inside a clique is guaranteed.

    Raises:
        GraphTypeError: If the graph is directed or not a networkx graph.
    """
    return list(iter_maximal_cliques(graph))


def maximum_clique(graph: nx.Graph) -> List[Hashable]:
    """
    Return a maximum clique of an undirected graph, sorted ascending.

    When several cliques share the maximum size, the first one produced by
    the enumeration is returned. Nodes must be mutually comparable.

    Example:
        >>> G = nx.disjoint_union(nx.complete_graph(3), nx.complete_graph(4))
        >>> maximum_clique(G)
        [3, 4, 5, 6]

    Returns:
        The sorted node list, or an empty list for a graph with no nodes.
    """
    best = []
    for clique in iter_maximal_cliques(graph):
        if len(clique) > len(best):
            best = clique
    return sorted(best)


def clique_number(graph: nx.Graph) -> int:
    """Return the size of the largest clique, 0 for a graph with no nodes."""
    return max((len(c) for c in iter_maximal_cliques(graph)), default=0)
