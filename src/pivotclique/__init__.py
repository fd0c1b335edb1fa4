"""
Pivot Clique: maximal clique and independent set enumeration

This package enumerates every maximal clique of an undirected networkx graph
with a pivoting Bron-Kerbosch search run over an explicit stack, and derives
from it:
1. The maximum clique and the clique number omega(G)
2. The maximal independent sets, the maximum independent set and the
   independence number alpha(G), via alpha(G) = omega(G_complement)

Brute-force references and a NetworkX comparison harness are included for
validation.
"""

from .cliques import (
    iter_maximal_cliques,
    maximal_cliques,
    maximum_clique,
    clique_number
)
from .independent import (
    complement_graph,
    maximal_independent_sets,
    maximum_independent_set,
    independence_number
)
from .adjacency import build_adjacency_cache
from .verification import (
    verify_clique,
    verify_independent_set,
    is_maximal_clique,
    is_maximal_independent_set,
    same_clique_sets
)
from .exceptions import PivotCliqueError, GraphTypeError, BenchmarkTimeoutError

__version__ = "0.1.0"
__all__ = [
    # Clique enumeration
    "iter_maximal_cliques",
    "maximal_cliques",
    "maximum_clique",
    "clique_number",
    # Independent sets
    "complement_graph",
    "maximal_independent_sets",
    "maximum_independent_set",
    "independence_number",
    # Internals exposed for inspection
    "build_adjacency_cache",
    # Verification functions
    "verify_clique",
    "verify_independent_set",
    "is_maximal_clique",
    "is_maximal_independent_set",
    "same_clique_sets",
    # Exceptions
    "PivotCliqueError",
    "GraphTypeError",
    "BenchmarkTimeoutError"
]
