"""
Custom exceptions for the pivotclique package.
"""

import networkx as nx


class PivotCliqueError(Exception):
    """Base exception for pivotclique errors."""
    pass


class GraphTypeError(PivotCliqueError, nx.NetworkXNotImplemented):
    """Raised when a graph is directed or is not a networkx graph at all."""
    pass


class BenchmarkTimeoutError(PivotCliqueError, TimeoutError):
    """Raised when a benchmarked algorithm exceeds its time budget."""
    pass
