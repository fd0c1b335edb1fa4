"""
Test suite for the pivotclique package.

This package contains tests covering:
- The adjacency cache and the pivot clique enumerator
- Extremal and independent-set queries
- Verification helpers and brute-force references
- The NetworkX comparison benchmark harness
"""
