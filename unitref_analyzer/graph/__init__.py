"""
Dependency graph module.

This package contains the graph representation of references collected
across many unit files.
"""

from unitref_analyzer.graph.dependency_graph import UnitDependencyGraph

__all__ = [
    "UnitDependencyGraph",
]
