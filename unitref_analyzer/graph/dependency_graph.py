"""
Unit dependency graph.

This module defines the UnitDependencyGraph class, which uses networkx to
collect the references extracted from many unit files into one directed
graph of units.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

import networkx as nx

from unitref_analyzer.models.reference import UnitReference
from unitref_analyzer.models.relationship import Relationship


class UnitDependencyGraph:
    """Directed multigraph of unit references.

    Nodes are unit names. Each reference becomes one edge from the unit
    whose file was scanned to the referenced unit, labelled with the
    relationship. Parallel edges are kept, so the same pair of units can be
    linked by several relationships (or by the same one twice). The graph
    records what files say; it does not check ordering or cycles.

    Attributes:
        graph: networkx MultiDiGraph holding the references.

    Example:
        >>> graph = UnitDependencyGraph()
        >>> graph.add_reference(
        ...     "sshd.service", UnitReference("network.target", Relationship.AFTER)
        ... )
        >>> graph.dependencies_of("sshd.service")
        ['network.target']
    """

    def __init__(self) -> None:
        """Initialize an empty UnitDependencyGraph."""
        self.graph = nx.MultiDiGraph()

    def add_unit(self, unit_name: str, path: Optional[str] = None) -> None:
        """Add a scanned unit as a node, recording its file path."""
        self.graph.add_node(unit_name, scanned=True, path=path)

    def add_reference(self, source_unit: str, reference: UnitReference) -> None:
        """Add one reference edge.

        Args:
            source_unit: Name of the unit whose file holds the reference.
            reference: Extracted reference.
        """
        if source_unit not in self.graph:
            self.graph.add_node(source_unit, scanned=False, path=None)
        if reference.unit_name not in self.graph:
            self.graph.add_node(reference.unit_name, scanned=False, path=None)

        self.graph.add_edge(
            source_unit,
            reference.unit_name,
            relationship=reference.relationship.value,
        )

    def add_references(
        self, source_unit: str, references: Iterable[UnitReference]
    ) -> None:
        for reference in references:
            self.add_reference(source_unit, reference)

    def dependencies_of(
        self, unit_name: str, relationship: Optional[Relationship] = None
    ) -> list[str]:
        """Get units referenced by a unit, in insertion order, without repeats.

        Args:
            unit_name: Unit whose outgoing references are wanted.
            relationship: Optional relationship filter.

        Returns:
            Referenced unit names; empty when the unit is unknown.
        """
        if unit_name not in self.graph:
            return []
        targets = (
            target
            for _, target, data in self.graph.out_edges(unit_name, data=True)
            if relationship is None or data["relationship"] == relationship.value
        )
        return list(dict.fromkeys(targets))

    def dependents_of(
        self, unit_name: str, relationship: Optional[Relationship] = None
    ) -> list[str]:
        """Get units whose files reference a unit, without repeats.

        Args:
            unit_name: Referenced unit.
            relationship: Optional relationship filter.

        Returns:
            Referencing unit names; empty when the unit is unknown.
        """
        if unit_name not in self.graph:
            return []
        sources = (
            source
            for source, _, data in self.graph.in_edges(unit_name, data=True)
            if relationship is None or data["relationship"] == relationship.value
        )
        return list(dict.fromkeys(sources))

    def relationships_between(self, source_unit: str, target_unit: str) -> list[str]:
        """Get relationship names on every edge from source to target."""
        if not self.graph.has_edge(source_unit, target_unit):
            return []
        edges = self.graph.get_edge_data(source_unit, target_unit)
        return [data["relationship"] for data in edges.values()]

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Export graph to a dictionary suitable for JSON serialization."""
        return {
            "nodes": [
                {
                    "id": node,
                    "scanned": data.get("scanned", False),
                    "path": data.get("path"),
                }
                for node, data in self.graph.nodes(data=True)
            ],
            "edges": [
                {
                    "source": u,
                    "target": v,
                    "relationship": data.get("relationship"),
                }
                for u, v, data in self.graph.edges(data=True)
            ],
        }

    def get_statistics(self) -> dict[str, int]:
        """Get node and edge counts, with a per-relationship edge breakdown."""
        stats = {
            "total_units": self.graph.number_of_nodes(),
            "scanned_units": sum(
                1 for _, d in self.graph.nodes(data=True) if d.get("scanned")
            ),
            "total_references": self.graph.number_of_edges(),
        }
        for relationship in Relationship:
            stats[relationship.value] = sum(
                1
                for _, _, d in self.graph.edges(data=True)
                if d.get("relationship") == relationship.value
            )
        return stats

    def to_dot(self) -> str:
        """Export graph to Graphviz DOT format.

        Unit names may hold any character but commas and whitespace, so
        every id and label is emitted as an escaped quoted string.
        """
        lines = ["digraph units {"]
        for u, v, data in self.graph.edges(data=True):
            lines.append(
                f"  {_dot_quote(u)} -> {_dot_quote(v)} "
                f"[label={_dot_quote(data['relationship'])}];"
            )
        lines.append("}")
        return "\n".join(lines)


def _dot_quote(text: str) -> str:
    """Quote text as a DOT string, escaping backslashes and double quotes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
