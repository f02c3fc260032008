"""
Composition Graph Export
========================
Records the definitions and edges reached from a root component.

Output formats:
- JSON: Machine-readable graph structure
- DOT: Graphviz visualization format
"""
from __future__ import annotations

import json
from typing import Dict, List, Optional, Sequence

from vueattrs.core.links import DEFAULT_LINKS, ComponentLink
from vueattrs.core.model import (
    ComponentDefinition,
    CompositionEdge,
    LinkKind,
    VisitResult,
)
from vueattrs.core.providers import ComponentIndex
from vueattrs.core.traversal import traverse


class CompositionGraph:
    """Nodes and edges of the subgraph reachable from one root."""

    def __init__(self, root: Optional[ComponentDefinition] = None):
        self.root = root
        self._nodes: List[ComponentDefinition] = [root] if root is not None else []
        self._edges: List[CompositionEdge] = []

    @property
    def nodes(self) -> List[ComponentDefinition]:
        """Return nodes in visit order, root first."""
        return list(self._nodes)

    @property
    def edges(self) -> List[CompositionEdge]:
        """Return edges in discovery order."""
        return list(self._edges)

    def add_node(self, definition: ComponentDefinition) -> None:
        if definition not in self._nodes:
            self._nodes.append(definition)

    def add_edge(self, edge: CompositionEdge) -> None:
        self._edges.append(edge)

    def get_outgoing_edges(self, definition: Optional[ComponentDefinition]) -> List[CompositionEdge]:
        """Get all edges originating from a node."""
        return [e for e in self._edges if e.source is definition]

    def to_dict(self) -> Dict:
        """Export graph to dictionary."""
        return {
            "root": self.root.name if self.root else None,
            "nodes": [node.to_dict() for node in self._nodes],
            "edges": [edge.to_dict() for edge in self._edges],
            "metadata": {
                "node_count": len(self._nodes),
                "edge_count": len(self._edges),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Export graph to JSON format."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def to_dot(self, title: str = "Component Composition Graph") -> str:
        """
        Export graph to Graphviz DOT format.

        Edges leaving an absent root are drawn from a "<global>" node.
        """
        lines = [
            f'digraph "{title}" {{',
            "    rankdir=BT;",
            "    node [shape=box, style=filled];",
            "",
        ]

        for node in self._nodes:
            color = "#E3F2FD" if node is self.root else "#FAFAFA"
            safe_name = node.name.replace('"', '\\"')
            lines.append(f'    "{safe_name}" [fillcolor="{color}"];')

        lines.append("")

        edge_styles = {
            LinkKind.LOCAL_MIXIN: 'style=solid, color="#4CAF50"',
            LinkKind.GLOBAL_MIXIN: 'style=dashed, color="#FF9800"',
            LinkKind.EXTENDS: 'style=bold, color="#2196F3"',
        }

        for edge in self._edges:
            style = edge_styles.get(edge.kind, "")
            source = edge.source.name if edge.source else "<global>"
            safe_source = source.replace('"', '\\"')
            safe_target = edge.target.name.replace('"', '\\"')
            lines.append(
                f'    "{safe_source}" -> "{safe_target}" [{style}, label="{edge.kind.value}"];'
            )

        lines.append("}")
        return "\n".join(lines)


def build_composition_graph(
    root: Optional[ComponentDefinition],
    index: ComponentIndex,
    links: Sequence[ComponentLink] = DEFAULT_LINKS,
) -> CompositionGraph:
    """Walk the composition graph from root and record what was reached."""
    graph = CompositionGraph(root)

    def visit(definition: ComponentDefinition) -> VisitResult:
        graph.add_node(definition)
        return VisitResult.CONTINUE

    traverse(root, visit, index, links, on_edge=graph.add_edge)
    return graph
