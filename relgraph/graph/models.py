"""In-memory graph structure assembled by :class:`~relgraph.graph.builder.GraphBuilder`.

Plain dataclasses, independent of any rendering library.  Every element is
retrieved-or-created by key so asking for the same key twice returns the
same object instead of a duplicate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GraphNode:
    key: str
    attrs: dict[str, str] = field(default_factory=dict)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    @property
    def label(self) -> Optional[str]:
        return self.attrs.get("label")


@dataclass
class GraphEdge:
    tail: GraphNode
    head: GraphNode
    name: str
    attrs: dict[str, str] = field(default_factory=dict)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    @property
    def label(self) -> Optional[str]:
        return self.attrs.get("label")


@dataclass
class Cluster:
    key: str
    attrs: dict[str, str] = field(default_factory=dict)
    nodes: dict[str, GraphNode] = field(default_factory=dict)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    @property
    def label(self) -> Optional[str]:
        return self.attrs.get("label")

    def get_or_add_node(self, key: str) -> GraphNode:
        """Return the node stored under *key*, creating it on first use."""
        node = self.nodes.get(key)
        if node is None:
            node = GraphNode(key=key)
            self.nodes[key] = node
        return node


@dataclass
class RootGraph:
    """Undirected top-level container owning every cluster and edge."""

    name: str
    graph_attr: dict[str, str] = field(default_factory=dict)
    node_attr: dict[str, str] = field(default_factory=dict)
    edge_attr: dict[str, str] = field(default_factory=dict)
    clusters: dict[str, Cluster] = field(default_factory=dict)
    edges: dict[tuple[str, str, str], GraphEdge] = field(default_factory=dict)

    def get_or_add_cluster(self, key: str) -> Cluster:
        """Return the cluster stored under *key*, creating it on first use."""
        cluster = self.clusters.get(key)
        if cluster is None:
            cluster = Cluster(key=key)
            self.clusters[key] = cluster
        return cluster

    def get_or_add_edge(self, tail: GraphNode, head: GraphNode, name: str) -> GraphEdge:
        """Return the edge *tail* -> *head* called *name*, creating it on first use."""
        edge_key = (tail.key, head.key, name)
        edge = self.edges.get(edge_key)
        if edge is None:
            edge = GraphEdge(tail=tail, head=head, name=name)
            self.edges[edge_key] = edge
        return edge
