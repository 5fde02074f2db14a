"""Assemble the relationship graph from table and relationship metadata.

``GraphBuilder.build`` runs the whole pipeline for one document:

    classify relationships → cluster per table → resolve lookup edges
    (one-to-many) → resolve join edges (many-to-many)

Lookup columns resolve in two tiers:

1. **Direct match** — a table whose name equals the column's logical name,
   compared case-insensitively.
2. **Relationship fallback** — a relationship whose referencing attribute
   equals the column's logical name (case-insensitive); its referenced
   entity is then looked up by exact name.

Many-to-many pairs are looked up by exact name only.  A lookup that neither
tier resolves is dropped without an error.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from relgraph.errors import PreconditionViolation
from relgraph.graph import diagnostics as diag
from relgraph.graph.classifier import (
    find_paired_entity,
    many_to_many_first_entities,
    split_relationships,
)
from relgraph.graph.colors import ColorAllocator
from relgraph.graph.diagnostics import Diagnostics
from relgraph.graph.models import Cluster, GraphEdge, RootGraph
from relgraph.graph.sanitize import sanitize
from relgraph.metadata.models import ColumnEntity, EntityRelationship, TableEntity

logger = logging.getLogger(__name__)

ONE_TO_MANY_LABEL = "*|1"
MANY_TO_MANY_LABEL = "*|*"

TABLE_CLUSTER_COLOR = "#7070E0"
EDGE_PENWIDTH = "3"
DEFAULT_COLOR = "#000090"


class GraphBuilder:
    """Build one :class:`RootGraph` from a table set and its relationships.

    Each builder owns its own graph, color allocator and diagnostics; build
    a new one for every document.
    """

    def __init__(
        self,
        tables: Iterable[TableEntity],
        relationships: Iterable[EntityRelationship],
        *,
        name: str = "solution",
        rankdir: str = "LR",
        fontname: str = "helvetica",
        colors: Optional[ColorAllocator] = None,
    ) -> None:
        self.tables: list[TableEntity] = list(tables)
        self.relationships: list[EntityRelationship] = list(relationships)
        self.colors = colors if colors is not None else ColorAllocator()
        self.diagnostics = Diagnostics()
        self.graph = self._new_root_graph(name, rankdir, fontname)
        self._joined: set[frozenset[str]] = set()
        self._built = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def build(self) -> RootGraph:
        """Populate and return the graph.  Calling it again is a no-op."""
        if self._built:
            return self.graph

        one_to_many, many_to_many = split_relationships(self.relationships)
        logger.debug(
            "Building %r from %d table(s), %d one-to-many and %d many-to-many relationship(s)",
            self.graph.name,
            len(self.tables),
            len(one_to_many),
            len(many_to_many),
        )
        many_to_many_names = many_to_many_first_entities(many_to_many)

        for table in self.tables:
            in_many_to_many = table.name in many_to_many_names
            if not (table.contains_non_default_lookup_columns() or in_many_to_many):
                continue

            current = self._table_cluster(table.name, table, color=TABLE_CLUSTER_COLOR)

            for column in table.columns:
                if column is None:
                    self.diagnostics.warn(
                        diag.NULL_COLUMN,
                        table.name,
                        f"lookup column is null for table {table.name}",
                    )
                    continue
                if column.is_non_default_lookup:
                    self._resolve_lookup(table, current, column)

            if in_many_to_many:
                self._resolve_many_to_many(table, current)

        self._built = True
        logger.info(
            "Built graph %r: %d cluster(s), %d edge(s), %d diagnostic(s)",
            self.graph.name,
            len(self.graph.clusters),
            len(self.graph.edges),
            len(self.diagnostics),
        )
        return self.graph

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def _resolve_lookup(self, table: TableEntity, current: Cluster, column: ColumnEntity) -> None:
        target = self._find_table_ci(column.logical_name)
        if target is not None:
            self._connect(column.logical_name, current, target, table, column, ONE_TO_MANY_LABEL)
            return

        rel = self._find_relationship_by_attribute(column.logical_name)
        if rel is not None:
            target = self._find_table(rel.referenced_entity_name)
            if target is not None:
                self._connect(target.name, current, target, table, column, ONE_TO_MANY_LABEL)
                return

        hint = f" (targets {column.target_table})" if column.target_table else ""
        self.diagnostics.note(
            diag.UNRESOLVED_LOOKUP,
            table.name,
            f"no table found for lookup column {column.logical_name}{hint} on {table.name}",
        )

    def _resolve_many_to_many(self, table: TableEntity, current: Cluster) -> None:
        second_name = find_paired_entity(self.relationships, table.name)
        if second_name is None:
            self.diagnostics.note(
                diag.MISSING_PAIR, table.name, f"no paired relationship for {table.name}"
            )
            return

        second = self._find_table(second_name)
        if second is None:
            self.diagnostics.note(
                diag.MISSING_PAIR,
                table.name,
                f"paired table {second_name} of {table.name} is not in the table set",
            )
            return

        pair = frozenset((table.name, second.name))
        if pair in self._joined:
            logger.debug("%s and %s are already joined", table.name, second.name)
            return

        id_column = table.primary_column_entity()
        if id_column is None:
            self.diagnostics.warn(
                diag.MISSING_PRIMARY_KEY,
                table.name,
                f"primary key column is missing for table {table.name}",
            )
            return

        edge = self._connect(second.name, current, second, table, id_column, MANY_TO_MANY_LABEL)
        if edge is not None:
            self._joined.add(pair)

    # ------------------------------------------------------------------
    # Element creation
    # ------------------------------------------------------------------
    def _connect(
        self,
        target_key: str,
        source_cluster: Cluster,
        target: Optional[TableEntity],
        source: Optional[TableEntity],
        column: Optional[ColumnEntity],
        cardinality: str,
    ) -> Optional[GraphEdge]:
        """Create the key node, the column node and the edge between them.

        The target cluster (keyed by *target_key*) is only created once the
        target is known to have a primary key.
        """
        if target is None:
            raise PreconditionViolation("target table is None")
        if source is None:
            raise PreconditionViolation("source table is None")
        if column is None:
            raise PreconditionViolation("lookup column is None")

        if not target.primary_column:
            self.diagnostics.warn(
                diag.MISSING_PRIMARY_KEY,
                target.name,
                f"primary key column is missing for table {target.name}, "
                f"referenced by {source.name}.{column.display_name}",
            )
            return None

        target_cluster = self._table_cluster(target_key, target)
        color = self.colors.color_for(column.logical_name)

        key_node = target_cluster.get_or_add_node(
            sanitize(f"{target.name}-{target.primary_column}")
        )
        key_node.set_attribute("label", sanitize(f"{target.primary_column} (Key)"))
        key_node.set_attribute("fillcolor", color)

        column_node = source_cluster.get_or_add_node(
            sanitize(f"{source.name}-{column.display_name}")
        )
        column_node.set_attribute("label", sanitize(column.display_name))
        column_node.set_attribute("fillcolor", color)

        edge = self.graph.get_or_add_edge(
            column_node,
            key_node,
            f"Lookup {source.localized_name} - {column.display_name} - {column.logical_name}",
        )
        edge.set_attribute("color", color)
        edge.set_attribute("penwidth", EDGE_PENWIDTH)
        edge.set_attribute("label", cardinality)
        return edge

    def _table_cluster(
        self, key_name: str, table: TableEntity, color: Optional[str] = None
    ) -> Cluster:
        cluster = self.graph.get_or_add_cluster(sanitize(f"cluster_{key_name}"))
        cluster.set_attribute("label", table.label)
        if color is not None:
            cluster.set_attribute("color", color)
        return cluster

    @staticmethod
    def _new_root_graph(name: str, rankdir: str, fontname: str) -> RootGraph:
        graph = RootGraph(name=sanitize(name))
        graph.graph_attr.update(
            compound="true",
            color=DEFAULT_COLOR,
            style="filled",
            fillcolor="white",
            label=" ",
            rankdir=rankdir,
            fontname=fontname,
            penwidth="1",
        )
        graph.node_attr.update(
            shape="rectangle",
            color=DEFAULT_COLOR,
            style="filled",
            fillcolor="white",
            label="",
            fontname=fontname,
            fontcolor="#ffffff",
            penwidth="1",
        )
        graph.edge_attr.update(color=DEFAULT_COLOR, penwidth="1")
        return graph

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def _find_table_ci(self, name: Optional[str]) -> Optional[TableEntity]:
        if name is None:
            return None
        wanted = name.lower()
        return next((t for t in self.tables if t.name.lower() == wanted), None)

    def _find_table(self, name: Optional[str]) -> Optional[TableEntity]:
        if name is None:
            return None
        return next((t for t in self.tables if t.name == name), None)

    def _find_relationship_by_attribute(self, name: str) -> Optional[EntityRelationship]:
        wanted = name.lower()
        return next(
            (
                r for r in self.relationships
                if r.referencing_attribute_name is not None
                and r.referencing_attribute_name.lower() == wanted
            ),
            None,
        )
