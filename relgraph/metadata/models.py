"""Dataclass models describing the relational metadata being diagrammed.

These are plain Python objects loaded once before a build and treated as
read-only while the graph is assembled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RelationshipType(str, Enum):
    ONE_TO_MANY = "OneToMany"
    MANY_TO_MANY = "ManyToMany"


@dataclass
class ColumnEntity:
    logical_name: str
    display_name: str
    is_non_default_lookup: bool = False
    target_table: Optional[str] = None


@dataclass
class TableEntity:
    name: str
    localized_name: str
    primary_column: Optional[str] = None
    columns: list[Optional[ColumnEntity]] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    @property
    def label(self) -> str:
        """Display label used for the table's cluster."""
        return f"{self.localized_name} ({self.name})"

    def contains_non_default_lookup_columns(self) -> bool:
        return any(c is not None and c.is_non_default_lookup for c in self.columns)

    def primary_column_entity(self) -> Optional[ColumnEntity]:
        """Return the column backing :attr:`primary_column`, or ``None``."""
        if not self.primary_column:
            return None
        wanted = self.primary_column.lower()
        for column in self.columns:
            if column is not None and column.logical_name.lower() == wanted:
                return column
        return None


@dataclass
class EntityRelationship:
    relationship_type: RelationshipType
    first_entity_name: Optional[str] = None
    second_entity_name: Optional[str] = None
    referencing_attribute_name: Optional[str] = None
    referenced_entity_name: Optional[str] = None
    name: Optional[str] = None

    @property
    def is_many_to_many(self) -> bool:
        return self.relationship_type == RelationshipType.MANY_TO_MANY
