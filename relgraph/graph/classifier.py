"""Relationship classification helpers.

Many-to-many relationships are declared twice in the metadata (A -> B and
B -> A).  Only the first-entity side of each declaration is used when
drawing edges, so a pair of tables yields one edge, not two.

Names are compared exactly here; callers must use the same casing when
they look table names up in the returned set.
"""

from __future__ import annotations

from typing import Iterable, Optional

from relgraph.metadata.models import EntityRelationship


def split_relationships(
    relationships: Iterable[EntityRelationship],
) -> tuple[list[EntityRelationship], list[EntityRelationship]]:
    """Partition *relationships* into ``(one_to_many, many_to_many)``, keeping order."""
    one_to_many: list[EntityRelationship] = []
    many_to_many: list[EntityRelationship] = []
    for rel in relationships:
        (many_to_many if rel.is_many_to_many else one_to_many).append(rel)
    return one_to_many, many_to_many


def many_to_many_first_entities(relationships: Iterable[EntityRelationship]) -> set[str]:
    """Return the first-entity names of every many-to-many relationship."""
    return {
        rel.first_entity_name
        for rel in relationships
        if rel.is_many_to_many and rel.first_entity_name is not None
    }


def find_paired_entity(
    relationships: Iterable[EntityRelationship], table_name: str
) -> Optional[str]:
    """Second-entity name of the first relationship whose first entity is *table_name*."""
    for rel in relationships:
        if rel.first_entity_name == table_name:
            return rel.second_entity_name
    return None
