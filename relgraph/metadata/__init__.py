"""Metadata package — tables, columns and relationships fed into a build."""

from relgraph.metadata.loader import MetadataDocument, MetadataError, load_document, parse_document
from relgraph.metadata.models import ColumnEntity, EntityRelationship, RelationshipType, TableEntity

__all__ = [
    "ColumnEntity",
    "EntityRelationship",
    "RelationshipType",
    "TableEntity",
    "MetadataDocument",
    "MetadataError",
    "load_document",
    "parse_document",
]
