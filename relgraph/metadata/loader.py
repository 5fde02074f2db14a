"""Load a metadata document (JSON) into :mod:`relgraph.metadata.models`.

Document shape::

    {
      "name": "ContosoSolution",
      "tables": [
        {
          "name": "contact",
          "localized_name": "Contact",
          "primary_column": "contactid",
          "columns": [
            {"logical_name": "account", "display_name": "parentcustomerid",
             "is_non_default_lookup": true}
          ]
        }
      ],
      "relationships": [
        {"relationship_type": "ManyToMany",
         "first_entity_name": "contact", "second_entity_name": "list"}
      ]
    }

The pydantic schemas below double as the request body of the HTTP layer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from relgraph.metadata.models import (
    ColumnEntity,
    EntityRelationship,
    RelationshipType,
    TableEntity,
)


class MetadataError(ValueError):
    """The metadata document is unreadable or does not match the schema."""


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class ColumnSchema(BaseModel):
    logical_name: str
    display_name: Optional[str] = None
    is_non_default_lookup: bool = False
    target_table: Optional[str] = None


class TableSchema(BaseModel):
    name: str
    localized_name: Optional[str] = None
    primary_column: Optional[str] = None
    columns: list[Optional[ColumnSchema]] = Field(default_factory=list)


class RelationshipSchema(BaseModel):
    relationship_type: RelationshipType = RelationshipType.ONE_TO_MANY
    first_entity_name: Optional[str] = None
    second_entity_name: Optional[str] = None
    referencing_attribute_name: Optional[str] = None
    referenced_entity_name: Optional[str] = None
    name: Optional[str] = None


class MetadataDocument(BaseModel):
    name: str = "solution"
    tables: list[TableSchema] = Field(default_factory=list)
    relationships: list[RelationshipSchema] = Field(default_factory=list)

    def to_tables(self) -> list[TableEntity]:
        return [_table_from_schema(t) for t in self.tables]

    def to_relationships(self) -> list[EntityRelationship]:
        return [
            EntityRelationship(
                relationship_type=r.relationship_type,
                first_entity_name=r.first_entity_name,
                second_entity_name=r.second_entity_name,
                referencing_attribute_name=r.referencing_attribute_name,
                referenced_entity_name=r.referenced_entity_name,
                name=r.name,
            )
            for r in self.relationships
        ]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _table_from_schema(table: TableSchema) -> TableEntity:
    columns: list[Optional[ColumnEntity]] = []
    for c in table.columns:
        if c is None:
            columns.append(None)
            continue
        columns.append(
            ColumnEntity(
                logical_name=c.logical_name,
                display_name=c.display_name or c.logical_name,
                is_non_default_lookup=c.is_non_default_lookup,
                target_table=c.target_table,
            )
        )
    return TableEntity(
        name=table.name,
        localized_name=table.localized_name or table.name,
        primary_column=table.primary_column,
        columns=columns,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_document(data: dict[str, Any]) -> MetadataDocument:
    """Validate a decoded JSON object.

    Raises:
        MetadataError: If *data* does not match :class:`MetadataDocument`.
    """
    try:
        return MetadataDocument.model_validate(data)
    except ValidationError as exc:
        raise MetadataError(f"Invalid metadata document: {exc}") from exc


def load_document(path: Union[str, Path]) -> MetadataDocument:
    """Read and validate the metadata document at *path*.

    Raises:
        MetadataError: If the file is missing or unreadable, is not UTF-8 JSON,
            or does not describe a valid document.
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise MetadataError(f"Metadata file not found: {p}") from exc
    except json.JSONDecodeError as exc:
        raise MetadataError(f"Metadata file is not valid JSON: {p} ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise MetadataError(f"Metadata file is not valid UTF-8: {p} ({exc})") from exc
    except OSError as exc:
        raise MetadataError(f"Metadata file cannot be read: {p} ({exc})") from exc
    if not isinstance(raw, dict):
        raise MetadataError(f"Metadata file must contain a JSON object: {p}")
    return parse_document(raw)
