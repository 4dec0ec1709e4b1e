"""Render-context builders for entities and enums."""

from .context_builders import (
    PluralStyle,
    pluralize_name,
    RelationshipView,
    EntityContext,
    EnumContext,
    attach_ts_types,
    relationship_view,
    relationships_from,
    visible_fields,
    check_dangling_references,
    build_entity_contexts,
    build_enum_contexts,
)

__all__ = [
    "PluralStyle",
    "pluralize_name",
    "RelationshipView",
    "EntityContext",
    "EnumContext",
    "attach_ts_types",
    "relationship_view",
    "relationships_from",
    "visible_fields",
    "check_dangling_references",
    "build_entity_contexts",
    "build_enum_contexts",
]
