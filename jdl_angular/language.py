"""
Model builders for the JDL subset understood by jdl_angular.

    enum Status { ACTIVE, INACTIVE }

    @EnableAudit
    entity Task {
        title String required
        status Status
    }

    relationship ManyToOne { Task(owner) to User }

`build_model_str` runs the whole extraction pipeline over a string;
`build_model` reads the text from a file first. Render contexts are built
from the result by `build_render_contexts`.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from jdl_angular.api.builders import (
    EntityContext,
    EnumContext,
    PluralStyle,
    build_entity_contexts,
    build_enum_contexts,
)
from jdl_angular.api.extractors import extract_entities, extract_enums, extract_relationships
from jdl_angular.errors import JdlSemanticError
from jdl_angular.lib import Entity, EnumDef, Relationship
from jdl_angular.processors import strip_block_comments_mapped


# ------------------------------------------------------------------------------
# Model

@dataclass
class JdlModel:
    """Everything extracted from one JDL document, in declaration order."""

    entities_by_name: Dict[str, Entity] = field(default_factory=dict)
    enums_by_name: Dict[str, EnumDef] = field(default_factory=dict)
    relationships: List[Relationship] = field(default_factory=list)
    filename: Optional[str] = None

    @property
    def entities(self) -> List[Entity]:
        return list(self.entities_by_name.values())

    @property
    def enums(self) -> List[EnumDef]:
        return list(self.enums_by_name.values())

    def get_entity(self, name: str) -> Optional[Entity]:
        return self.entities_by_name.get(name)

    def get_enum(self, name: str) -> Optional[EnumDef]:
        return self.enums_by_name.get(name)

    def is_empty(self) -> bool:
        return not self.entities_by_name


# ------------------------------------------------------------------------------
# Public model builders

def build_model_str(model_str: str, strict: bool = False) -> JdlModel:
    """
    Parse a JDL document held in memory.

    Enums are extracted first so that entity fields can be classified
    against the complete enum set, wherever the enums are declared.
    """
    text, line_map = strip_block_comments_mapped(model_str)

    enums = extract_enums(text, line_map)
    entities = extract_entities(text, enum_names=enums.keys(), strict=strict, line_map=line_map)
    relationships = extract_relationships(text, line_map)

    return JdlModel(
        entities_by_name=entities,
        enums_by_name=enums,
        relationships=relationships,
    )


def build_model(model_path, strict: bool = False) -> JdlModel:
    """Parse a JDL document from a file path."""
    path = Path(model_path)
    content = path.read_text(encoding="utf-8")
    try:
        model = build_model_str(content, strict=strict)
    except JdlSemanticError as e:
        e.filename = str(path)
        raise
    model.filename = str(path)
    return model


def build_render_contexts(
    model: JdlModel,
    plural_style: PluralStyle = PluralStyle.NAIVE,
    strict: bool = False,
) -> Tuple[List[EntityContext], List[EnumContext]]:
    """Assemble one context per entity and one per enum, ready for rendering."""
    entity_contexts = build_entity_contexts(
        model.entities_by_name,
        model.relationships,
        plural_style=plural_style,
        strict=strict,
    )
    enum_contexts = build_enum_contexts(model.enums_by_name)
    return entity_contexts, enum_contexts
