"""
Render-context builders.

Joins the extracted entities, enums and relationships into the contexts
handed to the templates. This is a projection over data that is already
extracted: apart from attaching `ts_type` to fields nothing in the model
is changed, and relationship views reference the original records.
"""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List

from ...errors import DanglingReferenceError, DanglingReferenceWarning
from ...lib import Cardinality, Entity, EnumDef, Field, Relationship
from ..extractors import map_to_ts_type
from ..gen_logging import get_logger, log_warn
from ..utils import english_plural, naive_plural, to_camel_case, to_kebab_case, to_pascal_case

logger = get_logger(__name__)


class PluralStyle(Enum):
    NAIVE = "naive"        # lower-case + "s", the historical behaviour
    ENGLISH = "english"    # English inflection rules, opt-in


@dataclass(frozen=True)
class RelationshipView:
    """A relationship as seen from its source entity, with display names."""

    relationship: Relationship
    other_entity_name: str
    other_entity_name_pascal_case: str
    other_entity_name_plural: str

    @property
    def type(self):
        return self.relationship.type

    @property
    def source(self):
        return self.relationship.source

    @property
    def target(self):
        return self.relationship.target

    @property
    def field_name(self):
        """The role field on the source entity, if the JDL named one."""
        return self.relationship.source.field_name

    @property
    def property_name(self) -> str:
        """Property holding the other side: the role field, else the camel-cased entity."""
        return self.field_name or to_camel_case(self.other_entity_name)

    @property
    def to_many(self) -> bool:
        return self.type in (Cardinality.ONE_TO_MANY, Cardinality.MANY_TO_MANY)


@dataclass
class EntityContext:
    entity: Entity
    relationships: List[RelationshipView] = field(default_factory=list)
    # kebab-cased plural used for the REST resource path
    name_plural: str = ""
    # declared fields left after relationship properties claim their names
    fields: List[Field] = field(default_factory=list)

    @property
    def name(self):
        return self.entity.name


@dataclass
class EnumContext:
    enum_def: EnumDef

    @property
    def name(self):
        return self.enum_def.name


def pluralize_name(name: str, plural_style: PluralStyle = PluralStyle.NAIVE) -> str:
    if plural_style is PluralStyle.ENGLISH:
        return english_plural(name)
    return naive_plural(name)


def attach_ts_types(entity: Entity) -> None:
    for f in entity.fields:
        f.ts_type = map_to_ts_type(f.field_type)


def relationship_view(rel: Relationship, plural_style: PluralStyle = PluralStyle.NAIVE) -> RelationshipView:
    other = rel.target.name
    return RelationshipView(
        relationship=rel,
        other_entity_name=other,
        other_entity_name_pascal_case=to_pascal_case(other),
        other_entity_name_plural=pluralize_name(other, plural_style),
    )


def visible_fields(entity: Entity, views: List[RelationshipView]) -> List[Field]:
    """
    Declared fields of `entity` minus those named like one of its relationship
    properties. The relationship wins; each dropped field is logged.
    """
    taken = {view.property_name for view in views}
    fields = []
    for f in entity.fields:
        if f.field_name in taken:
            log_warn(
                logger,
                f"Field {entity.name}.{f.field_name} is replaced by the relationship property of the same name",
            )
            continue
        fields.append(f)
    return fields


def relationships_from(
    entity_name: str,
    relationships: Iterable[Relationship],
    plural_style: PluralStyle = PluralStyle.NAIVE,
) -> List[RelationshipView]:
    """Views of the relationships declared with `entity_name` on the `from` side, in order."""
    return [
        relationship_view(rel, plural_style)
        for rel in relationships
        if rel.source.name == entity_name
    ]


def check_dangling_references(
    entity_names: Iterable[str],
    relationships: Iterable[Relationship],
    strict: bool = False,
) -> List[Relationship]:
    """
    Report relationships whose endpoints name no known entity.

    Warns (DanglingReferenceWarning) and returns the offenders; with
    `strict` the first offender raises DanglingReferenceError instead.
    """
    known = set(entity_names)
    dangling = []
    for rel in relationships:
        for end in (rel.source, rel.target):
            if end.name in known:
                continue
            if strict:
                raise DanglingReferenceError(rel, end.name)
            message = f"Relationship {rel} references unknown entity '{end.name}'"
            log_warn(logger, message)
            warnings.warn(message, DanglingReferenceWarning, stacklevel=2)
            dangling.append(rel)
            break
    return dangling


def build_entity_contexts(
    entities: Dict[str, Entity],
    relationships: List[Relationship],
    plural_style: PluralStyle = PluralStyle.NAIVE,
    strict: bool = False,
) -> List[EntityContext]:
    check_dangling_references(entities.keys(), relationships, strict=strict)

    contexts = []
    for entity in entities.values():
        attach_ts_types(entity)
        views = relationships_from(entity.name, relationships, plural_style)
        contexts.append(
            EntityContext(
                entity=entity,
                relationships=views,
                name_plural=pluralize_name(to_kebab_case(entity.name), plural_style),
                fields=visible_fields(entity, views),
            )
        )
    return contexts


def build_enum_contexts(enums: Dict[str, EnumDef]) -> List[EnumContext]:
    return [EnumContext(enum_def=e) for e in enums.values()]
