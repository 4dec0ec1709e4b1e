"""Plain data types produced by the JDL extractors."""

from .entity import AUDIT_ANNOTATION, AUDIT_FIELD_SPECS, AuditMode, Entity, Field, audit_fields
from .enum_def import EnumDef
from .relationship import Cardinality, Relationship, RelationshipEnd

__all__ = [
    "AUDIT_ANNOTATION",
    "AUDIT_FIELD_SPECS",
    "AuditMode",
    "Entity",
    "Field",
    "audit_fields",
    "EnumDef",
    "Cardinality",
    "Relationship",
    "RelationshipEnd",
]
