from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class AuditMode(Enum):
    """Whether an entity carries the @EnableAudit annotation."""

    NONE = "none"
    ENABLED = "enabled"


AUDIT_ANNOTATION = "@EnableAudit"


@dataclass
class Field:
    field_name: str
    field_type: str
    field_type_is_enum: bool = False
    field_validate_rules: List[str] = field(default_factory=list)
    comment: Optional[str] = None
    # Filled in by the context builder, never by the extractor.
    ts_type: Optional[str] = None

    @property
    def is_required(self) -> bool:
        return "required" in self.field_validate_rules

    def __repr__(self):
        rules = "".join(f" {r}" for r in self.field_validate_rules)
        return f"<Field {self.field_name}: {self.field_type}{rules}>"


# (name, type) in the order they are appended to an audited entity
AUDIT_FIELD_SPECS = (
    ("createdBy", "String"),
    ("createdDate", "Instant"),
    ("lastModifiedBy", "String"),
    ("lastModifiedDate", "Instant"),
)


def audit_fields() -> List[Field]:
    """Fresh copies of the four audit fields, so entities never share them."""
    return [Field(field_name=name, field_type=type_) for name, type_ in AUDIT_FIELD_SPECS]


@dataclass
class Entity:
    name: str
    fields: List[Field] = field(default_factory=list)
    audit: AuditMode = AuditMode.NONE

    def get_field(self, name: str) -> Optional[Field]:
        for f in self.fields:
            if f.field_name == name:
                return f
        return None

    @property
    def field_names(self) -> List[str]:
        return [f.field_name for f in self.fields]

    def __repr__(self):
        audit = " audited" if self.audit is AuditMode.ENABLED else ""
        return f"<Entity {self.name} fields={self.field_names}{audit}>"
