from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Cardinality(Enum):
    ONE_TO_ONE = "OneToOne"
    MANY_TO_ONE = "ManyToOne"
    ONE_TO_MANY = "OneToMany"
    MANY_TO_MANY = "ManyToMany"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class RelationshipEnd:
    """One side of a relationship: the entity and, optionally, its role field."""

    name: str
    field_name: Optional[str] = None

    def __str__(self):
        if self.field_name:
            return f"{self.name}({self.field_name})"
        return self.name


@dataclass(frozen=True)
class Relationship:
    """
    `relationship <type> { <source> to <target> }`.

    `source` and `target` are the JDL `from` and `to` endpoints.
    """

    type: Cardinality
    source: RelationshipEnd
    target: RelationshipEnd

    def __str__(self):
        return f"{self.type} {{ {self.source} to {self.target} }}"
