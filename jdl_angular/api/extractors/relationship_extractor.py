"""Extract `relationship <Cardinality> { A(role) to B(role) }` declarations."""

import re
from typing import List

from ...lib import Cardinality, Relationship, RelationshipEnd
from ...processors.scanner import scan

_CARDINALITIES = "|".join(c.value for c in Cardinality)

RELATIONSHIP_RE = re.compile(
    rf"relationship\s+({_CARDINALITIES})\s*\{{"
    r"\s*(\w+)(?:\((\w+)\))?"
    r"\s+to\s+"
    r"(\w+)(?:\((\w+)\))?\s*\}"
)


def extract_relationships(text: str, line_map=None) -> List[Relationship]:
    """All relationships in declaration order. Duplicates are kept."""
    return [
        Relationship(
            type=Cardinality(match.group(1)),
            source=RelationshipEnd(name=match.group(2), field_name=match.group(3)),
            target=RelationshipEnd(name=match.group(4), field_name=match.group(5)),
        )
        for match in scan(RELATIONSHIP_RE, text, line_map)
    ]
