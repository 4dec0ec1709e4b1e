from dataclasses import dataclass, field
from typing import List


@dataclass
class EnumDef:
    """A JDL enum. Values keep declaration order, duplicates included."""

    name: str
    values: List[str] = field(default_factory=list)

    def __repr__(self):
        return f"<Enum {self.name} {self.values}>"
