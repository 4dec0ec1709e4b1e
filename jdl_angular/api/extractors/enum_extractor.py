"""Extract `enum Name { A, B (literal), C }` declarations."""

import re
from typing import Dict, List

from ...lib import EnumDef
from ...processors.scanner import scan

ENUM_RE = re.compile(r"enum\s+(\w+)\s*\{([^}]+)\}")


def parse_enum_values(body: str) -> List[str]:
    """
    Split an enum body into value names.

    `VALUE (literal)` keeps only `VALUE`; empty tokens are dropped, so a
    body of only commas and whitespace gives an empty list.
    """
    values = []
    for token in body.strip().split(","):
        name = token.strip().split("(")[0].strip()
        if name:
            values.append(name)
    return values


def extract_enums(text: str, line_map=None) -> Dict[str, EnumDef]:
    """
    Return {name: EnumDef} in declaration order.

    A repeated name replaces the earlier declaration but keeps its slot.
    """
    enums = {}
    for match in scan(ENUM_RE, text, line_map):
        name = match.group(1)
        enums[name] = EnumDef(name=name, values=parse_enum_values(match.group(2)))
    return enums
