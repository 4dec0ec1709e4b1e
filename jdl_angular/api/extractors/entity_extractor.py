"""
Extract entity declarations and their fields.

    @EnableAudit
    entity Order {
        reference String required maxlength(20)  // shown to customers
        status OrderStatus
    }

Each body line is `<name> <type> <rest>`; `<rest>` holds validation tokens,
optionally followed by `// comment`. Lines that do not fit are dropped,
unless `strict` is set.
"""

import re
from typing import Callable, Collection, Dict, List, Optional, Tuple

from ...errors import MalformedFieldError
from ...lib import AUDIT_ANNOTATION, AuditMode, Entity, Field, audit_fields
from ...processors.comments import LINE_COMMENT, LineMap, column_number, line_number
from ...processors.scanner import scan
from ..gen_logging import get_logger, log_skip, log_step

logger = get_logger(__name__)

ENTITY_RE = re.compile(r"(?:@EnableAudit\s+)?entity\s+(\w+)\s*\{([^}]+)\}")
FIELD_RE = re.compile(r"^(\w+)\s+([\w<>]+)(.*)")


def audit_mode_of(declaration: str) -> AuditMode:
    if declaration.strip().startswith(AUDIT_ANNOTATION):
        return AuditMode.ENABLED
    return AuditMode.NONE


def split_rules_and_comment(rest: str) -> Tuple[List[str], Optional[str]]:
    """
    Split the text after `<name> <type>` at the first `//`.

    Returns (validation tokens, comment or None).
    """
    validations = rest
    comment = None
    idx = rest.find(LINE_COMMENT)
    if idx != -1:
        validations = rest[:idx]
        comment = rest[idx + len(LINE_COMMENT):].strip()
    return validations.split(), comment


def parse_field_line(line: str, enum_names: Collection[str]) -> Optional[Field]:
    """Parse one trimmed body line, or return None when it is not a field."""
    match = FIELD_RE.match(line)
    if not match:
        return None

    field_name, field_type, rest = match.group(1), match.group(2), match.group(3)
    rules, comment = split_rules_and_comment(rest or "")
    return Field(
        field_name=field_name,
        field_type=field_type,
        field_type_is_enum=field_type in enum_names,
        field_validate_rules=rules,
        comment=comment,
    )


def apply_audit_mode(entity: Entity) -> None:
    """Append the audit fields after the declared ones when auditing is on."""
    if entity.audit is AuditMode.NONE:
        return
    log_step(logger, f"Audit fields enabled for entity: {entity.name}")
    entity.fields.extend(audit_fields())


def parse_entity_body(
    name: str,
    body: str,
    enum_names: Collection[str],
    strict: bool = False,
    body_line: int = 1,
    locate: Optional[Callable[[int], Tuple[int, int]]] = None,
) -> List[Field]:
    """
    Parse the text between the braces of one entity.

    In strict mode a malformed line raises with its (line, col). `locate`
    maps an offset inside `body` to that pair; without it lines are
    counted from `body_line`.
    """
    fields = []
    line_start = 0
    for raw in body.split("\n"):
        at = line_start + len(raw) - len(raw.lstrip())
        line_start += len(raw) + 1

        line = raw.strip()
        if not line or line.startswith(LINE_COMMENT):
            continue

        field = parse_field_line(line, enum_names)
        if field is None:
            if strict:
                if locate is not None:
                    line_no, col = locate(at)
                else:
                    line_no, col = body_line + body.count("\n", 0, at), column_number(body, at)
                raise MalformedFieldError(name, line, line=line_no, col=col)
            log_skip(logger, f"Not a field in {name}: {line!r}")
            continue
        fields.append(field)
    return fields


def _body_locator(text: str, body_start: int, line_map: Optional[LineMap]):
    def locate(at: int) -> Tuple[int, int]:
        index = body_start + at
        line = line_map.line(index) if line_map is not None else line_number(text, index)
        return line, column_number(text, index)
    return locate


def extract_entities(
    text: str,
    enum_names: Collection[str],
    strict: bool = False,
    line_map: Optional[LineMap] = None,
) -> Dict[str, Entity]:
    """
    Return {name: Entity} in declaration order.

    `enum_names` must already cover the whole document, otherwise fields
    typed with a later enum would be misclassified. A repeated entity name
    replaces the earlier declaration but keeps its slot. `line_map` turns
    reported line numbers into lines of the text before block comments
    were stripped.
    """
    entities = {}
    for match in scan(ENTITY_RE, text, line_map):
        name = match.group(1)
        entity = Entity(
            name=name,
            fields=parse_entity_body(
                name,
                match.group(2),
                enum_names,
                strict,
                locate=_body_locator(text, match.start(2), line_map),
            ),
            audit=audit_mode_of(match.group(0)),
        )
        apply_audit_mode(entity)
        entities[name] = entity
    return entities
