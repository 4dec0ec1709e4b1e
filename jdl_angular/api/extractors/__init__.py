"""Model extraction utilities."""

from .enum_extractor import extract_enums, parse_enum_values
from .entity_extractor import (
    extract_entities,
    parse_entity_body,
    parse_field_line,
    split_rules_and_comment,
)
from .relationship_extractor import extract_relationships
from .type_mapper import map_to_ts_type, is_date_type, TS_TYPE_MAP

__all__ = [
    "extract_enums",
    "parse_enum_values",
    "extract_entities",
    "parse_entity_body",
    "parse_field_line",
    "split_rules_and_comment",
    "extract_relationships",
    "map_to_ts_type",
    "is_date_type",
    "TS_TYPE_MAP",
]
