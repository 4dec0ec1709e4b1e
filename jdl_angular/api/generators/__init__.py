"""Code generators for entity and enum output files."""

from .entity_generator import ENTITY_TEMPLATES, entity_output_dir, generate_entity_files
from .enum_generator import ENUM_TEMPLATE, generate_enum_file

__all__ = [
    "ENTITY_TEMPLATES",
    "entity_output_dir",
    "generate_entity_files",
    "ENUM_TEMPLATE",
    "generate_enum_file",
]
