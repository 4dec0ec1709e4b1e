"""
Main entry point for Angular code generation.

Builds every render context from the parsed model first, then renders
one set of files per entity and one file per enum:

    <out>/entities/<entity>/...   model, routes, service, form, list
    <out>/enums/<enum>.model.ts
"""

from pathlib import Path
from typing import List

from ..language import JdlModel, build_render_contexts
from ..templates import ANGULAR_TEMPLATES_DIR, make_env
from .builders import PluralStyle
from .gen_logging import get_logger, log_step
from .generators import generate_entity_files, generate_enum_file

logger = get_logger(__name__)


def render_domain_files(model: JdlModel, config, templates_dir: Path = ANGULAR_TEMPLATES_DIR) -> List[Path]:
    """
    Render the Angular sources for `model` into `config.output_folder`.

    Args:
        model: Parsed JDL model
        config: GeneratorConfig (output folder, microservice, API host, options)
        templates_dir: Root of the angular templates

    Returns:
        Every written path, entities first, then enums.
    """
    out_dir = Path(config.output_folder)
    plural_style = getattr(config, "plural_style", PluralStyle.NAIVE)
    strict = getattr(config, "strict", False)

    entity_contexts, enum_contexts = build_render_contexts(
        model, plural_style=plural_style, strict=strict
    )

    env = make_env(templates_dir)
    written = []

    for ctx in entity_contexts:
        log_step(logger, f"Generating files for entity: {ctx.name}")
        written.extend(generate_entity_files(ctx, config, env, out_dir))

    for ctx in enum_contexts:
        log_step(logger, f"Generating file for enum: {ctx.name}")
        written.append(generate_enum_file(ctx, env, out_dir))

    return written
