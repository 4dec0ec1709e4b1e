"""Angular module generation for a single entity."""

from pathlib import Path
from typing import List

from jinja2 import Environment

from ..builders import EntityContext
from ..gen_logging import get_logger, log_generated
from ..utils import to_kebab_case

logger = get_logger(__name__)

# (template relative to templates/angular/_entity_, output relative to the entity folder)
ENTITY_TEMPLATES = [
    ("_entity_.model.ts.jinja",                  "{name}.model.ts"),
    ("_entity_.routes.ts.jinja",                 "{name}.routes.ts"),
    ("service/_entity_.service.ts.jinja",        "service/{name}.service.ts"),
    ("update/_entity_-form.service.ts.jinja",    "update/{name}-form.service.ts"),
    ("form/_entity_-form.component.ts.jinja",    "form/{name}-form.component.ts"),
    ("form/_entity_-form.component.html.jinja",  "form/{name}-form.component.html"),
    ("list/_entity_-list.component.ts.jinja",    "list/{name}-list.component.ts"),
    ("list/_entity_-list.component.html.jinja",  "list/{name}-list.component.html"),
]


def entity_output_dir(out_dir: Path, entity_name: str) -> Path:
    return Path(out_dir) / "entities" / to_kebab_case(entity_name)


def generate_entity_files(ctx: EntityContext, config, env: Environment, out_dir: Path) -> List[Path]:
    """
    Render every entity template for `ctx` under <out>/entities/<kebab-name>/.

    Returns the written paths in template order.
    """
    base_dir = entity_output_dir(out_dir, ctx.name)
    kebab = to_kebab_case(ctx.name)

    template_ctx = {
        "entity": ctx.entity,
        "fields": ctx.fields,
        "relationships": ctx.relationships,
        "entity_name_plural": ctx.name_plural,
        "config": config,
    }

    written = []
    for tmpl_name, pattern in ENTITY_TEMPLATES:
        template = env.get_template(f"_entity_/{tmpl_name}")
        content = template.render(**template_ctx)

        out_path = base_dir / pattern.format(name=kebab)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(content, encoding="utf-8")
        log_generated(logger, out_path)
        written.append(out_path)
    return written
