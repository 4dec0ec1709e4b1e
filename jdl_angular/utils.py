from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from jdl_angular.api.extractors import map_to_ts_type
from jdl_angular.lib import AuditMode


def _field_label(f) -> str:
    ts_type = f.ts_type or map_to_ts_type(f.field_type)
    label = f"[bold]{f.field_name}[/bold]: {f.field_type}"
    if ts_type != f.field_type:
        label += f" -> {ts_type}"
    if f.field_type_is_enum:
        label += " [magenta](enum)[/magenta]"
    if f.field_validate_rules:
        label += " " + escape(f"[{' '.join(f.field_validate_rules)}]")
    if f.comment:
        label += f" [dim]// {escape(f.comment)}[/dim]"
    return label


def build_model_tree(model) -> Tree:
    """Summary of a parsed JdlModel: enums, entities with fields, relationships."""
    title = model.filename or "JDL model"
    root = Tree(f"[bold]{title}[/bold]")

    enums = root.add(f"Enums ({len(model.enums)})")
    for e in model.enums:
        enums.add(f"[bold]{e.name}[/bold]: {', '.join(e.values) or '(no values)'}")

    entities = root.add(f"Entities ({len(model.entities)})")
    for ent in model.entities:
        suffix = " [cyan]@EnableAudit[/cyan]" if ent.audit is AuditMode.ENABLED else ""
        node = entities.add(f"[bold]{ent.name}[/bold]{suffix}")
        for f in ent.fields:
            node.add(_field_label(f))

    rels = root.add(f"Relationships ({len(model.relationships)})")
    for rel in model.relationships:
        rels.add(escape(str(rel)))

    return root


def print_model_debug(model, console: Console = None):
    console = console or Console()
    console.print(build_model_tree(model))
