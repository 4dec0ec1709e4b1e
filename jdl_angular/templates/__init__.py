from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from jdl_angular.api.extractors import is_date_type
from jdl_angular.api.utils import to_camel_case, to_kebab_case, to_pascal_case

TEMPLATES_DIR = Path(__file__).parent
ANGULAR_TEMPLATES_DIR = TEMPLATES_DIR / "angular"


def _ts_default(ts_type: str) -> str:
    """Initial value for a form control of the given TypeScript type."""
    return {
        "boolean": "false",
    }.get(ts_type, "null")


def make_env(templates_dir: Path = ANGULAR_TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(disabled_extensions=("jinja",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["kebab_case"] = to_kebab_case
    env.filters["camel_case"] = to_camel_case
    env.filters["pascal_case"] = to_pascal_case
    env.filters["ts_default"] = _ts_default
    env.tests["date_type"] = is_date_type
    return env
