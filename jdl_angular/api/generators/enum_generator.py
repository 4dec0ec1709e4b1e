"""TypeScript enum generation."""

from pathlib import Path

from jinja2 import Environment

from ..builders import EnumContext
from ..gen_logging import get_logger, log_generated
from ..utils import to_kebab_case

logger = get_logger(__name__)

ENUM_TEMPLATE = "enums/_enum_.model.ts.jinja"


def generate_enum_file(ctx: EnumContext, env: Environment, out_dir: Path) -> Path:
    """Render <out>/enums/<kebab-name>.model.ts for one enum."""
    content = env.get_template(ENUM_TEMPLATE).render(enum_def=ctx.enum_def)

    out_path = Path(out_dir) / "enums" / f"{to_kebab_case(ctx.name)}.model.ts"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")
    log_generated(logger, out_path)
    return out_path
