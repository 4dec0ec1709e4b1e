from pathlib import Path
import click

from datetime import date
from pydantic import ValidationError
from rich.console import Console

from jdl_angular.api.builders import PluralStyle
from jdl_angular.api.gen_logging import configure_gen_logging
from jdl_angular.api.generator import render_domain_files
from jdl_angular.config import GeneratorConfig
from jdl_angular.errors import JdlError
from jdl_angular.language import build_model, build_render_contexts
from jdl_angular.utils import print_model_debug

console = Console()


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def _prompt_api_host() -> str:
    return click.prompt(
        "Enter API host (optional, leave blank for relative paths from /)",
        default="",
        show_default=False,
    )


@click.group()
@click.version_option(package_name="jdl-angular")
@click.pass_context
def cli(context):
    context.ensure_object(dict)


@cli.command("validate", help="Parse a JDL file and check it can be assembled.")
@click.pass_context
@click.argument("jdl_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Fail on malformed fields and unknown relationship targets.")
def validate(context, jdl_file, strict):
    configure_gen_logging(quiet=True)
    try:
        model = build_model(jdl_file, strict=strict)
        build_render_contexts(model, strict=strict)
        console.print(
            f"{_stamp()} Model validation success! "
            f"{len(model.entities)} entities, {len(model.enums)} enums, "
            f"{len(model.relationships)} relationships.",
            style="green",
        )
    except (JdlError, OSError) as e:
        console.print(f"{_stamp()} Validation failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("inspect", help="Parse and print a summary of the model (enums, entities, relationships).")
@click.pass_context
@click.argument("jdl_file", type=click.Path(exists=True, dir_okay=False))
def inspect_cmd(context, jdl_file):
    configure_gen_logging(quiet=True)
    try:
        model = build_model(jdl_file)
        build_render_contexts(model)
        print_model_debug(model, console=console)
    except (JdlError, OSError) as e:
        console.print(f"{_stamp()} Inspect failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


@cli.command("generate", help="Generate Angular entity modules from a JDL file.")
@click.pass_context
@click.argument("jdl_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_folder", type=click.Path(file_okay=False))
@click.option("--microservice", "-m", default=None, help="Name of the microservice for API paths.")
@click.option("--api-host", "-h", "api_host", default=None,
              help="The base host for the API (e.g. https://api.yourdomain.com).")
@click.option(
    "--plural-style",
    type=click.Choice([s.value for s in PluralStyle], case_sensitive=False),
    default=None,
    help="How other-entity names are pluralized (default: naive).",
)
@click.option("--strict", is_flag=True,
              help="Fail on malformed fields and unknown relationship targets.")
@click.option("--verbose", "-v", is_flag=True, help="Log every generated file.")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors.")
def generate(context, jdl_file, output_folder, microservice, api_host, plural_style, strict, verbose, quiet):
    configure_gen_logging(verbose=verbose, quiet=quiet)

    # Only pass what was given, so JDL_* environment variables fill the rest.
    overrides = {
        "microservice": microservice,
        "api_host": api_host,
        "plural_style": plural_style.lower() if plural_style else None,
        "strict": strict or None,
    }
    try:
        config = GeneratorConfig(
            jdl_file=jdl_file,
            output_folder=output_folder,
            **{k: v for k, v in overrides.items() if v is not None},
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        console.print(f"{_stamp()} Invalid configuration: {problems}", style="red")
        context.exit(2)

    if config.api_host is None:
        config.api_host = _prompt_api_host()

    try:
        console.print(f"{_stamp()} Parsing JDL file: {config.jdl_file}", style="blue")
        model = build_model(config.jdl_file, strict=config.strict)

        if model.is_empty():
            console.print(f"{_stamp()} No entities found in the JDL file. Exiting.", style="red")
            context.exit(1)

        out_path = Path(config.output_folder).resolve()
        console.print(f"{_stamp()} Generating Angular app in '{out_path}'...", style="blue")
        written = render_domain_files(model, config)

        console.print(
            f"{_stamp()} Angular structure generated successfully! ({len(written)} files)",
            style="green",
        )
    except (JdlError, OSError) as e:
        console.print(f"{_stamp()} Generate failed with error(s): {e}", style="red")
        context.exit(1)
    else:
        context.exit(0)


def main():
    cli(prog_name="jdl-angular")


if __name__ == "__main__":
    main()
