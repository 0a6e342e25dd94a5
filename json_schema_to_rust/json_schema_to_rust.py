import json
from pathlib import Path

import click

from .cli_utils import STDIO_PATH
from .logging_config import configure_logging
from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    JsonSchemaGenError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)


def load_config(config_path: str | None) -> CodeGeneratorConfig:
    if config_path is None:
        return CodeGeneratorConfig()
    with open(config_path, encoding="utf-8") as f:
        return CodeGeneratorConfig.from_dict(json.load(f))


def write_output(path: Path, code: str, output_config: OutputConfig) -> None:
    """Write generated code to a file according to the output policy."""
    writer = AtomicWriter()
    validate = output_config.validate_before_write

    if output_config.atomic_write:
        if output_config.mode == OutputMode.FORCE:
            writer.write(path, code, validate)
        else:
            writer.write_if_not_exists(path, code, validate)
        return

    if output_config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
        raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")
    if validate:
        writer.validate(code)
    path.write_text(code, encoding="utf-8")


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root struct name when the schema has no title")
@click.option(
    "--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True)
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on unknown or unsupported schema features instead of skipping them",
)
@click.option("--uuid", "use_uuid", is_flag=True, default=False, help='Map strings with format "uuid" to uuid::Uuid')
@click.option("--format", "format_code", is_flag=True, default=False, help="Run rustfmt on the generated code")
@click.option("--force", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log analysis details to stderr")
@click.argument(
    "path", default=STDIO_PATH, type=click.Path(exists=True, dir_okay=False, allow_dash=True, resolve_path=True)
)
@click.argument("output", default=STDIO_PATH, type=click.Path(dir_okay=False, allow_dash=True, resolve_path=True))
def json_schema_to_rust(name, config, strict, use_uuid, format_code, force, verbose, path, output):
    """Generate serde-annotated Rust structs from the JSON Schema at PATH (default stdin)."""
    configure_logging(verbose)

    try:
        generator_config = load_config(config)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid config file {config}: {e}") from e

    # CLI flags override the config file
    if strict:
        generator_config.deny_invalid_unknown_json_schema = True
    if use_uuid:
        generator_config.use_uuid_format = True
    if format_code:
        generator_config.formatter.enabled = True
    if force:
        generator_config.output.mode = OutputMode.FORCE

    if path == STDIO_PATH:
        schema_text = click.get_text_stream("stdin").read()
    else:
        schema_text = Path(path).read_text(encoding="utf-8")

    try:
        code = PipelineGenerator(schema_text, generator_config, name).generate()
        if output == STDIO_PATH:
            click.echo(code, nl=False)
        else:
            write_output(Path(output), code, generator_config.output)
    except (JsonSchemaGenError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
