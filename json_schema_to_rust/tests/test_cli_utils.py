import click
from click.testing import CliRunner

from json_schema_to_rust.cli_utils import PROGRAM_NAME, reconstruct_command_line


def test_without_context_returns_program_name():
    assert reconstruct_command_line(click.Command("noop")) == PROGRAM_NAME


@click.command()
@click.option("--name", "-n", default=None)
@click.option("--strict", is_flag=True, default=False)
@click.option("--edition", default="2021")
@click.argument("path", default="-")
@click.argument("output", default="-")
def echo_command(name, strict, edition, path, output):
    click.echo(reconstruct_command_line(echo_command))


def run(*args):
    result = CliRunner().invoke(echo_command, list(args))
    assert result.exit_code == 0, result.output
    return result.output.strip()


def test_all_defaults():
    assert run() == PROGRAM_NAME


def test_trailing_default_arguments_are_dropped():
    assert run("schema.json") == f"{PROGRAM_NAME} schema.json"


def test_dash_is_kept_before_a_non_default_argument():
    assert run("-", "out.rs") == f"{PROGRAM_NAME} - out.rs"


def test_options_after_arguments():
    assert run("schema.json", "--strict", "-n", "Root") == f"{PROGRAM_NAME} schema.json --name Root --strict"


def test_option_at_default_is_skipped():
    assert run("--edition", "2021") == PROGRAM_NAME
    assert run("--edition", "2018") == f"{PROGRAM_NAME} --edition 2018"


def test_existing_paths_are_reduced_to_file_names(tmp_path):
    schema = tmp_path / "nested" / "schema.json"
    schema.parent.mkdir()
    schema.write_text("{}")
    assert run(str(schema)) == f"{PROGRAM_NAME} schema.json"
