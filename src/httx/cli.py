"""CLI entry point for httx."""

import logging
from pathlib import Path

import click

from httx.collection import collect_requests
from httx.env import list_envs, load_env
from httx.errors import HttxError
from httx.generator.export import EXPORT_FORMATS, export_filename, generate_export
from httx.generator.snippets import SNIPPET_LANGUAGES, generate_snippet
from httx.generator.validator import validate_export
from httx.parser.base import HttpDocument, VariableSources
from httx.parser.curl import curl_to_http, import_curl
from httx.parser.detect import detect_input
from httx.parser.document import parse_document, render_document
from httx.resolver import resolve_document


def _load_document(file_path: Path, fmt: str = "auto") -> HttpDocument:
    """Read a request document or a curl command from a file."""
    text = file_path.read_text(encoding="utf-8")
    if fmt == "auto":
        fmt = detect_input(text)

    if fmt == "curl":
        return import_curl(text)
    return parse_document(text)


def _parse_sets(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    overrides = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}")
        overrides[key] = value
    return overrides


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """httx: parse, import, resolve and export HTTP request documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "http", "curl"]), help="Input format.")
def parse(file_path: Path, fmt: str):
    """Parse a request document (or curl command) and print it as JSON."""
    try:
        doc = _load_document(file_path, fmt)
    except HttxError as e:
        raise click.ClickException(str(e)) from e

    if not doc.has_request_line:
        click.echo(f"Warning: no request line found in {file_path}", err=True)
    click.echo(doc.model_dump_json(indent=2))


@main.command("import-curl")
@click.argument("command", required=False)
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the request document to this file.")
def import_curl_cmd(command: str | None, output: Path | None):
    """Convert a curl command (argument or stdin) into a request document."""
    if command is None:
        command = click.get_text_stream("stdin").read()

    try:
        content = curl_to_http(command)
    except HttxError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Request saved to {output}", err=True)


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--project", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project directory holding .httx/envs.")
@click.option("--env", "env_name", default=None, help="Environment to resolve {{variables}} from.")
@click.option("--set", "overrides", multiple=True, callback=_parse_sets, help="Override a variable or JSON body field (key=value).")
def resolve(file_path: Path, project: Path, env_name: str | None, overrides: dict[str, str]):
    """Substitute variables in a request document and print the result."""
    try:
        environment = load_env(project, env_name) if env_name else {}
        doc = _load_document(file_path)
    except HttxError as e:
        raise click.ClickException(str(e)) from e

    resolved = resolve_document(doc, VariableSources(overrides=overrides, environment=environment))
    click.echo(render_document(resolved))


@main.command()
@click.argument("project", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--format", "fmt", default="postman", type=click.Choice(list(EXPORT_FORMATS)), help="Collection format.")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file. Defaults to a name derived from the collection.")
@click.option("--name", default=None, help="Collection name. Defaults to the project directory name.")
@click.option("--validate", is_flag=True, help="Check that the exported text is well-formed.")
def export(project: Path, fmt: str, output: Path | None, name: str | None, validate: bool):
    """Export all requests in a project as a Postman, Insomnia or OpenAPI collection."""
    name = name or project.resolve().name
    click.echo(f"Collecting requests in {project}...", err=True)
    requests = collect_requests(project)
    click.echo(f"Found {len(requests)} requests.", err=True)

    try:
        content = generate_export(name, requests, fmt)
    except HttxError as e:
        raise click.ClickException(str(e)) from e

    if validate:
        errors = validate_export(content, fmt)
        if errors:
            raise click.ClickException("export is malformed: " + "; ".join(errors))

    output = output or Path(export_filename(name, fmt))
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Exported {len(requests)} requests to {output}", err=True)


@main.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--lang", default="curl", type=click.Choice(list(SNIPPET_LANGUAGES)), help="Snippet language.")
def snippet(file_path: Path, lang: str):
    """Print code that sends the request in FILE_PATH."""
    try:
        doc = _load_document(file_path)
    except HttxError as e:
        raise click.ClickException(str(e)) from e
    click.echo(generate_snippet(doc, lang))


@main.command()
@click.argument("project", type=click.Path(exists=True, file_okay=False, path_type=Path))
def envs(project: Path):
    """List the environments defined in a project."""
    for env_name in list_envs(project):
        click.echo(env_name)
