"""CLI entry point for api-extractor."""

from pathlib import Path

import click

from api_extractor.config import ExtractorConfig, add_ignore, load_config, save_config
from api_extractor.exceptions import ExtractorError
from api_extractor.loader import fetch_document, load_document
from api_extractor.parser.tree import transform_document, tree_to_dict
from api_extractor.writer import write_json


@click.group()
def main():
    """API Extractor — turn Swagger API docs into a nested endpoint tree."""
    pass


@main.command()
def init():
    """Create the project config file interactively."""
    defaults = ExtractorConfig()
    answers = {
        "server_address": click.prompt(
            "Server address of the API (e.g. http://localhost:8080)",
            default="", show_default=False,
        ),
        "output_dir": click.prompt(
            "Output directory, relative to the project root (e.g. apiResult/api)",
            default="", show_default=False,
        ),
        "file_name": click.prompt(
            "Output file name, without extension",
            default="", show_default=False,
        ),
    }
    # Blank answers keep the defaults
    config = defaults.model_copy(update={k: v for k, v in answers.items() if v})

    cwd = Path.cwd()
    add_ignore(cwd)
    path = save_config(config, cwd)
    click.echo(f"Config saved to {path}")


@main.command()
@click.option("--source", default=None, help="URL or file path of the API document (defaults to the configured server).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output JSON file path.")
def extract(source: str | None, output: Path | None):
    """Fetch the API document and write the endpoint tree as JSON."""
    cwd = Path.cwd()
    try:
        config = load_config(cwd) if source is None or output is None else None

        if source is None:
            click.echo(f"Fetching {config.docs_url}...")
            doc = fetch_document(config.docs_url)
        else:
            click.echo(f"Loading {source}...")
            doc = load_document(source)

        tree = transform_document(doc)
        click.echo(f"Found {len(tree)} top-level path segments.")

        path = write_json(tree_to_dict(tree), output or config.output_path(cwd))
    except ExtractorError as e:
        click.secho(str(e), fg="red", err=True)
        raise SystemExit(e.exit_code)

    click.secho(f"Extraction succeeded! See {path}", fg="green")
