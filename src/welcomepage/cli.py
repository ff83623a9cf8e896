"""CLI interface for Welcome Page."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from welcomepage.config import Config
from welcomepage.core.errors import (
    ConfigurationError,
    DefaultDocumentNotFoundError,
    DocumentNotFoundError,
)

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover welcomepage.toml)",
)
root_directory_option = click.option(
    "--root-directory",
    "-r",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Markdown root directory (overrides config)",
)


@click.group()
def cli() -> None:
    """Welcome Page - Markdown wiki pages served straight from a directory."""


@cli.command()
@config_option
@root_directory_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def serve(
    config_path: Path | None,
    root_directory: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from welcomepage.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    config = _load_config(config_path, root_directory, host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Root directory: {config.require_root_directory()}")

    run_server(config)


@cli.command()
@click.argument("document_id")
@config_option
@root_directory_option
def render(
    document_id: str,
    config_path: Path | None,
    root_directory: Path | None,
) -> None:
    """Render one document to HTML on stdout."""
    from welcomepage.core.renderer import MarkdownRenderer
    from welcomepage.core.store import DocumentStore
    from welcomepage.core.types import DocumentId

    config = _load_config(config_path, root_directory)
    store = DocumentStore(config.require_root_directory())

    try:
        document = store.get_document(DocumentId(document_id))
    except DocumentNotFoundError as e:
        _fail(str(e))

    click.echo(MarkdownRenderer().render(document.content))


@cli.command()
@config_option
@root_directory_option
def default(config_path: Path | None, root_directory: Path | None) -> None:
    """Print the id of the document served for '/'."""
    from welcomepage.core.resolver import DefaultDocumentResolver
    from welcomepage.core.store import DocumentStore

    config = _load_config(config_path, root_directory)
    resolver = DefaultDocumentResolver(DocumentStore(config.require_root_directory()))

    try:
        click.echo(resolver.find_default_id())
    except DefaultDocumentNotFoundError as e:
        _fail(str(e))


def _load_config(
    config_path: Path | None,
    root_directory: Path | None,
    *,
    host: str | None = None,
    port: int | None = None,
) -> Config:
    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            root_directory=root_directory,
        )
        config.require_root_directory()
    except (ConfigurationError, ValueError) as e:
        _fail(str(e))
    return config


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
