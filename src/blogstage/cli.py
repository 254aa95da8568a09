"""CLI interface for Blogstage.

Command-line tool for resolving site URIs and serving the resolve API.
"""

import json
import logging
from pathlib import Path

import click

from blogstage.config import Config
from blogstage.core.errors import PathTraversalError, TagOrderError
from blogstage.core.resolver import UriResolver

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover blogstage.toml)",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log resolution details)",
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
def cli() -> None:
    """Blogstage - URI resolution for blog-aware static sites."""


@cli.command()
@click.argument("uri", default="")
@_config_option
@_verbose_option
def resolve(uri: str, config_path: Path | None, verbose: bool) -> None:
    """Show what URI resolves to, as JSON."""
    _setup_logging(verbose)
    config = _load_config(config_path)

    try:
        resolver = UriResolver(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    try:
        info = resolver.resolve(uri)
    except PathTraversalError as e:
        raise click.ClickException(f"Page not found: {uri}") from e
    except TagOrderError as e:
        raise click.ClickException(
            f"{e}: {uri} (did you mean {e.canonical_uri}?)"
        ) from e

    if info is None:
        raise click.ClickException(f"Page not found: {uri}")

    click.echo(json.dumps(info.to_dict(), indent=2))


@cli.command()
@_config_option
@click.option(
    "--pages-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Pages source directory (overrides config)",
)
@click.option(
    "--posts-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Posts source directory (overrides config)",
)
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
@_verbose_option
def serve(
    config_path: Path | None,
    pages_dir: Path | None,
    posts_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the resolve API server."""
    from blogstage.server import run_server

    _setup_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        pages_dir=pages_dir,
        posts_dir=posts_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Pages directory: {config.site.pages_dir}")
    click.echo(f"Posts directory: {config.site.posts_dir} ({config.site.posts_fs})")
    click.echo(f"Blogs: {', '.join(config.blog_keys)}")

    try:
        run_server(config, verbose=verbose)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
