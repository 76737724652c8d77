"""CLI interface for navtree.

Command-line tool for rendering site navigation and pagination.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from navtree.config import Config
from navtree.core.resources import Resource
from navtree.core.site import Site


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show skipped tree entries)",
)
def cli(verbose: bool) -> None:
    """navtree - Navigation menus and pagination for documentation sites."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def config_options(func):
    """Add --config and --source-dir options shared by all commands."""
    func = click.option(
        "--source-dir",
        "-s",
        type=click.Path(exists=True, path_type=Path, file_okay=False),
        default=None,
        help="Documentation source directory (overrides config)",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Path to configuration file (default: auto-discover navtree.toml)",
    )(func)
    return func


@cli.command()
@click.argument("page")
@config_options
@click.option(
    "--max-depth",
    "-d",
    type=click.IntRange(min=0),
    default=None,
    help="Deepest directory level to render (overrides config)",
)
@click.option(
    "--show-directory-index/--hide-directory-index",
    default=None,
    help="List directory index pages inside their directory (overrides config)",
)
def render(
    page: str,
    config_path: Path | None,
    source_dir: Path | None,
    max_depth: int | None,
    show_directory_index: bool | None,
) -> None:
    """Print the navigation menu with PAGE as the current page."""
    config = _load_config(
        config_path,
        source_dir=source_dir,
        max_depth=max_depth,
        hide_directory_index=None if show_directory_index is None else not show_directory_index,
    )
    site = _load_site(config)
    navigation = site.render_navigation(_require_page(site, page))
    click.echo(f"<ul>{navigation.html}</ul>")


@cli.command()
@click.argument("page")
@config_options
def paginate(page: str, config_path: Path | None, source_dir: Path | None) -> None:
    """Print the previous and next links for PAGE."""
    config = _load_config(config_path, source_dir=source_dir)
    site = _load_site(config)
    navigation = site.render_navigation(_require_page(site, page))

    if navigation.previous:
        click.echo(navigation.previous)
    if navigation.next:
        click.echo(navigation.next)


@cli.command()
@config_options
def pages(config_path: Path | None, source_dir: Path | None) -> None:
    """Print all pages in pagination order."""
    config = _load_config(config_path, source_dir=source_dir)
    site = _load_site(config)
    for path in site.page_order():
        click.echo(path)


@cli.command()
@config_options
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
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the navigation API server."""
    from navtree.server import run_server

    config = _load_config(config_path, source_dir=source_dir, host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if config.docs.tree_file is not None:
        click.echo(f"Tree file: {config.docs.tree_file}")

    run_server(config)


def _load_config(config_path: Path | None, **overrides) -> Config:
    """Load configuration and apply CLI overrides, exiting on errors."""
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    return config.with_overrides(**overrides)


def _load_site(config: Config) -> Site:
    try:
        return Site.load(config)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


def _require_page(site: Site, page: str) -> Resource:
    """Resolve the current page or exit with an error."""
    resource = site.get_page(page)
    if resource is None:
        _fail(f"Page not found: {page}")
    return resource


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
