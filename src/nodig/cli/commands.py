"""CLI command implementations"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from nodig.config import Settings, load_config
from nodig.core.backlinks import extract_backlinks
from nodig.core.export import write_build
from nodig.core.models import NavNode
from nodig.core.navigation import build_navigation_tree
from nodig.core.pipeline import run_build
from nodig.core.plugins import PluginNotFoundError, load_plugins
from nodig.core.vault import load_documents
from nodig.logs import configure_logging


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> NoReturn:
    """Report an error on one stderr line and exit 1; the traceback goes to the DEBUG log."""
    if cause is not None:
        logger.debug("%s", msg, exc_info=cause)
        msg = f"{msg}: {cause}"
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _vault(settings: Settings) -> Path:
    vault = Path(settings.vault_dir)
    if not vault.is_dir():
        _fail(f"Vault directory not found: {vault}")
    return vault


def _echo_tree(nodes: list[NavNode], depth: int = 0) -> None:
    for node in nodes:
        suffix = "/" if node.path is None else ""
        typer.echo(f"{'  ' * depth}{node.name}{suffix}")
        _echo_tree(node.children, depth + 1)


def build_cmd(
    vault: Annotated[Optional[str], typer.Argument(help="Vault directory (default: vault_dir setting)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    plugins: Annotated[Optional[list[str]], typer.Option("--plugin", help="Plugin spec 'module:attribute'; repeatable")] = None,
    slugify: Annotated[Optional[bool], typer.Option("--slugify-urls/--no-slugify-urls", help="Slugify page urls")] = None,
    ):
    """Run the full pipeline: load vault -> transform pages -> write pages and indexes."""
    settings = _settings(overrides={
        "vault_dir": vault, "output_dir": out, "plugins": plugins or None, "slugify_urls": slugify,
    })
    vault_dir = _vault(settings)

    try:
        loaded = load_plugins(settings.plugins)
    except PluginNotFoundError as e:
        _fail(str(e))

    try:
        result = asyncio.run(run_build(vault_dir, loaded, settings.sort_pages, settings.slugify_urls))
    except Exception as e:
        _fail("Build failed", e)

    output_dir = Path(settings.output_dir)
    try:
        write_build(result, output_dir)
    except (OSError, ValueError) as e:
        _fail("Export failed", e)
    for page in result.pages:
        typer.echo(f"  {page.path} -> {page.url}")
    typer.echo(f"Built {len(result.pages)} page(s) to {output_dir}/")


def nav_cmd(
    vault: Annotated[Optional[str], typer.Argument(help="Vault directory (default: vault_dir setting)")] = None,
    ):
    """Print the navigation tree of the vault."""
    settings = _settings(overrides={"vault_dir": vault})
    try:
        docs = load_documents(_vault(settings))
    except (OSError, UnicodeDecodeError) as e:
        _fail("Failed to read vault", e)
    if not docs:
        typer.echo("No markdown files found.")
        raise typer.Exit(1)
    _echo_tree(build_navigation_tree(sorted(d.path for d in docs)))


def backlinks_cmd(
    vault: Annotated[Optional[str], typer.Argument(help="Vault directory (default: vault_dir setting)")] = None,
    ):
    """Print the backlink index ({target: [source paths]}) as JSON."""
    settings = _settings(overrides={"vault_dir": vault})
    try:
        docs = load_documents(_vault(settings))
    except (OSError, UnicodeDecodeError) as e:
        _fail("Failed to read vault", e)
    docs.sort(key=lambda d: d.path)
    typer.echo(json.dumps(extract_backlinks(docs), indent=2, ensure_ascii=False))
