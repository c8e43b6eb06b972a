"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from mdpress.config import Settings, load_config
from mdpress.core.errors import BuildError
from mdpress.core.pipeline import run_build, run_load
from mdpress.core.utils.log import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)
    setup_logging(settings.log_level)
    return settings


def _fail_batch(errors: list[BuildError]) -> None:
    """Report every collected error, one per line, and exit 1."""
    for e in errors:
        typer.echo(f"  [{e.kind.value}] {e}", err=True)
    _fail(f"{len(errors)} file(s) failed")


def build_cmd(
    src: Annotated[Optional[str], typer.Argument(help="Project source root (contains posts/)")] = None,
    dest: Annotated[Optional[str], typer.Option("--dest", help="Destination root")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="Base URL of the site")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Worker threads per batch")] = None,
    emit_json: Annotated[Optional[bool], typer.Option("--json/--no-json", help="Write metadata JSON sidecars")] = None,
    ):
    """Run the full pipeline: load -> render -> write."""
    settings = _settings(overrides={
        "src": src, "dest": dest, "base_url": base_url,
        "max_workers": workers, "emit_json": emit_json,
    })

    result = run_build(settings)
    if not result.ok:
        _fail_batch(result.errors)

    for path in result.values:
        typer.echo(f"  {path}")
    typer.echo(f"Built {len(result.values)} page(s) to {settings.dest}/")


def check_cmd(
    src: Annotated[Optional[str], typer.Argument(help="Project source root (contains posts/)")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Worker threads per batch")] = None,
    ):
    """Parse every post header and report all problems without writing anything."""
    settings = _settings(overrides={"src": src, "max_workers": workers})

    result = run_load(settings)
    if not result.ok:
        _fail_batch(result.errors)
    typer.echo(f"{len(result.values)} post(s) OK")
