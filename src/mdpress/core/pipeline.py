"""Pipeline step functions: load, render, and export orchestration"""

from functools import partial
from pathlib import Path
from typing import Optional

from mdpress.config import Settings
from mdpress.core.batch import run_all
from mdpress.core.export import write_fragment
from mdpress.core.loader import load_all
from mdpress.core.models import BatchResult, Fragment, Post
from mdpress.core.ports import MarkupConverter, TagFactory, TemplateEngine
from mdpress.core.post import to_fragment
from mdpress.core.render.markdown import MarkdownConverter
from mdpress.core.render.templates import JinjaTemplates
from mdpress.core.utils.log import get_logger


def run_load(settings: Settings, tags: Optional[TagFactory] = None) -> BatchResult[Post]:
    """Parse every post under settings.src."""
    return load_all(settings.src, settings, tags)


def to_fragments(
    posts: list[Post],
    settings: Settings,
    converter: Optional[MarkupConverter] = None,
    templates: Optional[TemplateEngine] = None,
    ) -> BatchResult[Fragment]:
    """Render posts concurrently with the same fail-slow aggregation as loading.

    One converter and template engine are shared by all tasks.
    """
    converter = converter or MarkdownConverter(settings.parser_config)
    templates = templates or JinjaTemplates(settings.templates_dir)
    render = partial(to_fragment, settings=settings, converter=converter, templates=templates)
    return run_all(render, posts, settings.max_workers)


def run_export(fragments: list[Fragment], emit_json: bool = False) -> list[Path]:
    """Write fragments in order. Returns the written HTML paths."""
    return [write_fragment(f, emit_json) for f in fragments]


def run_build(
    settings: Settings,
    tags: Optional[TagFactory] = None,
    converter: Optional[MarkupConverter] = None,
    templates: Optional[TemplateEngine] = None,
    ) -> BatchResult[Path]:
    """Run load -> render -> export. Nothing is written unless every post renders.

    Returns the written paths, or the errors of the first stage that failed.
    """
    log = get_logger(__name__)

    loaded = run_load(settings, tags)
    if not loaded.ok:
        return BatchResult.failure(loaded.errors)

    rendered = to_fragments(loaded.values, settings, converter, templates)
    if not rendered.ok:
        return BatchResult.failure(rendered.errors)

    written = run_export(rendered.values, settings.emit_json)
    log.info("pages written", count=len(written), dest=settings.dest)
    return BatchResult.success(written)
