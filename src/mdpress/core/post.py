"""Blog posts: load a source file into a Post and render a Post into a Fragment"""

from datetime import datetime
from typing import Any, Optional

from mdpress.config import Settings
from mdpress.core.errors import FileAccessError, RenderError
from mdpress.core.header import ABSENT, Kind, ParsedHeader, parse_header
from mdpress.core.models import Fragment, Post
from mdpress.core.ports import MarkupConverter, TagFactory, TemplateEngine
from mdpress.core.render.links import process_links
from mdpress.core.render.markdown import MarkdownConverter
from mdpress.core.render.tags import TagFactory as DefaultTagFactory
from mdpress.core.render.templates import JinjaTemplates
from mdpress.core.utils.paths import join_path, relative_to, replace_suffix, url_join


POST_SCHEMA: dict[str, Kind] = {
    "title": Kind.string,
    "tags":  Kind.list,
    "date":  Kind.datetime,
}
POST_REQUIRED = ("title",)
POST_TYPE = "post"
OUTPUT_SUFFIX = ".html"
EPOCH = datetime(1970, 1, 1)    # date of posts without a `date` header

METADATA_KEYS = ("title", "date", "raw_date", "tags", "url")


def load_post(path: str, settings: Settings, tags: Optional[TagFactory] = None) -> Post:
    """Read, parse, and build a single post. Raises a BuildError subclass on failure."""
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"cannot read file: {e}", str(path), 0) from e

    header, body = parse_header(content, POST_SCHEMA, POST_REQUIRED, str(path))
    return build_post(str(path), header, body, settings, tags)


def build_post(
    path: str,
    header: ParsedHeader,
    body: str,
    settings: Settings,
    tags: Optional[TagFactory] = None,
    ) -> Post:
    """Derive dates, tags, output path, and URL from a parsed header."""
    tags = tags or DefaultTagFactory()
    raw_tags = [] if header["tags"] is ABSENT else header["tags"]
    raw_date = EPOCH if header["date"] is ABSENT else header["date"]

    filename = relative_to(replace_suffix(path, OUTPUT_SUFFIX), settings.src)

    return Post(
        file=path,
        title=header["title"],
        date=raw_date.strftime(settings.date_format),
        raw_date=raw_date,
        tags=tuple(tags.batch_create(raw_tags, settings)),
        url=url_join(settings.base_url, filename),
        data=body,
        output=join_path(settings.dest, filename),
    )


def metadata(post: Post) -> dict[str, Any]:
    """The template-facing view of a post: no body, no output path."""
    page = {key: getattr(post, key) for key in METADATA_KEYS}
    page["type"] = POST_TYPE
    return page


def to_html(
    post: Post,
    page: dict[str, Any],
    settings: Settings,
    converter: MarkupConverter,
    templates: TemplateEngine,
    ) -> str:
    """Convert the body, render the post template, and absolutize links."""
    bindings = {"page": page, "contents": converter.to_html(post.data)}
    try:
        template = templates.get(settings.templates.get(POST_TYPE, f"{POST_TYPE}.html"))
        rendered = templates.render(template, bindings)
    except RenderError as e:
        raise RenderError(e.message, post.file) from e
    return process_links(rendered, settings.base_url)


def to_fragment(
    post: Post,
    settings: Settings,
    converter: Optional[MarkupConverter] = None,
    templates: Optional[TemplateEngine] = None,
    ) -> Fragment:
    """Render post into a Fragment. Raises RenderError."""
    converter = converter or MarkdownConverter(settings.parser_config)
    templates = templates or JinjaTemplates(settings.templates_dir)
    page = metadata(post)
    html = to_html(post, page, settings, converter, templates)
    return Fragment(file=post.file, output=post.output, metadata=page, data=html)
