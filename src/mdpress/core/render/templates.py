"""Jinja2 template lookup and rendering with built-in fallbacks"""

from pathlib import Path
from typing import Any, Mapping

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    Template,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from mdpress.core.errors import RenderError


DEFAULT_TEMPLATES: dict[str, str] = {
    "post.html": """\
<article class="post">
  <header>
    <h1>{{ page.title }}</h1>
    <time datetime="{{ page.raw_date.isoformat() }}">{{ page.date }}</time>
    {% if page.tags %}
    <ul class="tags">
      {% for tag in page.tags %}<li><a href="{{ tag.list_url }}">{{ tag.name }}</a></li>{% endfor %}
    </ul>
    {% endif %}
  </header>
  {{ contents }}
</article>
""",
}


class JinjaTemplates:
    """Templates from templates_dir first, then the built-in defaults."""

    def __init__(self, templates_dir: str | Path | None = None):
        loaders = []
        if templates_dir is not None:
            loaders.append(FileSystemLoader(str(templates_dir)))
        loaders.append(DictLoader(DEFAULT_TEMPLATES))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "htm", "xml"]),
        )

    def get(self, name: str) -> Template:
        try:
            return self.env.get_template(name)
        except TemplateError as e:
            raise RenderError(f"cannot load template {name!r}: {e}") from e

    def render(self, template: Template, bindings: Mapping[str, Any]) -> str:
        """Render template; a `contents` binding is treated as trusted HTML.

        User templates can raise anything (a bad filter argument, a division by
        zero); every such failure is reported as a RenderError for this page.
        """
        context = dict(bindings)
        if isinstance(context.get("contents"), str):
            context["contents"] = Markup(context["contents"])
        try:
            return template.render(**context)
        except Exception as e:
            raise RenderError(f"template {template.name!r} failed: {type(e).__name__}: {e}") from e
