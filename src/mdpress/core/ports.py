"""Narrow collaborator interfaces used by the post builder and fragment renderer"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence

from mdpress.core.models import Tag

if TYPE_CHECKING:
    from mdpress.config import Settings


class TagFactory(Protocol):
    """Turns raw tag strings into Tag objects, preserving order and duplicates."""

    def batch_create(self, names: Sequence[str], settings: Settings) -> list[Tag]:
        ...


class MarkupConverter(Protocol):
    """Converts a raw post body to HTML. Treated as total."""

    def to_html(self, text: str) -> str:
        ...


class TemplateEngine(Protocol):
    """
    Looks up templates by name and renders them with bindings.

    Both methods raise RenderError on failure.
    """

    def get(self, name: str) -> Any:
        ...

    def render(self, template: Any, bindings: Mapping[str, Any]) -> str:
        ...
