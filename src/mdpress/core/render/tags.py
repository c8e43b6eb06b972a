"""Default tag construction: one Tag per raw name with its listing URL"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from mdpress.core.models import Tag
from mdpress.core.utils.paths import url_join
from mdpress.core.utils.slug import slugify

if TYPE_CHECKING:
    from mdpress.config import Settings


TAGS_DIR = "tags"


class TagFactory:
    def batch_create(self, names: Sequence[str], settings: Settings) -> list[Tag]:
        """Build tags in input order; duplicates are kept."""
        return [
            Tag(name=name, list_url=url_join(settings.base_url, TAGS_DIR, slugify(name)))
            for name in names
        ]
