"""Value models for posts, tags, rendered fragments, and batch outcomes"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from mdpress.core.errors import BuildError


T = TypeVar("T")


class Tag(BaseModel):
    """A post tag and the URL of its listing page."""
    model_config = ConfigDict(frozen=True)

    name: str
    list_url: str


class Post(BaseModel):
    """A parsed blog post; created once by build_post and never mutated."""
    model_config = ConfigDict(frozen=True)

    file:     str               # source path
    title:    str
    date:     str               # formatted with Settings.date_format
    raw_date: datetime
    tags:     tuple[Tag, ...] = ()
    url:      str               # absolute URL of the post in the website
    data:     str               # body, not yet converted to HTML
    output:   str               # destination path

    def __repr__(self) -> str:
        return f"Post<{self.title!r}>"


class Fragment(BaseModel):
    """A rendered page body ready to be written or composed into a layout."""
    model_config = ConfigDict(frozen=True)

    file:     str
    output:   str
    metadata: dict[str, Any]
    data:     str               # rendered HTML with links rewritten


@dataclass
class BatchResult(Generic[T]):
    """Outcome of a fail-slow batch: either every value, or every error.

    Both lists follow input order. values is always empty when errors is not.
    """
    values: list[T] = field(default_factory=list)
    errors: list[BuildError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls, values: list[T]) -> "BatchResult[T]":
        return cls(values=list(values))

    @classmethod
    def failure(cls, errors: list[BuildError]) -> "BatchResult[T]":
        return cls(errors=list(errors))
