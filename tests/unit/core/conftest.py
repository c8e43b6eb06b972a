"""Shared fixtures for core unit tests"""

import time
from pathlib import Path

import pytest

from mdpress.config import Settings
from mdpress.core.errors import RenderError
from mdpress.core.models import Tag


SAMPLE_POST = """\
---
title: Hello World
tags: python, notes
date: 2024-03-01 09:30:00
---
# Hello

See [the archive](archive.html) and [Python](https://www.python.org).
"""


class FakeConverter:
    """Wraps the body in <p> instead of running a real markdown parser."""

    def to_html(self, text: str) -> str:
        return f"<p>{text.strip()}</p>"


class FakeTemplates:
    """Renders a fixed synthetic layout; fails for names listed in broken."""

    def __init__(self, broken: tuple = ()):
        self.broken = broken
        self.rendered = []

    def get(self, name: str) -> str:
        if name in self.broken:
            raise RenderError(f"no template {name!r}")
        return name

    def render(self, template: str, bindings: dict) -> str:
        page = bindings["page"]
        if page["title"] in self.broken:
            raise RenderError(f"cannot render {page['title']!r}")
        self.rendered.append(page["title"])
        return f'<h1>{page["title"]}</h1><a href="up.html">up</a>{bindings["contents"]}'


class SlowTagFactory:
    """Records the names it builds and sleeps per tag to shuffle task completion order."""

    def __init__(self, delays: dict[str, float] = None):
        self.delays = delays or {}
        self.seen = []

    def batch_create(self, names, settings):
        self.seen.extend(names)
        for name in names:
            time.sleep(self.delays.get(name, 0))
        return [Tag(name=n, list_url=f"/t/{n}") for n in names]


@pytest.fixture(name="settings")
def settings_fixture(tmp_path):
    return Settings(
        src=str(tmp_path / "src"),
        dest=str(tmp_path / "out"),
        base_url="https://example.com/blog",
        date_format="%Y-%m-%d",
        templates_dir=str(tmp_path / "templates"),
    )


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(settings):
    d = Path(settings.src) / "posts"
    d.mkdir(parents=True)
    return d


@pytest.fixture(name="write_post")
def write_post_fixture(posts_dir):
    """Write posts/<name> with the given text and return its path."""
    def _write(name: str, text: str = SAMPLE_POST):
        p = posts_dir / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture(name="converter")
def converter_fixture():
    return FakeConverter()


@pytest.fixture(name="templates")
def templates_fixture():
    return FakeTemplates()


@pytest.fixture(name="make_templates")
def make_templates_fixture():
    return FakeTemplates


@pytest.fixture(name="slow_tags")
def slow_tags_fixture():
    return SlowTagFactory
