"""Unit tests for core/pipeline.py"""

from pathlib import Path

from mdpress.core.errors import ErrorKind
from mdpress.core.pipeline import run_build, run_export, run_load, to_fragments


def test_to_fragments_in_order(write_post, settings, converter, templates):
    """Fragments follow the post order."""
    for name in ["b.md", "a.md"]:
        write_post(name, f"---\ntitle: {name}\n---\nbody\n")
    posts = run_load(settings).values
    result = to_fragments(posts, settings, converter, templates)
    assert result.ok
    assert [f.metadata["title"] for f in result.values] == ["a.md", "b.md"]


def test_to_fragments_fail_slow(write_post, settings, converter, make_templates):
    """Every render failure is reported; no fragments are returned."""
    for name in ["a", "b", "c"]:
        write_post(f"{name}.md", f"---\ntitle: {name}\n---\n")
    posts = run_load(settings).values
    result = to_fragments(posts, settings, converter, make_templates(broken=("a", "c")))
    assert result.values == []
    assert [(e.kind, Path(e.path).name) for e in result.errors] == [
        (ErrorKind.render_failure, "a.md"),
        (ErrorKind.render_failure, "c.md"),
    ]


def test_run_build_writes_pages(write_post, settings):
    """run_build loads, renders, and writes every page under dest."""
    write_post("hello.md")
    write_post("second.md", "---\ntitle: Second\n---\nSee %posts:hello.\n")
    result = run_build(settings)
    assert result.ok
    assert result.values == [
        Path(settings.dest) / "posts" / "hello.html",
        Path(settings.dest) / "posts" / "second.html",
    ]
    html = result.values[0].read_text(encoding="utf-8")
    assert "<h1>Hello World</h1>" in html
    assert 'href="https://example.com/blog/archive.html"' in html
    assert 'href="https://www.python.org"' in html


def test_run_build_stops_before_writing_on_load_errors(write_post, settings):
    """Header errors prevent any output from being written."""
    write_post("good.md")
    write_post("bad.md", "---\ntitle: Bad\nextra: 1\n---\n")
    result = run_build(settings)
    assert not result.ok
    assert len(result.errors) == 1
    assert not Path(settings.dest).exists()


def test_run_build_reports_render_errors(write_post, settings, converter, make_templates):
    write_post("a.md", "---\ntitle: a\n---\n")
    result = run_build(settings, converter=converter, templates=make_templates(broken=("a",)))
    assert [e.kind for e in result.errors] == [ErrorKind.render_failure]


def test_run_export_returns_paths_in_order(write_post, settings, converter, templates):
    for name in ["x.md", "y.md"]:
        write_post(name, f"---\ntitle: {name}\n---\n")
    fragments = to_fragments(run_load(settings).values, settings, converter, templates).values
    paths = run_export(fragments)
    assert [p.name for p in paths] == ["x.html", "y.html"]
    assert all(p.exists() for p in paths)


def test_to_fragments_collects_template_runtime_errors(write_post, settings):
    """A user template that fails while rendering is a render failure for that post."""
    templates_dir = Path(settings.templates_dir)
    templates_dir.mkdir(parents=True)
    (templates_dir / "post.html").write_text("{{ page.title }} {{ 1 // 0 }}\n")
    write_post("a.md", "---\ntitle: a\n---\nbody\n")
    write_post("b.md", "---\ntitle: b\n---\nbody\n")

    result = to_fragments(run_load(settings).values, settings)
    assert result.values == []
    assert [(e.kind, Path(e.path).name) for e in result.errors] == [
        (ErrorKind.render_failure, "a.md"),
        (ErrorKind.render_failure, "b.md"),
    ]
    assert "ZeroDivisionError" in result.errors[0].message
