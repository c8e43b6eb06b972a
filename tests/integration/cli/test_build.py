"""Integration tests for the build and check commands"""

from typer.testing import CliRunner

from mdpress.cli.cli import app


POST = "---\ntitle: Hello\ntags: a, b\ndate: 2024-03-01\n---\nHi, see [more](more.html).\n"


def _project(tmp_path, **posts):
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    for name, text in posts.items():
        (posts_dir / f"{name}.md").write_text(text)


def test_build_cmd_writes_pages(tmp_path, monkeypatch):
    """build renders each post into dest with absolute links."""
    monkeypatch.chdir(tmp_path)
    _project(tmp_path, hello=POST)

    runner = CliRunner()
    result = runner.invoke(app, [
        "build", str(tmp_path),
        "--dest", str(tmp_path / "site"),
        "--base-url", "https://example.com",
        "--json",
    ])

    assert result.exit_code == 0, result.output
    page = tmp_path / "site" / "posts" / "hello.html"
    assert page.exists()
    assert 'href="https://example.com/more.html"' in page.read_text()
    assert (tmp_path / "site" / "posts" / "hello.json").exists()
    assert "Built 1 page(s)" in result.output


def test_build_cmd_reports_every_error(tmp_path, monkeypatch):
    """build lists every failing file and exits 1 without writing output."""
    monkeypatch.chdir(tmp_path)
    _project(
        tmp_path,
        a="---\ntitle: A\ndate: soon\n---\n",
        b="---\ndate: 2024-01-01\n---\n",
        c=POST,
    )

    runner = CliRunner()
    result = runner.invoke(app, ["build", str(tmp_path), "--dest", str(tmp_path / "site")])

    assert result.exit_code == 1
    assert "a.md:3:" in result.output
    assert "header-missing-required" in result.output
    assert "2 file(s) failed" in result.output
    assert not (tmp_path / "site").exists()


def test_check_cmd_without_posts_dir(tmp_path, monkeypatch):
    """A project without posts/ checks clean with zero posts."""
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "0 post(s) OK" in result.output


def test_check_cmd_counts_posts(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _project(tmp_path, one=POST, two=POST)
    result = CliRunner().invoke(app, ["check", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "2 post(s) OK" in result.output
