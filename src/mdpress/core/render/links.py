"""Rewriting of relative href/src values in rendered HTML to absolute URLs"""

import re
from urllib.parse import urlsplit

from mdpress.core.utils.paths import url_join


# a start tag; quoted attribute values may contain '>'
TAG_RE = re.compile(r'<[a-zA-Z][^\s/>]*(?:"[^"]*"|\'[^\']*\'|[^\'">])*>')
ATTR_RE = re.compile(r'(?P<attr>(?<![\w-])(?:href|src))=(?P<q>["\'])(?P<url>.*?)(?P=q)', re.IGNORECASE)
SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*:')
SHORTHAND_RE = re.compile(r'^%(?:25)?(?P<kind>media|posts|pages):(?P<name>.*)$')


def _expand_shorthand(kind: str, name: str, base_url: str) -> str:
    """%media:x -> base/media/x, %posts:x -> base/posts/x.html, %pages:x -> base/x.html."""
    if kind == "media":
        return url_join(base_url, "media", name)
    if kind == "posts":
        return url_join(base_url, "posts", f"{name}.html")
    return url_join(base_url, f"{name}.html")


def _under(url: str, root: str) -> bool:
    root = root.rstrip("/")
    return url == root or url.startswith(root + "/")


def absolutize(url: str, base_url: str) -> str:
    """Return url rooted at base_url; absolute, fragment-only, and empty values pass through.

    A root-relative url that already starts with the base URL's path only gets
    the base URL's scheme and host prepended.
    """
    m = SHORTHAND_RE.match(url)
    if m:
        return _expand_shorthand(m.group("kind"), m.group("name"), base_url)
    if not url or url.startswith(("#", "//")) or SCHEME_RE.match(url):
        return url
    if _under(url, base_url):
        return url

    base = urlsplit(base_url)
    if url.startswith("/") and base.netloc and base.path.strip("/") and _under(url, base.path):
        return f"{base.scheme}://{base.netloc}{url}"

    rel = url[2:] if url.startswith("./") else url
    # keep trailing slashes and query strings intact
    return base_url.rstrip("/") + "/" + rel.lstrip("/")


def _rewrite_tag(tag: str, base_url: str) -> str:
    def repl(m: re.Match) -> str:
        new = absolutize(m.group("url"), base_url)
        return f'{m.group("attr")}={m.group("q")}{new}{m.group("q")}'

    return ATTR_RE.sub(repl, tag)


def process_links(html: str, base_url: str) -> str:
    """Rewrite relative href/src attribute values inside tags. Text is left alone. Idempotent."""
    return TAG_RE.sub(lambda m: _rewrite_tag(m.group(0), base_url), html)
