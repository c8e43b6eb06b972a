"""Path and URL joining with exactly one separator between segments"""

import os
from pathlib import Path


def replace_suffix(path: str, suffix: str) -> str:
    """Swap the file extension of path, e.g. posts/a.md -> posts/a.html."""
    return str(Path(path).with_suffix(suffix))


def relative_to(path: str, root: str) -> str:
    """Express path relative to root using forward slashes."""
    return Path(os.path.relpath(path, root)).as_posix()


def join_path(root: str, rel: str) -> str:
    """Join a filesystem root and a relative path."""
    return str(Path(root, rel.lstrip("/")))


def url_join(base: str, *parts: str) -> str:
    """Join URL segments so exactly one '/' separates each pair.

    url_join("https://x.org/blog/", "/posts/a.html") -> "https://x.org/blog/posts/a.html"
    """
    url = base.rstrip("/")
    for part in parts:
        part = part.strip("/")
        if part:
            url = f"{url}/{part}"
    return url or "/"
