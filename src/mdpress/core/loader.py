"""Post discovery and concurrent loading of every post under <src>/posts"""

from functools import partial
from pathlib import Path
from typing import Optional

from mdpress.config import Settings
from mdpress.core.batch import run_all
from mdpress.core.models import BatchResult, Post
from mdpress.core.ports import TagFactory
from mdpress.core.post import load_post
from mdpress.core.utils.log import get_logger


POSTS_DIR = "posts"
POST_GLOB = "*.md"


def discover_posts(src: str | Path) -> Optional[list[Path]]:
    """Return post files sorted by path, or None when the posts directory is missing."""
    post_dir = Path(src) / POSTS_DIR
    if not post_dir.is_dir():
        return None
    return sorted(post_dir.glob(POST_GLOB))


def load_all(
    src: str | Path,
    settings: Settings,
    tags: Optional[TagFactory] = None,
    ) -> BatchResult[Post]:
    """Load every post concurrently; fail-slow, results in sorted path order.

    Output paths and URLs are derived relative to src, which overrides settings.src.
    """
    settings = settings.model_copy(update={"src": str(src)})
    log = get_logger(__name__)
    log.info("collecting posts", src=str(src))

    files = discover_posts(src)
    if files is None:
        log.warning("cannot access posts directory, no post will be generated",
                    path=str(Path(src) / POSTS_DIR))
        return BatchResult.success([])

    result = run_all(
        partial(load_post, settings=settings, tags=tags),
        [str(p) for p in files],
        settings.max_workers,
    )
    log.info("posts loaded", total=len(files), failed=len(result.errors))
    return result
