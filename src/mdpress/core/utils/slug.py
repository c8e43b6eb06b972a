"""Slug generation for tag and page URL segments"""

import re
import unicodedata


NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """ASCII-fold text and join its alphanumeric runs with hyphens; 'untitled' when nothing is left."""
    folded = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    return NON_ALNUM_RE.sub('-', folded.lower()).strip('-') or 'untitled'
