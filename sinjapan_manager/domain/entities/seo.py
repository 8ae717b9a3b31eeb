"""URL slug helper for SEO articles."""

import random
import re
import string
import time

MAX_SLUG_LENGTH = 50

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def slugify_title(title: str) -> str:
    """Lower-case, keep ``[a-z0-9 -]``, collapse whitespace to ``-``, cap at 50.

    Japanese titles usually reduce to an empty string; callers fall back
    to :func:`fallback_slug` in that case.
    """
    slug = _DISALLOWED.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug)
    return slug[:MAX_SLUG_LENGTH]


def fallback_slug(now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"article-{now_ms}-{suffix}"


def slug_for(title: str, slug: str | None = None) -> str:
    """An explicit slug if given, else one derived from the title, else a random one."""
    if slug and slug.strip():
        return slug.strip()
    return slugify_title(title) or fallback_slug()
