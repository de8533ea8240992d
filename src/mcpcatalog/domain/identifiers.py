"""Identifier normalization shared by loaders, the merger and the resolver.

Every function here is pure and total: ``None`` or empty input yields an empty
string and no input raises.
"""

from __future__ import annotations

import re
from typing import Final

CLIENT_PREFIX: Final[str] = "client-"
UNCATEGORIZED: Final[str] = "Uncategorized"

_NON_WORD = re.compile(r"[^\w-]+", flags=re.ASCII)
_HYPHEN_RUNS = re.compile(r"-{2,}")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def strip_client_prefix(raw: str | None) -> str:
    if not raw:
        return ""
    text = raw.strip()
    if text[: len(CLIENT_PREFIX)].lower() == CLIENT_PREFIX:
        return text[len(CLIENT_PREFIX) :]
    return text


def normalize(raw: str | None, *, with_prefix: bool = False) -> str:
    """Canonicalize a free-form name, slug or id into a comparable key.

    >>> normalize("Claude Desktop")
    'claude-desktop'
    >>> normalize("client-Claude-Desktop")
    'claude-desktop'
    >>> normalize("claude-desktop", with_prefix=True)
    'client-claude-desktop'
    """

    slug = _slugify(strip_client_prefix(raw))
    # a prefix can surface only after slugifying ("Client -x", "client-client-x")
    while slug.startswith(CLIENT_PREFIX):
        slug = slug[len(CLIENT_PREFIX) :]
    if with_prefix:
        return f"{CLIENT_PREFIX}{slug}"
    return slug


def category_slug(raw: str | None) -> str:
    """Slug for a category label; ``&`` becomes the word ``and`` before collapsing."""

    text = (raw or "").strip() or UNCATEGORIZED
    slug = _slugify(text.replace("&", "and"))
    return slug or _slugify(UNCATEGORIZED)


def compact(raw: str | None) -> str:
    """Lowercase and drop everything that is not an ASCII letter or digit."""

    if not raw:
        return ""
    return _NON_ALNUM.sub("", raw.lower())


def title_from_slug(raw: str | None) -> str:
    """Title-case each hyphen-separated word: ``"cherry-studio"`` -> ``"Cherry Studio"``."""

    words = [word for word in strip_client_prefix(raw).split("-") if word.strip()]
    return " ".join(word.strip()[:1].upper() + word.strip()[1:] for word in words)


def _slugify(text: str) -> str:
    slug = _NON_WORD.sub("-", text.lower().strip())
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")
