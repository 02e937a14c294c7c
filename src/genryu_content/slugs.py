# -*- coding: utf-8 -*-
"""
Heading slug generation shared by the Markdown renderer and the TOC extractor.
"""
import re

MAX_SLUG_LENGTH = 50
FALLBACK_SLUG = "section"

# ASCII word characters, whitespace, Hiragana, Katakana, CJK ideographs and hyphens survive
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")


def slugify_base(text: str | None) -> str:
    """Turn heading text into an anchor-safe slug, without de-duplication."""
    slug = str(text or "").strip().lower()
    slug = _DISALLOWED_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    slug = slug.strip("-")[:MAX_SLUG_LENGTH]
    return slug or FALLBACK_SLUG


class SlugRegistry:
    """
    Per-document slug counter.

    The first occurrence of a slug is kept as-is; the Nth occurrence gets a
    ``-N`` suffix (``overview``, ``overview-2``, ``overview-3``). Create one
    registry per document so anchors from different documents never interact.
    """

    def __init__(self):
        self._seen: dict[str, int] = {}

    def slug(self, text: str | None) -> str:
        base = slugify_base(text)
        count = self._seen.get(base, 0)
        self._seen[base] = count + 1
        return base if count == 0 else f"{base}-{count + 1}"

    def __len__(self) -> int:
        return len(self._seen)
