# -*- coding: utf-8 -*-
"""
Markdown rendering and text metadata for article bodies.

- render_markdown: Markdown -> HTML with id anchors on h1-h3
- extract_headings: h1-h3 outline for a table of contents, same ids as the HTML
- calculate_reading_time: locale-aware reading time in minutes
- generate_excerpt: plain-text excerpt for cards and meta descriptions

Both the renderer and the extractor slug a heading's source text after
heading_label() has stripped its inline markup, so their ids always agree.
"""
import html
import logging
import math
import re
from dataclasses import dataclass, field
from xml.etree.ElementTree import Element

import markdown
from markdown.blockprocessors import HashHeaderProcessor
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .config import settings
from .slugs import SlugRegistry

logger = logging.getLogger(__name__)

ANCHORED_TAGS = frozenset({"h1", "h2", "h3"})
ELLIPSIS = "…"

# Characters per minute for Japanese, words per minute for everything else
JA_CHARS_PER_MINUTE = 400
WORDS_PER_MINUTE = 200

# GitHub-flavoured conventions: fenced code, tables, sane lists, hard line breaks
MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "nl2br"]

_HEADING_LINE = re.compile(r"^(#{1,3})[ \t]+(.+?)[ \t]*$")
_CLOSING_HASHES = re.compile(r"[ \t]+#+$")
_FENCE = re.compile(r"^[ \t]{0,3}(`{3,}|~{3,})")

# Inline markup removed from heading labels (visible text kept)
_LABEL_RULES = [
    (re.compile(r"!\[[^\]]*\]\([^)]*\)"), ""),  # image
    (re.compile(r"\[(.+?)\]\(.+?\)"), r"\1"),  # link
    (re.compile(r"`(.+?)`"), r"\1"),  # inline code
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),  # bold
    (re.compile(r"(?<!\w)__(.+?)__(?!\w)"), r"\1"),  # bold
    (re.compile(r"\*(.+?)\*"), r"\1"),  # italic
    (re.compile(r"(?<!\w)_(.+?)_(?!\w)"), r"\1"),  # italic
    (re.compile(r"<[^>]*>"), ""),  # html tag
    (re.compile(r"\\([\\`*_{}\[\]()#+\-.!])"), r"\1"),  # backslash escape
]

_EXCERPT_RULES = [
    (re.compile(r"#+\s"), ""),
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),
    (re.compile(r"\*(.+?)\*"), r"\1"),
    (re.compile(r"\[(.+?)\]\(.+?\)"), r"\1"),
    (re.compile(r"`(.+?)`"), r"\1"),
    (re.compile(r"<[^>]*>"), ""),
]


@dataclass(frozen=True)
class Heading:
    """One entry of a document outline."""

    level: int
    text: str
    id: str


def heading_label(raw: str) -> str:
    """Visible label of a heading's source text: inline markup stripped, entities decoded."""
    text = _CLOSING_HASHES.sub("", raw.strip())
    for pattern, replacement in _LABEL_RULES:
        text = pattern.sub(replacement, text)
    return html.unescape(text).strip()


@dataclass(frozen=True)
class HeadingToken:
    """Level and label of an anchorable heading."""

    level: int
    text: str

    @classmethod
    def from_element(cls, element: Element) -> "HeadingToken | None":
        """
        Adapt a block-level heading element, before inline processing.

        At that stage ``element.text`` still holds the heading's source
        Markdown. Returns None for anything that is not an h1-h3.
        """
        if element.tag not in ANCHORED_TAGS:
            return None
        return cls(level=int(element.tag[1]), text=heading_label(element.text or ""))


class SpacedHashHeaderProcessor(HashHeaderProcessor):
    """ATX headings that, as on GitHub, need whitespace after the opening hashes."""

    RE = re.compile(r"(?:^|\n)(?P<level>#{1,6})(?=[ \t])(?P<header>(?:\\.|[^\\])*?)#*(?:\n|$)")


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Set a registry-issued ``id`` on every h1-h3 element, in document order."""

    def __init__(self, md, registry: SlugRegistry):
        super().__init__(md)
        self.registry = registry

    def run(self, root: Element) -> None:
        for element in root.iter():
            token = HeadingToken.from_element(element)
            if token is not None:
                element.set("id", self.registry.slug(token.text))


class HeadingAnchorExtension(Extension):
    """Python-Markdown extension wiring HeadingAnchorTreeprocessor to a slug registry."""

    def __init__(self, registry: SlugRegistry | None = None, **kwargs):
        self.registry = registry if registry is not None else SlugRegistry()
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # Same name and priority as the built-in rule, which it replaces
        md.parser.blockprocessors.register(SpacedHashHeaderProcessor(md.parser), "hashheader", 70)
        # Before inline processing (priority 20) so heading text is still source Markdown
        md.treeprocessors.register(
            HeadingAnchorTreeprocessor(md, self.registry), "heading_anchors", 25
        )


def render_markdown(content: str | None, registry: SlugRegistry | None = None) -> str:
    """
    Convert Markdown to HTML with anchored headings.

    Args:
        content: Markdown source
        registry: Slug registry for this document. A fresh one is used if omitted.

    Returns:
        Rendered HTML, or the original Markdown if rendering fails.
    """
    if not content:
        return ""

    try:
        md = markdown.Markdown(
            extensions=[*MARKDOWN_EXTENSIONS, HeadingAnchorExtension(registry=registry)],
            output_format="html",
        )
        return md.convert(content)
    except Exception:
        logger.exception("Markdown parse error", extra={"content_length": len(content)})
        return content


def extract_headings(content: str | None, registry: SlugRegistry | None = None) -> list[Heading]:
    """
    Extract the h1-h3 outline of a Markdown document.

    Headings inside fenced code blocks are skipped, as the renderer does not
    treat them as headings either. Ids follow the renderer's slug rules, so a
    table of contents built from this list links to the rendered anchors.
    """
    if not content:
        return []

    registry = registry if registry is not None else SlugRegistry()
    headings: list[Heading] = []
    fence: str | None = None

    for line in content.splitlines():
        fence_match = _FENCE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue

        match = _HEADING_LINE.match(line)
        if not match:
            continue

        text = heading_label(match.group(2))
        headings.append(Heading(level=len(match.group(1)), text=text, id=registry.slug(text)))

    return headings


def calculate_reading_time(content: str | None, locale: str = "en") -> int:
    """Estimated reading time in whole minutes (rounded up)."""
    if not content:
        return 0

    if locale == "ja":
        chars = len(re.sub(r"\s+", "", content))
        return math.ceil(chars / JA_CHARS_PER_MINUTE)

    words = len(content.split())
    return math.ceil(words / WORDS_PER_MINUTE)


def generate_excerpt(content: str | None, max_length: int = 160) -> str:
    """
    Build a plain-text excerpt from Markdown.

    Text longer than ``max_length`` is cut at the last word boundary that fits,
    right-trimmed, and suffixed with a single-character ellipsis.
    """
    if not content:
        return ""

    text = content
    for pattern, replacement in _EXCERPT_RULES:
        text = pattern.sub(replacement, text)
    text = re.sub(r"\s+", " ", text).strip()

    if len(text) <= max_length:
        return text

    cut = text[:max_length]
    if text[max_length] != " " and " " in cut:
        cut = cut[: cut.rfind(" ")]
    return cut.rstrip() + ELLIPSIS


@dataclass
class RenderedArticle:
    """HTML body plus the metadata derived from the same Markdown."""

    html: str
    headings: list[Heading] = field(default_factory=list)
    reading_time: int = 0
    excerpt: str = ""


def render_article(content: str | None, locale: str = "en", excerpt_length: int | None = None) -> RenderedArticle:
    """
    Render an article body and derive its outline, reading time and excerpt.

    Renderer and extractor each get their own fresh registry, so both number
    duplicate headings from the start of the document and their ids match.
    """
    return RenderedArticle(
        html=render_markdown(content, SlugRegistry()),
        headings=extract_headings(content, SlugRegistry()),
        reading_time=calculate_reading_time(content, locale),
        excerpt=generate_excerpt(content, excerpt_length or settings.EXCERPT_LENGTH),
    )
