"""Main-content extraction: turns page HTML into :class:`ParsedContent`.

The content region is resolved through three tiers, stopping at the first
one that yields text:

1. **Selectors** — well-known article containers, first match with more
   than 100 characters of text.
2. **Readability** — ``trafilatura`` boilerplate removal over the whole page.
3. **Body** — the ``<body>`` element verbatim.

Headings, images, links and word statistics are then derived from the
resolved region.  Extraction never raises.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Optional
from urllib.parse import urlsplit

import trafilatura
from loguru import logger

from blogseo.scraper.dom import HtmlNode, absolute_url, parse_html
from blogseo.scraper.models import Heading, Image, Link, ParsedContent, Platform
from blogseo.scraper.platform import platform_selectors

CONTENT_SELECTORS = (
    "article",
    '[role="main"]',
    "main",
    ".post-content",
    ".entry-content",
    ".article-content",
    ".post-body",
    ".content",
    "#content",
    ".blog-post",
)

MIN_SELECTOR_TEXT_CHARS = 100
WORDS_PER_MINUTE = 200


class ContentRegion(NamedTuple):
    html: str
    text: str
    tier: str


# ---------------------------------------------------------------------------
# Word statistics
# ---------------------------------------------------------------------------

def count_words(text: str) -> int:
    """Number of whitespace-delimited, non-empty tokens in *text*."""
    return len(text.split())


def reading_time(word_count: int) -> int:
    """Estimated reading time in whole minutes at 200 words per minute."""
    if word_count <= 0:
        return 0
    return math.ceil(word_count / WORDS_PER_MINUTE)


# ---------------------------------------------------------------------------
# Content region tiers
# ---------------------------------------------------------------------------

def _candidate_selectors(platform: Optional[Platform]) -> List[str]:
    selectors: List[str] = []
    if platform is not None and platform is not Platform.CUSTOM:
        selectors = platform_selectors(platform)
    for selector in CONTENT_SELECTORS:
        if selector not in selectors:
            selectors.append(selector)
    return selectors


def _from_selectors(root: HtmlNode, platform: Optional[Platform] = None) -> Optional[ContentRegion]:
    for selector in _candidate_selectors(platform):
        element = root.select_one(selector)
        if element is None:
            continue
        text = element.text().strip()
        if len(text) > MIN_SELECTOR_TEXT_CHARS:
            return ContentRegion(element.html(), text, f"selector:{selector}")
    return None


def _from_readability(html: str, url: str) -> Optional[ContentRegion]:
    """Run trafilatura over the full page; ``None`` if it finds nothing."""
    try:
        content_html = trafilatura.extract(
            html,
            url=url,
            output_format="html",
            include_formatting=True,
            include_images=True,
            include_links=True,
            include_tables=True,
            favor_recall=True,
        )
    except Exception as exc:  # trafilatura raises assorted lxml/parser errors
        logger.warning(f"Readability extraction failed for {url}: {exc!r}")
        return None

    if not content_html:
        return None
    text = parse_html(content_html).text().strip()
    if not text:
        return None
    return ContentRegion(content_html, text, "readability")


def _from_body(root: HtmlNode, html: str) -> ContentRegion:
    body = root.select_one("body")
    if body is None:
        return ContentRegion(html, root.text().strip(), "body")
    return ContentRegion(body.html() or html, body.text().strip(), "body")


def resolve_content_region(
    html: str, url: str, root: Optional[HtmlNode] = None, platform: Optional[Platform] = None
) -> ContentRegion:
    """Return the main content region of the page (see module docstring)."""
    if root is None:
        root = parse_html(html)

    region = _from_selectors(root, platform) or _from_readability(html, url) or _from_body(root, html)
    logger.debug(f"Content region for {url} resolved via {region.tier}")
    return region


# ---------------------------------------------------------------------------
# Derivations from the content region
# ---------------------------------------------------------------------------

def _hostname(url: str) -> Optional[str]:
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def extract_headings(region: HtmlNode) -> List[Heading]:
    headings: List[Heading] = []
    for element in region.select("h1, h2, h3, h4, h5, h6"):
        text = element.text().strip()
        if text:
            headings.append(Heading(level=int(element.tag[1]), text=text))
    return headings


def extract_images(region: HtmlNode, base_url: str) -> List[Image]:
    images: List[Image] = []
    for element in region.select("img[src]"):
        src = element.attr("src")
        if src:
            images.append(Image(src=absolute_url(src, base_url), alt=element.attr("alt")))
    return images


def extract_links(region: HtmlNode, base_url: str) -> List[Link]:
    """Return anchors with both an ``href`` and visible text.

    A link is external when its resolved host differs from the page host.
    """
    page_host = _hostname(base_url)
    links: List[Link] = []
    for element in region.select("a[href]"):
        href = element.attr("href") or ""
        text = element.text().strip()
        if not href or not text:
            continue
        href = absolute_url(href, base_url)
        links.append(Link(href=href, text=text, is_external=_hostname(href) != page_host))
    return links


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_content(
    html: str, url: str, platform: Optional[Platform] = None, root: Optional[HtmlNode] = None
) -> ParsedContent:
    """Parse *html* served at *url* into :class:`ParsedContent`.

    Args:
        html: Raw page HTML.
        url: Page URL; relative image and link targets resolve against it.
        platform: Optional platform hint.  Its known content selectors are
            tried ahead of the generic ones.
        root: Already-parsed tree of *html*.
    """
    region = resolve_content_region(html, url, root=root, platform=platform)
    region_root = parse_html(region.html)
    words = count_words(region.text)

    return ParsedContent(
        html=region.html,
        plain_text=region.text,
        headings=extract_headings(region_root),
        images=extract_images(region_root, url),
        links=extract_links(region_root, url),
        word_count=words,
        reading_time=reading_time(words),
    )
