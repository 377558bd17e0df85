"""Document-level metadata extraction.

Every field has its own ranked tuple of candidate sources.  Candidates are
tried in order and the first non-empty (whitespace-trimmed) value wins, so
each rank can be tested on its own and reordering is a data change.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from blogseo.scraper.dom import HtmlNode, absolute_url, first_attr, first_text, parse_html
from blogseo.scraper.models import Metadata

Candidate = Callable[[HtmlNode], Optional[str]]

DEFAULT_TITLE = "Untitled"
DESCRIPTION_MAX_CHARS = 160


def _attr_of(selector: str, name: str = "content") -> Candidate:
    def candidate(root: HtmlNode) -> Optional[str]:
        return first_attr(root, selector, name)

    candidate.__name__ = f"attr[{selector}@{name}]"
    return candidate


def _text_of(selector: str) -> Candidate:
    def candidate(root: HtmlNode) -> Optional[str]:
        return first_text(root, selector)

    candidate.__name__ = f"text[{selector}]"
    return candidate


def _first_paragraph(root: HtmlNode) -> Optional[str]:
    text = first_text(root, "p")
    if text is None:
        return None
    return text.strip()[:DESCRIPTION_MAX_CHARS]


TITLE_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[property="og:title"]'),
    _attr_of('meta[name="twitter:title"]'),
    _text_of("title"),
    _text_of("h1"),
)

DESCRIPTION_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[property="og:description"]'),
    _attr_of('meta[name="twitter:description"]'),
    _attr_of('meta[name="description"]'),
    _first_paragraph,
)

AUTHOR_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[name="author"]'),
    _attr_of('meta[property="article:author"]'),
    _attr_of('meta[name="twitter:creator"]'),
    _text_of(".author"),
    _text_of('[rel="author"]'),
)

PUBLISH_DATE_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[property="article:published_time"]'),
    _attr_of('meta[name="publish_date"]'),
    _attr_of("time[datetime]", "datetime"),
    _text_of("time"),
)

MODIFIED_DATE_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[property="article:modified_time"]'),
    _attr_of('meta[name="last-modified"]'),
)

FEATURED_IMAGE_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[property="og:image"]'),
    _attr_of('meta[name="twitter:image"]'),
    _attr_of("article img", "src"),
    _attr_of("img", "src"),
)

SITE_NAME_CHAIN: Sequence[Candidate] = (
    _attr_of('meta[property="og:site_name"]'),
    _attr_of('meta[name="application-name"]'),
)

LANG_CHAIN: Sequence[Candidate] = (
    _attr_of("html", "lang"),
    _attr_of('meta[http-equiv="content-language"]'),
)

FIELD_CHAINS: Dict[str, Sequence[Candidate]] = {
    "title": TITLE_CHAIN,
    "description": DESCRIPTION_CHAIN,
    "author": AUTHOR_CHAIN,
    "publish_date": PUBLISH_DATE_CHAIN,
    "modified_date": MODIFIED_DATE_CHAIN,
    "featured_image": FEATURED_IMAGE_CHAIN,
    "site_name": SITE_NAME_CHAIN,
    "lang": LANG_CHAIN,
}


def first_present(root: HtmlNode, chain: Sequence[Candidate]) -> Optional[str]:
    """Return the first non-empty trimmed value produced by *chain*."""
    for candidate in chain:
        value = candidate(root)
        if value and value.strip():
            return value.strip()
    return None


def extract_metadata(html: str, url: str, root: Optional[HtmlNode] = None) -> Metadata:
    """Extract :class:`Metadata` from *html* served at *url*.

    Missing fields are ``None``; ``title`` falls back to ``"Untitled"``.
    """
    if root is None:
        root = parse_html(html)

    values = {name: first_present(root, chain) for name, chain in FIELD_CHAINS.items()}

    if values["featured_image"]:
        values["featured_image"] = absolute_url(values["featured_image"], url)

    values["title"] = values["title"] or DEFAULT_TITLE
    return Metadata(**values)
