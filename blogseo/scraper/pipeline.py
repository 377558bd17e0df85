"""Fetch → parse pipeline producing an assembled :class:`Document`.

    validate → fetch → {detect platform, extract metadata, parse content}

The three parsing steps are pure functions of the same :class:`RawDocument`
and share a single parsed tree.
"""

from __future__ import annotations

from loguru import logger

from blogseo.scraper.dom import parse_html
from blogseo.scraper.extractor import parse_content
from blogseo.scraper.fetcher import fetch_url, validate_url
from blogseo.scraper.metadata import extract_metadata
from blogseo.scraper.models import Document, RawDocument
from blogseo.scraper.platform import detect_platform

INVALID_URL_MESSAGE = "Invalid URL format. Please provide a valid HTTP or HTTPS URL."


def build_document(raw: RawDocument, platform_hint: bool = False) -> Document:
    """Assemble a :class:`Document` from an already-fetched page.

    Args:
        raw: The fetched page.
        platform_hint: When ``True`` the detected platform's own content
            selectors are tried before the generic ones.
    """
    url = raw.final_url
    root = parse_html(raw.html)

    platform = detect_platform(raw.html, url, root=root)
    logger.info(f"Detected platform: {platform.value}")

    metadata = extract_metadata(raw.html, url, root=root)
    logger.info(f"Extracted metadata: {metadata.title}")

    content = parse_content(
        raw.html, url, platform=platform if platform_hint else None, root=root
    )
    logger.info(
        f"Parsed content: {content.word_count} words, {len(content.headings)} headings"
    )

    return Document(url=url, metadata=metadata, content=content, platform=platform)


def fetch_document(url: str, platform_hint: bool = False) -> Document:
    """Fetch *url* and return the assembled :class:`Document`.

    Raises:
        ValueError: If *url* is not an absolute ``http``/``https`` URL.
        blogseo.scraper.fetcher.FetchError: If the page cannot be fetched.
    """
    if not validate_url(url):
        raise ValueError(INVALID_URL_MESSAGE)
    raw = fetch_url(url.strip())
    return build_document(raw, platform_hint=platform_hint)
