"""Scraper package — fetch, platform detection, metadata and content extraction."""

from blogseo.scraper.extractor import parse_content
from blogseo.scraper.fetcher import FetchError, FetchErrorKind, fetch_url, validate_url
from blogseo.scraper.metadata import extract_metadata
from blogseo.scraper.models import (
    Document,
    Heading,
    Image,
    Link,
    Metadata,
    ParsedContent,
    Platform,
    RawDocument,
)
from blogseo.scraper.pipeline import build_document, fetch_document
from blogseo.scraper.platform import detect_platform, platform_selectors

__all__ = [
    "fetch_url",
    "validate_url",
    "FetchError",
    "FetchErrorKind",
    "detect_platform",
    "platform_selectors",
    "extract_metadata",
    "parse_content",
    "build_document",
    "fetch_document",
    "RawDocument",
    "Metadata",
    "Heading",
    "Image",
    "Link",
    "ParsedContent",
    "Platform",
    "Document",
]
