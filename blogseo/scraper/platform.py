"""Publishing-platform detection from the page URL and markup.

Rules are evaluated in three ranked groups; the first match wins:

1. URL substrings (hosted platforms are unambiguous from the domain).
2. ``<meta name="generator">`` content.
3. Structural fingerprints in the markup.

Anything unmatched is :attr:`Platform.CUSTOM`.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from blogseo.scraper.dom import HtmlNode, first_attr, parse_html
from blogseo.scraper.models import Platform

_URL_RULES: Tuple[Tuple[str, Platform], ...] = (
    ("medium.com", Platform.MEDIUM),
    ("substack.com", Platform.SUBSTACK),
    ("blogspot.com", Platform.BLOGGER),
    ("blogger.com", Platform.BLOGGER),
)

_GENERATOR_RULES: Tuple[Tuple[str, Platform], ...] = (
    ("wordpress", Platform.WORDPRESS),
    ("ghost", Platform.GHOST),
    ("wix", Platform.WIX),
    ("squarespace", Platform.SQUARESPACE),
)


def _body_classes(root: HtmlNode) -> List[str]:
    body = root.select_one("body")
    return body.classes if body is not None else []


def _is_wordpress(root: HtmlNode) -> bool:
    if root.select_one('link[href*="wp-content"]') is not None:
        return True
    if root.select_one('script[src*="wp-includes"]') is not None:
        return True
    classes = _body_classes(root)
    return "wp-site" in classes or "wordpress" in classes


def _is_ghost(root: HtmlNode) -> bool:
    return root.select_one('meta[name="generator"][content*="Ghost"]') is not None


def _is_medium(root: HtmlNode) -> bool:
    if root.select_one('meta[property="al:ios:app_name"][content="Medium"]') is not None:
        return True
    body = root.select_one("body")
    return body is not None and "medium" in (body.attr("class") or "")


_FINGERPRINT_RULES: Tuple[Tuple[Callable[[HtmlNode], bool], Platform], ...] = (
    (_is_wordpress, Platform.WORDPRESS),
    (_is_ghost, Platform.GHOST),
    (_is_medium, Platform.MEDIUM),
)

_PLATFORM_SELECTORS = {
    Platform.WORDPRESS: [".entry-content", ".post-content", "article .content"],
    Platform.MEDIUM: ["article", ".postArticle-content"],
    Platform.GHOST: [".post-content", ".gh-content", "article"],
    Platform.SUBSTACK: [".post-content", ".body"],
    Platform.BLOGGER: [".post-body", ".entry-content"],
    Platform.WIX: [".post-content"],
    Platform.SQUARESPACE: [".entry-content", ".sqs-block-content"],
    Platform.CUSTOM: ["article", "main", ".content"],
}


def detect_platform(html: str, url: str, root: Optional[HtmlNode] = None) -> Platform:
    """Classify the page into exactly one :class:`Platform`.

    Args:
        html: Raw page HTML.
        url: Page URL (post-redirect).
        root: Already-parsed tree of *html*, to avoid parsing twice.
    """
    url_lower = (url or "").lower()
    for needle, platform in _URL_RULES:
        if needle in url_lower:
            return platform

    if root is None:
        root = parse_html(html)

    generator = (first_attr(root, 'meta[name="generator"]', "content") or "").lower()
    for needle, platform in _GENERATOR_RULES:
        if needle in generator:
            return platform

    for matches, platform in _FINGERPRINT_RULES:
        if matches(root):
            return platform

    return Platform.CUSTOM


def platform_selectors(platform: Platform) -> List[str]:
    """Return content-container selectors known to work for *platform*."""
    return list(_PLATFORM_SELECTORS.get(platform, _PLATFORM_SELECTORS[Platform.CUSTOM]))
