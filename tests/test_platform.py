"""Tests for publishing-platform detection."""

from __future__ import annotations

import pytest

from blogseo.scraper.models import Platform
from blogseo.scraper.platform import detect_platform, platform_selectors

_PLAIN_URL = "https://blog.example.com/post"


def _page(head: str = "", body_attrs: str = "", body: str = "<p>Hi</p>") -> str:
    return f"<html><head>{head}</head><body {body_attrs}>{body}</body></html>"


# ---------------------------------------------------------------------------
# URL rules
# ---------------------------------------------------------------------------

class TestUrlRules:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://medium.com/@someone/post-123", Platform.MEDIUM),
            ("https://someone.substack.com/p/hello", Platform.SUBSTACK),
            ("https://someone.blogspot.com/2024/01/post.html", Platform.BLOGGER),
            ("https://www.blogger.com/blog/post/1", Platform.BLOGGER),
            ("HTTPS://MEDIUM.COM/post", Platform.MEDIUM),
        ],
    )
    def test_hosted_platforms_detected_from_url(self, url: str, expected: Platform) -> None:
        assert detect_platform(_page(), url) is expected

    def test_url_rule_beats_generator_meta(self) -> None:
        html = _page('<meta name="generator" content="WordPress 6.4">')
        assert detect_platform(html, "https://medium.com/p/abc") is Platform.MEDIUM

    def test_url_rule_beats_fingerprints(self) -> None:
        html = _page('<link rel="stylesheet" href="/wp-content/themes/x/style.css">')
        assert detect_platform(html, "https://x.substack.com/p/a") is Platform.SUBSTACK


# ---------------------------------------------------------------------------
# Generator meta rules
# ---------------------------------------------------------------------------

class TestGeneratorRules:
    @pytest.mark.parametrize(
        "generator, expected",
        [
            ("WordPress 6.4.2", Platform.WORDPRESS),
            ("Ghost 5.75", Platform.GHOST),
            ("Wix.com Website Builder", Platform.WIX),
            ("Squarespace", Platform.SQUARESPACE),
        ],
    )
    def test_generator_content(self, generator: str, expected: Platform) -> None:
        html = _page(f'<meta name="generator" content="{generator}">')
        assert detect_platform(html, _PLAIN_URL) is expected

    def test_unknown_generator_falls_through(self) -> None:
        html = _page('<meta name="generator" content="Hugo 0.120">')
        assert detect_platform(html, _PLAIN_URL) is Platform.CUSTOM


# ---------------------------------------------------------------------------
# Structural fingerprints
# ---------------------------------------------------------------------------

class TestFingerprints:
    def test_wp_content_link(self) -> None:
        html = _page('<link rel="stylesheet" href="https://x.com/wp-content/style.css">')
        assert detect_platform(html, _PLAIN_URL) is Platform.WORDPRESS

    def test_wp_includes_script(self) -> None:
        html = _page('<script src="/wp-includes/js/jquery.js"></script>')
        assert detect_platform(html, _PLAIN_URL) is Platform.WORDPRESS

    @pytest.mark.parametrize("body_class", ["wp-site", "home wordpress"])
    def test_wordpress_body_class(self, body_class: str) -> None:
        html = _page(body_attrs=f'class="{body_class}"')
        assert detect_platform(html, _PLAIN_URL) is Platform.WORDPRESS

    def test_medium_app_meta(self) -> None:
        html = _page('<meta property="al:ios:app_name" content="Medium">')
        assert detect_platform(html, _PLAIN_URL) is Platform.MEDIUM

    def test_medium_body_class_substring(self) -> None:
        html = _page(body_attrs='class="theme-medium-light"')
        assert detect_platform(html, _PLAIN_URL) is Platform.MEDIUM


# ---------------------------------------------------------------------------
# Default and determinism
# ---------------------------------------------------------------------------

class TestDefault:
    def test_plain_page_is_custom(self) -> None:
        assert detect_platform(_page(), _PLAIN_URL) is Platform.CUSTOM

    def test_empty_input_is_custom(self) -> None:
        assert detect_platform("", "") is Platform.CUSTOM

    def test_deterministic(self) -> None:
        html = _page('<meta name="generator" content="Ghost 5">')
        results = {detect_platform(html, _PLAIN_URL) for _ in range(5)}
        assert results == {Platform.GHOST}


class TestPlatformSelectors:
    def test_wordpress_selectors(self) -> None:
        assert platform_selectors(Platform.WORDPRESS)[0] == ".entry-content"

    def test_every_platform_has_selectors(self) -> None:
        for platform in Platform:
            assert platform_selectors(platform)

    def test_returns_a_copy(self) -> None:
        selectors = platform_selectors(Platform.GHOST)
        selectors.append("mutated")
        assert "mutated" not in platform_selectors(Platform.GHOST)
