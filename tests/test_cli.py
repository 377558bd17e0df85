"""Tests for the blogseo CLI commands."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from blogseo.scraper.fetcher import FetchError, FetchErrorKind
from blogseo.scraper.models import RawDocument
from blogseo.scraper.pipeline import build_document
from cli.main import app
from cli.rendering import render_score_bar

runner = CliRunner()

_URL = "https://example.com/post"
_HTML = """\
<html><head>
<meta property="og:title" content="Coffee guide">
<meta name="author" content="Ann">
<meta name="generator" content="Ghost 5.0">
</head><body><article>
<h1>How do I brew better coffee?</h1>
<p>Use fresh beans and weigh your water, then grind right before you brew.</p>
<h2>Steps</h2>
<ul><li>Weigh</li><li>Grind</li><li>Pour</li></ul>
<p>According to baristas, 90% of flavour comes from the beans.</p>
</article></body></html>
"""


@pytest.fixture()
def document():
    return build_document(RawDocument(html=_HTML, final_url=_URL, status_code=200))


def test_detect(document):
    with patch("cli.main.fetch_document", return_value=document):
        result = runner.invoke(app, ["detect", "--url", _URL])
    assert result.exit_code == 0
    assert result.stdout.strip() == "ghost"


def test_fetch_summary(document):
    with patch("cli.main.fetch_document", return_value=document):
        result = runner.invoke(app, ["fetch", "--url", _URL])
    assert result.exit_code == 0
    assert "Coffee guide" in result.stdout
    assert "Platform : ghost" in result.stdout
    assert "Author   : Ann" in result.stdout


def test_fetch_json(document):
    with patch("cli.main.fetch_document", return_value=document):
        result = runner.invoke(app, ["fetch", "--url", _URL, "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["metadata"]["title"] == "Coffee guide"
    assert data["platform"] == "ghost"


def test_analyze_renders_checklist(document):
    with patch("cli.main.fetch_document", return_value=document):
        result = runner.invoke(app, ["analyze", "--url", _URL])
    assert result.exit_code == 0
    assert "Structure score:" in result.stdout
    assert "mainQuestion" in result.stdout
    assert "Recommendations:" in result.stdout
    assert "Include a TL;DR summary section" in result.stdout


def test_analyze_json(document):
    with patch("cli.main.fetch_document", return_value=document):
        result = runner.invoke(app, ["analyze", "--url", _URL, "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    analysis = payload["analysis"]
    assert analysis["hasMainQuestion"] is True
    assert analysis["hasProperFormatting"] is True
    assert analysis["hasAuthorInfo"] is True
    assert analysis["hasTldr"] is False
    assert payload["checklist"]["tldrSummary"]["status"] == "incomplete"


def test_ai_context(document):
    with patch("cli.main.fetch_document", return_value=document):
        result = runner.invoke(app, ["ai-context", "--url", _URL, "--max-chars", "10"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["title"] == "Coffee guide"
    assert len(payload["plainText"]) == 10
    assert payload["truncated"] is True


def test_fetch_error_exits_cleanly():
    with patch(
        "cli.main.fetch_document", side_effect=FetchError(FetchErrorKind.NOT_FOUND, 404)
    ):
        result = runner.invoke(app, ["analyze", "--url", _URL])
    assert result.exit_code == 1
    assert "not found (404)" in result.output


def test_invalid_url_exits_cleanly():
    result = runner.invoke(app, ["fetch", "--url", "ftp://example.com"])
    assert result.exit_code == 1
    assert "Invalid URL format" in result.output


def test_score_bar():
    assert render_score_bar(0) == "[....................] 0/100"
    assert render_score_bar(100) == "[####################] 100/100"
    assert render_score_bar(50).startswith("[##########..........]")


def test_platform_selectors_flag_forwarded(document):
    with patch("cli.main.fetch_document", return_value=document) as mock_fetch:
        result = runner.invoke(app, ["fetch", "--url", _URL, "--platform-selectors"])
    assert result.exit_code == 0
    mock_fetch.assert_called_once_with(_URL, platform_hint=True)
