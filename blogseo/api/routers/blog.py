"""Blog endpoints — fetch/parse a post and score edited content.

Routes
------
POST /blog/fetch      Body: {"url": "https://..."}                 → fetch_blog
POST /blog/analyze    Body: {"html": "...", "plainText"?, "metadata"?} → analyze_blog
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from blogseo.analysis.structure import analyze_content, generate_checklist
from blogseo.scraper.dom import parse_html
from blogseo.scraper.fetcher import FetchError, validate_url
from blogseo.scraper.models import Metadata
from blogseo.scraper.pipeline import INVALID_URL_MESSAGE, fetch_document

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class FetchRequest(BaseModel):
    url: Optional[str] = None


class MetadataIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = "Untitled"
    description: Optional[str] = None
    author: Optional[str] = None
    publish_date: Optional[str] = Field(default=None, alias="publishDate")
    modified_date: Optional[str] = Field(default=None, alias="modifiedDate")
    featured_image: Optional[str] = Field(default=None, alias="featuredImage")
    site_name: Optional[str] = Field(default=None, alias="siteName")
    lang: Optional[str] = None


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    html: Optional[str] = None
    plain_text: Optional[str] = Field(default=None, alias="plainText")
    metadata: Optional[MetadataIn] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/fetch")
def fetch_blog(body: Optional[FetchRequest] = None) -> Any:
    """Fetch a blog post and return its metadata, content and platform."""
    url = (body.url if body is not None else None) or ""
    if not url.strip():
        return _error(400, "URL is required")
    if not validate_url(url):
        return _error(400, INVALID_URL_MESSAGE)

    try:
        document = fetch_document(url)
    except FetchError as exc:
        return _error(500, exc.message, code=exc.kind.value)
    except Exception as exc:
        logger.exception(f"Unexpected error while fetching {url}")
        return _error(500, "An error occurred while fetching the blog", details=str(exc))

    return {"success": True, "data": document.to_dict()}


@router.post("/analyze")
def analyze_blog(body: Optional[AnalyzeRequest] = None) -> Any:
    """Score (possibly edited) content HTML and return analysis + checklist."""
    if body is None or not body.html:
        return _error(400, "HTML content is required")

    plain_text = body.plain_text
    if plain_text is None:
        plain_text = parse_html(body.html).text().strip()
    metadata = Metadata(**body.metadata.model_dump()) if body.metadata else Metadata()

    analysis = analyze_content(body.html, plain_text, metadata)
    checklist = generate_checklist(None, analysis)
    return {
        "success": True,
        "data": {"analysis": analysis.to_dict(), "checklist": checklist.to_dict()},
    }
