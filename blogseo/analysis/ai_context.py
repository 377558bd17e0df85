"""Input handed to the generative-text layer.

The AI layer (meta-tag rewriting, schema generation, section rewrites)
receives the post's plain text plus a subset of its metadata.  Whatever it
returns is passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from blogseo.config import settings
from blogseo.scraper.models import Document


@dataclass(frozen=True)
class AIContext:
    url: str
    title: str
    plain_text: str
    word_count: int
    description: Optional[str] = None
    author: Optional[str] = None
    truncated: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "plainText": self.plain_text,
            "wordCount": self.word_count,
            "truncated": self.truncated,
        }


def build_ai_context(document: Document, max_chars: Optional[int] = None) -> AIContext:
    """Build the :class:`AIContext` for *document*.

    Plain text longer than *max_chars* (default
    ``settings.ai_context_max_chars``) is cut at that length.  A limit of
    zero or less disables truncation.
    """
    limit = settings.ai_context_max_chars if max_chars is None else max_chars
    text = document.content.plain_text
    truncated = 0 < limit < len(text)
    if truncated:
        text = text[:limit]

    return AIContext(
        url=document.url,
        title=document.metadata.title,
        plain_text=text,
        word_count=document.content.word_count,
        description=document.metadata.description,
        author=document.metadata.author,
        truncated=truncated,
    )
