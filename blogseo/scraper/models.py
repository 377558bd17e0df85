"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Platform(str, Enum):
    """Publishing platform a blog post was served from."""

    WORDPRESS = "wordpress"
    MEDIUM = "medium"
    GHOST = "ghost"
    SUBSTACK = "substack"
    BLOGGER = "blogger"
    WIX = "wix"
    SQUARESPACE = "squarespace"
    CUSTOM = "custom"


@dataclass(frozen=True)
class RawDocument:
    """The raw HTTP response for a single URL fetch."""

    html: str
    final_url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class Metadata:
    """Document-level descriptive fields.  Only ``title`` is guaranteed."""

    title: str = "Untitled"
    description: Optional[str] = None
    author: Optional[str] = None
    publish_date: Optional[str] = None
    modified_date: Optional[str] = None
    featured_image: Optional[str] = None
    site_name: Optional[str] = None
    lang: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "publishDate": self.publish_date,
            "modifiedDate": self.modified_date,
            "featuredImage": self.featured_image,
            "siteName": self.site_name,
            "lang": self.lang,
        }


@dataclass
class Heading:
    level: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "text": self.text}


@dataclass
class Image:
    src: str
    alt: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"src": self.src, "alt": self.alt}


@dataclass
class Link:
    href: str
    text: str
    is_external: bool

    def to_dict(self) -> dict[str, Any]:
        return {"href": self.href, "text": self.text, "isExternal": self.is_external}


@dataclass
class ParsedContent:
    """The main content region of a page and everything derived from it."""

    html: str
    plain_text: str
    headings: List[Heading] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    word_count: int = 0
    reading_time: int = 0

    def structure_dict(self) -> dict[str, Any]:
        """Return the ``structure`` block of the wire format."""
        return {
            "headings": [h.to_dict() for h in self.headings],
            "images": [i.to_dict() for i in self.images],
            "links": [lnk.to_dict() for lnk in self.links],
            "wordCount": self.word_count,
            "readingTime": self.reading_time,
        }


@dataclass(frozen=True)
class Document:
    """A fetched blog post: metadata, parsed content and platform."""

    url: str
    metadata: Metadata
    content: ParsedContent
    platform: Platform = Platform.CUSTOM

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the shape returned by ``POST /blog/fetch``."""
        return {
            "url": self.url,
            "html": self.content.html,
            "plainText": self.content.plain_text,
            "metadata": {**self.metadata.to_dict(), "url": self.url},
            "structure": self.content.structure_dict(),
            "platform": self.platform.value,
        }
