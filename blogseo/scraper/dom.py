"""HTML traversal capability used by the extraction modules.

Extraction code only talks to :class:`HtmlNode`, a minimal
``select``/``text``/``attr``/``html`` interface.  :class:`SoupNode` implements
it over a BeautifulSoup tree; another parser can be dropped in by providing
the same five operations.
"""

from __future__ import annotations

from typing import List, Optional, Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag


class HtmlNode(Protocol):
    """An element (or whole document) in a parsed HTML tree."""

    @property
    def tag(self) -> str: ...

    @property
    def classes(self) -> List[str]: ...

    def select(self, selector: str) -> List["HtmlNode"]: ...

    def select_one(self, selector: str) -> Optional["HtmlNode"]: ...

    def text(self, separator: str = "") -> str: ...

    def attr(self, name: str) -> Optional[str]: ...

    def html(self) -> str: ...


class SoupNode:
    """:class:`HtmlNode` backed by a BeautifulSoup ``Tag``."""

    __slots__ = ("_el",)

    def __init__(self, element: Tag) -> None:
        self._el = element

    @property
    def tag(self) -> str:
        return (self._el.name or "").lower()

    @property
    def classes(self) -> List[str]:
        value = self._el.get("class") or []
        if isinstance(value, str):
            return value.split()
        return list(value)

    def select(self, selector: str) -> List[HtmlNode]:
        return [SoupNode(el) for el in self._el.select(selector)]

    def select_one(self, selector: str) -> Optional[HtmlNode]:
        el = self._el.select_one(selector)
        return SoupNode(el) if el is not None else None

    def text(self, separator: str = "") -> str:
        return self._el.get_text(separator=separator)

    def attr(self, name: str) -> Optional[str]:
        value = self._el.get(name)
        if value is None:
            return None
        # bs4 returns multi-valued attributes (class, rel) as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def html(self) -> str:
        """Return the *inner* markup of the element."""
        return self._el.decode_contents()

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag}>)"


def parse_html(html: str) -> SoupNode:
    """Parse *html* and return the document root as an :class:`HtmlNode`."""
    return SoupNode(BeautifulSoup(html or "", "html.parser"))


def first_attr(root: HtmlNode, selector: str, name: str) -> Optional[str]:
    """Return attribute *name* of the first match for *selector*, if any."""
    node = root.select_one(selector)
    return node.attr(name) if node is not None else None


def first_text(root: HtmlNode, selector: str) -> Optional[str]:
    """Return the text of the first match for *selector*, if any."""
    node = root.select_one(selector)
    return node.text() if node is not None else None


def absolute_url(value: str, base_url: str) -> str:
    """Resolve *value* against *base_url*; return it unchanged if that fails."""
    try:
        return urljoin(base_url, value)
    except ValueError:
        return value
