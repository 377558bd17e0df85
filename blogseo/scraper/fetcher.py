"""HTTP fetcher for blog pages with a typed, user-facing error taxonomy."""

from __future__ import annotations

from enum import Enum
from typing import Optional
from urllib.parse import urlsplit

import httpx
from loguru import logger

from blogseo.config import settings
from blogseo.scraper.models import RawDocument

_BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Upgrade-Insecure-Requests": "1",
}


class FetchErrorKind(str, Enum):
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    DNS_NOT_FOUND = "dns_not_found"
    CONNECTION_REFUSED = "connection_refused"
    NETWORK_ERROR = "network_error"


_MESSAGES = {
    FetchErrorKind.FORBIDDEN: (
        "This website is blocking automated access. Try a different blog URL "
        "or check if the site requires authentication."
    ),
    FetchErrorKind.UNAUTHORIZED: "This blog requires authentication to access.",
    FetchErrorKind.NOT_FOUND: "Blog post not found (404). Please check the URL and try again.",
    FetchErrorKind.HTTP_ERROR: "Unable to fetch blog (HTTP {status}). Please try a different URL.",
    FetchErrorKind.TIMEOUT: "Request timeout. The website took too long to respond.",
    FetchErrorKind.DNS_NOT_FOUND: "Website not found. Please check the URL.",
    FetchErrorKind.CONNECTION_REFUSED: "Connection refused. The website may be down.",
    FetchErrorKind.NETWORK_ERROR: "Network error. Please check your internet connection.",
}

_STATUS_KINDS = {
    401: FetchErrorKind.UNAUTHORIZED,
    403: FetchErrorKind.FORBIDDEN,
    404: FetchErrorKind.NOT_FOUND,
}

# Substrings of resolver / socket error text, as raised by the OS through httpcore
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "no address associated with hostname",
)
_REFUSED_MARKERS = (
    "connection refused",
    "actively refused",
    "errno 111",
)


class FetchError(Exception):
    """A fetch failure carrying a human-readable, non-technical message."""

    def __init__(self, kind: FetchErrorKind, status_code: Optional[int] = None) -> None:
        self.kind = kind
        self.status_code = status_code
        self.message = _MESSAGES[kind].format(status=status_code)
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _classify_status(status_code: int) -> Optional[FetchError]:
    """Return the error for a client/server error status, or ``None`` for success."""
    if status_code < 400:
        return None
    kind = _STATUS_KINDS.get(status_code, FetchErrorKind.HTTP_ERROR)
    return FetchError(kind, status_code=status_code)


def _classify_transport_error(exc: httpx.HTTPError) -> FetchError:
    if isinstance(exc, httpx.TimeoutException):
        return FetchError(FetchErrorKind.TIMEOUT)
    if isinstance(exc, httpx.ConnectError):
        detail = str(exc).lower()
        if any(marker in detail for marker in _DNS_MARKERS):
            return FetchError(FetchErrorKind.DNS_NOT_FOUND)
        if any(marker in detail for marker in _REFUSED_MARKERS):
            return FetchError(FetchErrorKind.CONNECTION_REFUSED)
    return FetchError(FetchErrorKind.NETWORK_ERROR)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_url(url: object) -> bool:
    """Return ``True`` only for absolute ``http``/``https`` URLs with a host."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(host)


def fetch_url(url: str) -> RawDocument:
    """Fetch *url* and return a :class:`RawDocument`.

    A single GET is made with browser-like headers, following at most
    ``settings.max_redirects`` redirects within ``settings.request_timeout``
    seconds.

    Raises:
        FetchError: On any 4xx/5xx status or transport failure.  The
            message is safe to show to end users; the underlying ``httpx``
            exception is chained.
    """
    headers = {"User-Agent": settings.user_agent, **_BROWSER_HEADERS}
    logger.info(f"Fetching {url}")

    try:
        with httpx.Client(
            headers=headers,
            timeout=settings.request_timeout,
            follow_redirects=True,
            max_redirects=settings.max_redirects,
        ) as client:
            response = client.get(url)
    except httpx.HTTPError as exc:
        error = _classify_transport_error(exc)
        logger.debug(f"Transport failure for {url}: {exc!r}")
        logger.warning(f"Fetch failed for {url}: {error.kind.value}")
        raise error from exc

    error = _classify_status(response.status_code)
    if error is not None:
        logger.warning(f"Fetch failed for {url}: {error.kind.value} (HTTP {response.status_code})")
        raise error

    raw = RawDocument(
        html=response.text,
        final_url=str(response.url),
        status_code=response.status_code,
        headers=dict(response.headers.items()),
    )
    logger.info(f"Fetched {len(raw.html)} characters from {raw.final_url}")
    return raw
