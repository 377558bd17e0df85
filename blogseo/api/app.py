"""FastAPI application factory.

Lifespan
--------
On startup the app configures the loguru sink and logs the effective
settings.  There is no other shared state: every request builds and owns
its own document.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /blog      — fetch + parse a post, score edited content
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from blogseo import __version__
from blogseo.config import settings
from blogseo.log import configure_logging

from blogseo.api.routers import blog as blog_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    configure_logging()
    logger.info(f"CORS enabled for: {settings.frontend_url}")
    logger.info(
        f"Fetcher: timeout={settings.request_timeout}s max_redirects={settings.max_redirects}"
    )
    yield


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Invalid request body",
            "details": str(exc.errors()),
        },
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="blogseo API",
        description=(
            "Fetches blog posts, extracts their metadata and main content, "
            "detects the publishing platform and scores the post structure."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(blog_router.router, prefix="/blog", tags=["blog"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok", "message": "blogseo backend is running"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn blogseo.api.app:app --reload
app = create_app()
