"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from blogseo.api import app

    uvicorn blogseo.api:app --reload
"""

from blogseo.api.app import app

__all__ = ["app"]
