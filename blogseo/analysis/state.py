"""Editor session state as an immutable value with pure transitions.

Front-ends keep one :class:`AppState` per editing session and replace it
with the return value of a transition; nothing here mutates its input.
Transitions that change the edited content re-run the structure analysis
so ``structure_analysis`` and ``optimization_checklist`` always describe
the current editor HTML.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from blogseo.analysis.structure import (
    OptimizationChecklist,
    StructureAnalysis,
    analyze_content,
    generate_checklist,
)
from blogseo.scraper.dom import parse_html
from blogseo.scraper.models import Document, Metadata


@dataclass(frozen=True)
class AppState:
    blog_url: str = ""
    original_blog: Optional[Document] = None
    editor_content: str = ""
    editor_html: str = ""
    meta_tags: Optional[Dict[str, Any]] = None
    schemas: Tuple[Dict[str, Any], ...] = ()
    applied_optimizations: Tuple[str, ...] = ()
    structure_analysis: Optional[StructureAnalysis] = None
    optimization_checklist: Optional[OptimizationChecklist] = None
    error: Optional[str] = None


INITIAL_STATE = AppState()


def _metadata_of(state: AppState) -> Metadata:
    if state.original_blog is not None:
        return state.original_blog.metadata
    return Metadata()


def _reanalyse(state: AppState) -> AppState:
    if not state.editor_html and state.original_blog is None:
        return replace(state, structure_analysis=None, optimization_checklist=None)
    analysis = analyze_content(state.editor_html, state.editor_content, _metadata_of(state))
    return replace(
        state,
        structure_analysis=analysis,
        optimization_checklist=generate_checklist(state.original_blog, analysis),
    )


def set_blog_url(state: AppState, url: str) -> AppState:
    return replace(state, blog_url=url)


def set_original_blog(state: AppState, blog: Optional[Document]) -> AppState:
    """Load *blog* into the editor, seeding meta tags from its metadata."""
    if blog is None:
        return _reanalyse(
            replace(state, original_blog=None, editor_content="", editor_html="", meta_tags=None)
        )
    meta_tags = {
        "title": blog.metadata.title,
        "description": blog.metadata.description or "",
        "author": blog.metadata.author,
    }
    return _reanalyse(
        replace(
            state,
            original_blog=blog,
            editor_content=blog.content.plain_text,
            editor_html=blog.content.html,
            meta_tags=meta_tags,
            error=None,
        )
    )


def set_editor_html(state: AppState, html: str) -> AppState:
    """Replace the edited HTML; plain text is re-derived from it."""
    text = parse_html(html).text().strip()
    return _reanalyse(replace(state, editor_html=html, editor_content=text))


def update_meta_tags(state: AppState, **tags: Any) -> AppState:
    """Merge *tags* into the current meta tags; no-op when none are loaded."""
    if state.meta_tags is None:
        return state
    return replace(state, meta_tags={**state.meta_tags, **tags})


def add_schema(state: AppState, schema: Dict[str, Any]) -> AppState:
    return replace(state, schemas=state.schemas + (schema,))


def remove_schema(state: AppState, index: int) -> AppState:
    return replace(
        state, schemas=tuple(s for i, s in enumerate(state.schemas) if i != index)
    )


def update_schema(state: AppState, index: int, schema: Dict[str, Any]) -> AppState:
    return replace(
        state,
        schemas=tuple(schema if i == index else s for i, s in enumerate(state.schemas)),
    )


def add_applied_optimization(state: AppState, optimization_id: str) -> AppState:
    return replace(state, applied_optimizations=state.applied_optimizations + (optimization_id,))


def set_error(state: AppState, error: Optional[str]) -> AppState:
    return replace(state, error=error)


def reset(state: AppState) -> AppState:  # noqa: ARG001
    return INITIAL_STATE
