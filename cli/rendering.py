"""Plain-text rendering of documents and structure analyses for the CLI."""

from __future__ import annotations

from typing import List

from blogseo.analysis.structure import (
    STATUS_COMPLETE,
    STATUS_NEEDS_IMPROVEMENT,
    OptimizationChecklist,
    StructureAnalysis,
)
from blogseo.scraper.models import Document

_STATUS_ICONS = {
    STATUS_COMPLETE: "✅",
    STATUS_NEEDS_IMPROVEMENT: "⚠️ ",
}
_BAR_WIDTH = 20


def render_document(document: Document) -> str:
    """Summarise a fetched document in a few labelled lines."""
    meta = document.metadata
    content = document.content
    lines = [
        f"Title    : {meta.title}",
        f"URL      : {document.url}",
        f"Platform : {document.platform.value}",
        f"Author   : {meta.author or '(none)'}",
        f"Published: {meta.publish_date or '(none)'}",
        f"Words    : {content.word_count}  (~{content.reading_time} min read)",
        f"Headings : {len(content.headings)}",
        f"Images   : {len(content.images)}",
        f"Links    : {len(content.links)} "
        f"({sum(1 for lnk in content.links if lnk.is_external)} external)",
    ]
    return "\n".join(lines)


def render_score_bar(score: int) -> str:
    filled = round(score / 100 * _BAR_WIDTH)
    return f"[{'#' * filled}{'.' * (_BAR_WIDTH - filled)}] {score}/100"


def render_analysis(analysis: StructureAnalysis, checklist: OptimizationChecklist) -> str:
    """Render the score, the checklist and the recommendations."""
    lines: List[str] = [f"Structure score: {render_score_bar(analysis.score)}", ""]

    for key, item in checklist.to_dict().items():
        icon = _STATUS_ICONS.get(item["status"], "❌")
        lines.append(f"  {icon} {key:<18} {item['message']}")
        if "aiSuggestion" in item:
            lines.append(f"       → {item['aiSuggestion']}")

    if analysis.recommendations:
        lines.append("")
        lines.append("Recommendations:")
        for i, rec in enumerate(analysis.recommendations, start=1):
            lines.append(f"  {i}. {rec}")

    return "\n".join(lines)
