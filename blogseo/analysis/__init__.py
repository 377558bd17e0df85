"""Analysis package — structure scoring, editor state and AI payloads."""

from blogseo.analysis.ai_context import AIContext, build_ai_context
from blogseo.analysis.structure import (
    ChecklistItem,
    OptimizationChecklist,
    StructureAnalysis,
    analyze_content,
    analyze_structure,
    generate_checklist,
)

__all__ = [
    "analyze_structure",
    "analyze_content",
    "generate_checklist",
    "StructureAnalysis",
    "ChecklistItem",
    "OptimizationChecklist",
    "AIContext",
    "build_ai_context",
]
