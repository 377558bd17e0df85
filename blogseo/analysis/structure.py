"""Rule-based structure scoring of a blog post.

Eight independent checks run against the content HTML, its plain text and
the document metadata.  Each check carries a fixed weight (the weights sum
to 100), a remediation hint and its checklist wording, so the whole rubric
lives in :data:`STRUCTURE_CHECKS`.

The patterns are deliberately plain regular expressions over the markup
and text; results are reproducible for a given input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence

from blogseo.scraper.models import Document, Metadata

STATUS_COMPLETE = "complete"
STATUS_INCOMPLETE = "incomplete"
STATUS_NEEDS_IMPROVEMENT = "needs-improvement"

DIRECT_ANSWER_MAX_CHARS = 300

_H1_RE = re.compile(r"<h1\b[^>]*>.*?</h1>", re.IGNORECASE | re.DOTALL)
_H2_RE = re.compile(r"<h2\b[^>]*>", re.IGNORECASE)
_LIST_RE = re.compile(r"<(?:ul|ol)\b[^>]*>", re.IGNORECASE)
_IMG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_PARAGRAPH_RE = re.compile(r"<p(?:\s[^>]*)?>(.*?)</p>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_TLDR_RE = re.compile(r"tl;?dr|summary|key (?:points?|takeaways)", re.IGNORECASE)
_EXTERNAL_LINK_RE = re.compile(r"""<a\b[^>]+href=["']http""", re.IGNORECASE)
_STATISTIC_RE = re.compile(
    r"\d+%|\$\d+|according to|research shows|study found", re.IGNORECASE
)

CTA_PATTERNS: Sequence[re.Pattern[str]] = (
    re.compile(r"<button", re.IGNORECASE),
    # Can match past the closing quote (class="x">nectar"). Tightening it changes scores.
    re.compile(r'class=".*?(?:cta|call-to-action|btn-primary).*?"', re.IGNORECASE),
    re.compile(
        r"get started|sign up|learn more|try (?:it|now)|contact us|subscribe",
        re.IGNORECASE,
    ),
)


class ContentView(NamedTuple):
    """What the checks look at: markup, text and metadata of one post."""

    html: str
    plain_text: str
    metadata: Metadata


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------

def first_paragraph_text(html: str) -> str:
    """Text of the first ``<p>`` element in *html*, tags stripped."""
    match = _PARAGRAPH_RE.search(html)
    if not match:
        return ""
    return _TAG_RE.sub("", match.group(1)).strip()


def has_main_question(view: ContentView) -> bool:
    return bool(_H1_RE.search(view.html))


def has_direct_answer(view: ContentView) -> bool:
    paragraph = first_paragraph_text(view.html)
    return 0 < len(paragraph) <= DIRECT_ANSWER_MAX_CHARS


def has_tldr(view: ContentView) -> bool:
    return bool(_TLDR_RE.search(view.plain_text))


def has_visuals(view: ContentView) -> bool:
    return bool(_IMG_RE.search(view.html))


def has_cta(view: ContentView) -> bool:
    return any(
        pattern.search(view.html) or pattern.search(view.plain_text)
        for pattern in CTA_PATTERNS
    )


def has_proper_formatting(view: ContentView) -> bool:
    return bool(_H2_RE.search(view.html)) and bool(_LIST_RE.search(view.html))


def has_author_info(view: ContentView) -> bool:
    return bool(view.metadata.author or view.metadata.publish_date)


def has_citable_content(view: ContentView) -> bool:
    return bool(_EXTERNAL_LINK_RE.search(view.html) or _STATISTIC_RE.search(view.html))


# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureCheck:
    name: str
    checklist_key: str
    weight: int
    test: Callable[[ContentView], bool]
    recommendation: str
    passed_message: str
    failed_message: str
    suggestion: str
    failed_status: str = STATUS_INCOMPLETE
    failed_score: int = 0


STRUCTURE_CHECKS: Sequence[StructureCheck] = (
    StructureCheck(
        name="has_main_question",
        checklist_key="mainQuestion",
        weight=15,
        test=has_main_question,
        recommendation="Add a clear, question-focused H1 title",
        passed_message="Main question found as H1",
        failed_message="No clear main question (H1) found",
        suggestion="Create a question-focused H1 that targets user search intent",
    ),
    StructureCheck(
        name="has_direct_answer",
        checklist_key="directAnswer",
        weight=15,
        test=has_direct_answer,
        recommendation="Start with a concise 1-2 sentence answer",
        passed_message="Direct answer present in opening",
        failed_message="Missing quick 1-2 sentence answer",
        suggestion="Add a concise answer at the beginning (1-2 sentences max)",
    ),
    StructureCheck(
        name="has_tldr",
        checklist_key="tldrSummary",
        weight=12,
        test=has_tldr,
        recommendation="Include a TL;DR summary section",
        passed_message="TL;DR summary found",
        failed_message="No TL;DR or summary section",
        suggestion="Add a TL;DR section with 3-5 key bullet points",
    ),
    StructureCheck(
        name="has_visuals",
        checklist_key="visuals",
        weight=10,
        test=has_visuals,
        recommendation="Add relevant images or diagrams",
        passed_message="Visuals present in content",
        failed_message="No images, diagrams, or charts found",
        suggestion="Add relevant images, diagrams, or screenshots to support content",
    ),
    StructureCheck(
        name="has_cta",
        checklist_key="callToAction",
        weight=10,
        test=has_cta,
        recommendation="Add a clear call-to-action",
        passed_message="Call to action present",
        failed_message="No clear call to action",
        suggestion="Add a CTA to encourage user interaction or next steps",
    ),
    StructureCheck(
        name="has_proper_formatting",
        checklist_key="formatting",
        weight=13,
        test=has_proper_formatting,
        recommendation="Improve structure with H2/H3 headings and lists",
        passed_message="Good heading hierarchy and structure",
        failed_message="Formatting could be improved",
        suggestion="Use H2/H3 headings, bullet points, and one idea per section",
        failed_status=STATUS_NEEDS_IMPROVEMENT,
        failed_score=50,
    ),
    StructureCheck(
        name="has_author_info",
        checklist_key="authorCredibility",
        weight=12,
        test=has_author_info,
        recommendation="Add author credentials and dates",
        passed_message="Author information present",
        failed_message="Missing author name or publish date",
        suggestion="Add author name, credentials, and publish/update dates",
    ),
    StructureCheck(
        name="has_citable_content",
        checklist_key="citableContent",
        weight=13,
        test=has_citable_content,
        recommendation="Include statistics and cite sources",
        passed_message="Contains sources and citations",
        failed_message="No sources or citations found",
        suggestion="Add statistics, case studies, and link to authoritative sources",
    ),
)

CHECKLIST_ORDER = (
    "mainQuestion",
    "directAnswer",
    "tldrSummary",
    "visuals",
    "formatting",
    "authorCredibility",
    "citableContent",
    "callToAction",
)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class StructureAnalysis:
    score: int
    has_main_question: bool
    has_direct_answer: bool
    has_tldr: bool
    has_visuals: bool
    has_cta: bool
    has_proper_formatting: bool
    has_author_info: bool
    has_citable_content: bool
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "hasMainQuestion": self.has_main_question,
            "hasDirectAnswer": self.has_direct_answer,
            "hasTldr": self.has_tldr,
            "hasVisuals": self.has_visuals,
            "hasCTA": self.has_cta,
            "hasProperFormatting": self.has_proper_formatting,
            "hasAuthorInfo": self.has_author_info,
            "hasCitableContent": self.has_citable_content,
            "recommendations": list(self.recommendations),
        }


@dataclass
class ChecklistItem:
    status: str
    score: int
    message: str
    ai_suggestion: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": self.status,
            "score": self.score,
            "message": self.message,
        }
        if self.ai_suggestion is not None:
            data["aiSuggestion"] = self.ai_suggestion
        return data


@dataclass
class OptimizationChecklist:
    """One :class:`ChecklistItem` per structure check, keyed in camelCase."""

    items: Dict[str, ChecklistItem]

    def __getitem__(self, key: str) -> ChecklistItem:
        return self.items[key]

    def to_dict(self) -> dict[str, Any]:
        return {key: self.items[key].to_dict() for key in CHECKLIST_ORDER}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def calculate_score(results: Dict[str, bool]) -> int:
    """Sum the weights of the checks that passed."""
    return sum(check.weight for check in STRUCTURE_CHECKS if results.get(check.name))


def analyze_content(html: str, plain_text: str, metadata: Metadata) -> StructureAnalysis:
    """Score raw content; used directly when re-analysing edited HTML."""
    view = ContentView(html or "", plain_text or "", metadata)
    results = {check.name: check.test(view) for check in STRUCTURE_CHECKS}
    recommendations = [
        check.recommendation for check in STRUCTURE_CHECKS if not results[check.name]
    ]
    return StructureAnalysis(
        score=calculate_score(results),
        recommendations=recommendations,
        **results,
    )


def analyze_structure(document: Document) -> StructureAnalysis:
    """Run the structure rubric against *document*'s content and metadata."""
    return analyze_content(document.content.html, document.content.plain_text, document.metadata)


def generate_checklist(
    document: Optional[Document], analysis: StructureAnalysis
) -> OptimizationChecklist:
    """Turn *analysis* into a per-criterion checklist with remediation hints.

    *document* is accepted so callers pass the pair they analysed; the
    checklist itself is derived from *analysis* alone.
    """
    items: Dict[str, ChecklistItem] = {}
    for check in STRUCTURE_CHECKS:
        if getattr(analysis, check.name):
            items[check.checklist_key] = ChecklistItem(
                status=STATUS_COMPLETE, score=100, message=check.passed_message
            )
        else:
            items[check.checklist_key] = ChecklistItem(
                status=check.failed_status,
                score=check.failed_score,
                message=check.failed_message,
                ai_suggestion=check.suggestion,
            )
    return OptimizationChecklist(items={key: items[key] for key in CHECKLIST_ORDER})
