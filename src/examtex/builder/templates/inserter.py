"""
Module: builder.templates.inserter

Purpose:
    Substitute placeholder tokens in raw template text with exam metadata
    and pre-rendered fragments.

Key Functions:
    - insert_dynamic_content(): Produce the final document
    - find_placeholders(): Tokens present in raw template text
    - unresolved_placeholders(): Known tokens left in a document
    - render_answer_sheet_commands(): \\answersheet command definition

Algorithm:
    One regex pass over the raw text. Each known token with a value is
    replaced; values are never rescanned, so substituted fragments may
    contain token-like text safely. Tokens without a value and unknown
    brace strings stay in place unchanged.

Dependencies:
    - core.utils: escape_latex, format_decimal
    - builder.layout: Seal line and header/footer setup fragments

Used By:
    - builder.compositor
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

from examtex.core.models import DEFAULT_EXAM_TIME, ExamTemplate, Question
from examtex.core.utils import escape_latex, format_decimal
from examtex.errors import InvalidArgumentError, TemplateContentUnavailableError

from ..layout.header_footer import render_header_footer_setup
from ..layout.seal_line import render_seal_line_definition

logger = logging.getLogger(__name__)

PLACEHOLDERS = (
    "EXAM_TITLE",
    "SUBJECT",
    "EXAM_TIME",
    "TOTAL_POINTS",
    "HEADER_CONTENT",
    "FOOTER_CONTENT",
    "CONTENT",
    "ANSWER_SHEET_CONTENT",
    "LAYOUT_ELEMENTS",
    "PAPER_SIZE",
    "SEAL_LINE_COMMANDS",
    "HEADER_FOOTER_SETUP",
    "ANSWER_SHEET_COMMANDS",
)

_PLACEHOLDER_PATTERN = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")

_ANSWER_SHEET_COMMANDS = r"""% Answer sheet heading: #1 = exam title
\providecommand{\answersheet}[1]{%
  \begin{center}{\Large\textbf{#1}}\\[0.5em]{\large Answer Sheet}\end{center}%
  \vspace{1em}%
}
"""


def render_answer_sheet_commands() -> str:
    return _ANSWER_SHEET_COMMANDS


def total_points(questions: Sequence[Question]) -> Decimal:
    return sum((q.points for q in questions), Decimal(0))


def find_placeholders(raw_text: str) -> List[str]:
    """Known tokens present in ``raw_text``, in first-seen order."""
    seen: Dict[str, None] = {}
    for match in _PLACEHOLDER_PATTERN.finditer(raw_text or ""):
        seen.setdefault(match.group(1), None)
    return list(seen)


def unresolved_placeholders(document: str) -> List[str]:
    """Known tokens still present in a generated document."""
    return find_placeholders(document)


def insert_dynamic_content(
    raw_text: str,
    template: ExamTemplate,
    questions: Sequence[Question],
    *,
    body: str = "",
    answer_sheet: str = "",
    layout: str = "",
    exam_time: int = DEFAULT_EXAM_TIME,
    extra: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Replace placeholder tokens in ``raw_text``.

    Plain-text values (title, subject, header and footer text) are
    escaped; ``body``, ``answer_sheet`` and ``layout`` are inserted as
    already-rendered markup.

    Args:
        raw_text: Raw template text
        template: Template supplying title, subject and header/footer text
        questions: Questions whose points are summed for {TOTAL_POINTS}
        body: Rendered question body
        answer_sheet: Rendered answer-sheet entries
        layout: Rendered layout elements
        exam_time: Minutes for {EXAM_TIME}
        extra: Additional token -> markup values, inserted verbatim;
            overrides built-in values for the same token

    Returns:
        Document text with every known token that has a value replaced

    Raises:
        InvalidArgumentError: If raw_text, template or questions is None
        TemplateContentUnavailableError: If raw_text is blank
    """
    if raw_text is None:
        raise InvalidArgumentError("raw template text must not be None")
    if template is None:
        raise InvalidArgumentError("template must not be None")
    if questions is None:
        raise InvalidArgumentError("questions must not be None")
    if not raw_text.strip():
        raise TemplateContentUnavailableError("raw template text is empty")

    values: Dict[str, str] = {
        "EXAM_TITLE": escape_latex(template.name),
        "SUBJECT": escape_latex(template.description),
        "EXAM_TIME": str(exam_time),
        "TOTAL_POINTS": format_decimal(total_points(questions)),
        "HEADER_CONTENT": escape_latex(template.header_content),
        "FOOTER_CONTENT": escape_latex(template.footer_content),
        "CONTENT": body,
        "ANSWER_SHEET_CONTENT": answer_sheet,
        "LAYOUT_ELEMENTS": layout,
        "PAPER_SIZE": template.paper_size.latex_option,
        "SEAL_LINE_COMMANDS": render_seal_line_definition(),
        "HEADER_FOOTER_SETUP": render_header_footer_setup(),
        "ANSWER_SHEET_COMMANDS": render_answer_sheet_commands(),
    }
    if extra:
        values.update(extra)

    pattern = _PLACEHOLDER_PATTERN
    if extra and any(key not in PLACEHOLDERS for key in extra):
        names = list(PLACEHOLDERS) + [key for key in extra if key not in PLACEHOLDERS]
        pattern = re.compile(r"\{(" + "|".join(re.escape(n) for n in names) + r")\}")

    document = pattern.sub(lambda m: values.get(m.group(1), m.group(0)), raw_text)
    logger.debug(f"Inserted dynamic content into {len(raw_text)} chars of template text")
    return document
