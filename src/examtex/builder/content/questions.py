"""
Module: builder.content.questions

Purpose:
    Render a single question, or its answer-sheet entry, into a LaTeX
    fragment. One renderer per QuestionType, selected through a dispatch
    table with an explicit GENERIC arm.

Key Functions:
    - render_question(): Generic entry point; dispatches on question type
      through RENDERERS and falls back to render_generic()
    - render_multiple_choice(), render_fill_in_blank(), render_essay(),
      render_true_false(): Per-type renderers
    - render_generic(): Arm for GENERIC and unrecognised types (option
      list when options exist, essay-style space otherwise)
    - render_answer_sheet_entry(): Condensed entry with an answer blank

Dependencies:
    - core.utils.escaping: escape_latex
    - core.utils.formatting: format_decimal

Used By:
    - builder.compositor: Single-page and multi-page composition
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from examtex.core.models import Question, QuestionType
from examtex.core.utils import escape_latex, format_decimal
from examtex.errors import InvalidArgumentError

# Fixed layout widths
BODY_BLANK_WIDTH = "3cm"
ANSWER_BLANK_WIDTH = "5cm"
CHOICE_BLANK_WIDTH = "2cm"
ESSAY_SPACE = "5cm"

TRUE_FALSE_ITEMS = ("Correct", "Incorrect")

_BLANK_RUN = re.compile(r"_{3,}")


def _require_question(question: Optional[Question]) -> Question:
    if question is None:
        raise InvalidArgumentError("question must not be None")
    return question


def _points_text(points: Decimal) -> str:
    unit = "point" if points == 1 else "points"
    return f"({format_decimal(points)} {unit})"


def _underline(width: str) -> str:
    return rf"\underline{{\hspace{{{width}}}}}"


def render_label(question: Question, index: int) -> str:
    """Bold question label, points suffix and optional tags."""
    parts = [rf"\textbf{{Question {index}}}", _points_text(question.points)]
    for tag in (question.difficulty, question.category):
        escaped = escape_latex(tag)
        if escaped:
            parts.append(f"[{escaped}]")
    return " ".join(parts)


def _render_items(items: List[str]) -> List[str]:
    lines = [r"\begin{enumerate}"]
    lines.extend(items)
    lines.append(r"\end{enumerate}")
    return lines


def _option_items(question: Question) -> List[str]:
    items = []
    for option in question.options:
        key = escape_latex(option.key)
        value = escape_latex(option.value)
        items.append(rf"\item[{key}.] {value}" if key else rf"\item {value}")
    return items


def _finish(lines: List[str]) -> str:
    return "\n".join(lines) + "\n\n"


# ─────────────────────────────────────────────────────────────────────────────
# Per-type renderers
# ─────────────────────────────────────────────────────────────────────────────

def render_multiple_choice(question: Question, index: int) -> str:
    """Label, content and one enumerated item per option in original order."""
    question = _require_question(question)
    lines = [render_label(question, index), "", escape_latex(question.content)]
    if question.has_options:
        lines.extend(_render_items(_option_items(question)))
    return _finish(lines)


def _fill_blank(content: str) -> str:
    match = _BLANK_RUN.search(content)
    if match is None:
        return escape_latex(content)
    # Escape around the blank so the marker itself stays raw markup.
    before = content[: match.start()]
    after = content[match.end():]
    return f"{escape_latex(before)}{_underline(BODY_BLANK_WIDTH)}{escape_latex(after)}"


def render_fill_in_blank(question: Question, index: int) -> str:
    """
    Label and content with the first run of 3+ underscores replaced by a
    fixed-width underlined blank.

    Content without such a run is emitted escaped and otherwise unchanged.
    """
    question = _require_question(question)
    return _finish([render_label(question, index), "", _fill_blank(question.content)])


def render_essay(question: Question, index: int) -> str:
    question = _require_question(question)
    lines = [render_label(question, index), "", escape_latex(question.content)]
    lines.append(rf"\vspace{{{ESSAY_SPACE}}}")
    return _finish(lines)


def render_true_false(question: Question, index: int) -> str:
    question = _require_question(question)
    lines = [render_label(question, index), "", escape_latex(question.content)]
    lines.extend(_render_items([rf"\item {item}" for item in TRUE_FALSE_ITEMS]))
    return _finish(lines)


def render_generic(question: Question, index: int) -> str:
    """Fallback: option list when options exist, essay-style space otherwise."""
    question = _require_question(question)
    lines = [render_label(question, index), "", escape_latex(question.content)]
    if question.has_options:
        lines.extend(_render_items(_option_items(question)))
    else:
        lines.append(rf"\vspace{{{ESSAY_SPACE}}}")
    return _finish(lines)


QuestionRenderer = Callable[[Question, int], str]

RENDERERS: Dict[QuestionType, QuestionRenderer] = {
    QuestionType.MULTIPLE_CHOICE: render_multiple_choice,
    QuestionType.FILL_IN_BLANK: render_fill_in_blank,
    QuestionType.ESSAY: render_essay,
    QuestionType.TRUE_FALSE: render_true_false,
    QuestionType.GENERIC: render_generic,
}


def render_question(question: Question, index: int) -> str:
    """
    Render ``question`` with display number ``index``.

    Args:
        question: Question to render
        index: 1-based display number

    Returns:
        LaTeX fragment ending with a blank line

    Raises:
        InvalidArgumentError: If question is None
    """
    question = _require_question(question)
    return RENDERERS.get(question.type, render_generic)(question, index)


# ─────────────────────────────────────────────────────────────────────────────
# Answer sheet
# ─────────────────────────────────────────────────────────────────────────────

_ANSWER_BLANKS: Dict[QuestionType, str] = {
    QuestionType.MULTIPLE_CHOICE: CHOICE_BLANK_WIDTH,
    QuestionType.TRUE_FALSE: CHOICE_BLANK_WIDTH,
    QuestionType.FILL_IN_BLANK: ANSWER_BLANK_WIDTH,
    QuestionType.GENERIC: ANSWER_BLANK_WIDTH,
}


def render_answer_sheet_entry(question: Question, index: int) -> str:
    """
    Condensed answer-sheet entry: label, answer blank and points.

    Narrow blank for multiple-choice and true/false, wide blank for
    fill-in-blank and generic questions, vertical space for essays.
    """
    question = _require_question(question)
    label = rf"\textbf{{Question {index}}}"
    points = _points_text(question.points)
    if question.type is QuestionType.ESSAY:
        return f"{label} {points}\n\\vspace{{{ESSAY_SPACE}}}\n\n"
    width = _ANSWER_BLANKS.get(question.type, ANSWER_BLANK_WIDTH)
    return f"{label} {_underline(width)} {points}\n\n"
