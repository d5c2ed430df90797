"""
Module: builder.compositor

Purpose:
    Compose an exam template and its questions into the final document.
    Renders the body, answer-sheet and layout streams and hands them to
    the dynamic content inserter in a single call.

Key Functions:
    - compose_single_page(): Section-ordered document, numbering restarts
      at 1 in each section
    - compose_multi_page(): Fixed-capacity pages over a flattened question
      list, numbering runs across the whole document

Algorithm (multi-page):
    1. Paginate into ceil(n / capacity) pages (minimum 1)
    2. Fold each page into an immutable stream accumulator:
       page break (pages > 1), questions with global numbers, answer
       entries, seal line on every page, header on page 1 only,
       header/footer on every page
    3. Insert the concatenated streams into the raw template once

Dependencies:
    - builder.content: Question and section rendering
    - builder.layout: Layout elements and paginator
    - builder.templates.inserter: Placeholder substitution

Used By:
    - builder.controller: ExamPaperGenerator
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from functools import reduce
from typing import Optional, Sequence, Tuple

from examtex.core.models import (
    DEFAULT_EXAM_TIME,
    ExamTemplate,
    GeneratedDocument,
    HeaderConfig,
    PageRange,
    Question,
)
from examtex.errors import InvalidArgumentError

from .content import render_answer_sheet_entry, render_question, render_section
from .layout import (
    DEFAULT_QUESTIONS_PER_PAGE,
    PAGE_BREAK,
    PagePlan,
    paginate,
    render_header,
    render_header_footer,
    render_seal_line,
)
from .templates.inserter import insert_dynamic_content, total_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Streams:
    """Immutable accumulator for the three output streams."""
    body: Tuple[str, ...] = field(default_factory=tuple)
    answer_sheet: Tuple[str, ...] = field(default_factory=tuple)
    layout: Tuple[str, ...] = field(default_factory=tuple)
    questions: Tuple[Question, ...] = field(default_factory=tuple)

    def add(
        self,
        body: Sequence[str] = (),
        answer_sheet: Sequence[str] = (),
        layout: Sequence[str] = (),
        questions: Sequence[Question] = (),
    ) -> "_Streams":
        return replace(
            self,
            body=self.body + tuple(body),
            answer_sheet=self.answer_sheet + tuple(answer_sheet),
            layout=self.layout + tuple(layout),
            questions=self.questions + tuple(questions),
        )

    @property
    def rendered(self) -> int:
        return len(self.questions)

    @property
    def points(self) -> Decimal:
        return total_points(self.questions)


def resolve_header_config(
    template: ExamTemplate,
    questions: Sequence[Question],
    exam_time: int = DEFAULT_EXAM_TIME,
) -> HeaderConfig:
    """Template header config (or the default) with blanks filled in."""
    base = template.header_config or HeaderConfig()
    return base.resolved_for(template, total_points=total_points(questions), exam_time=exam_time)


def _check_inputs(raw_text: str, template: ExamTemplate, questions: Sequence[Question]) -> None:
    if template is None:
        raise InvalidArgumentError("template must not be None")
    if questions is None:
        raise InvalidArgumentError("questions must not be None")
    if raw_text is None:
        raise InvalidArgumentError("raw template text must not be None")


def _page_layout(
    template: ExamTemplate,
    header_config: HeaderConfig,
    page_number: int,
    total_pages: int,
) -> Tuple[str, ...]:
    parts = [
        render_seal_line(template, page_number, total_pages, header_config),
        render_header(header_config, page_number) if page_number == 1 else "",
        render_header_footer(template, page_number, total_pages, header_config),
    ]
    return tuple(p for p in parts if p)


def _finish(
    raw_text: str,
    answer_sheet_text: Optional[str],
    template: ExamTemplate,
    streams: _Streams,
    page_ranges: Tuple[PageRange, ...],
    exam_time: int,
) -> GeneratedDocument:
    body = "".join(streams.body)
    answer_sheet = "".join(streams.answer_sheet)
    layout = "".join(streams.layout)

    document = insert_dynamic_content(
        raw_text, template, streams.questions,
        body=body, answer_sheet=answer_sheet, layout=layout, exam_time=exam_time,
    )
    answer_document = None
    if answer_sheet_text is not None:
        answer_document = insert_dynamic_content(
            answer_sheet_text, template, streams.questions,
            body=body, answer_sheet=answer_sheet, layout=layout, exam_time=exam_time,
        )

    return GeneratedDocument(
        document=document,
        answer_sheet=answer_document,
        body=body,
        answer_sheet_body=answer_sheet,
        layout=layout,
        total_points=streams.points,
        page_count=max((r.page_number for r in page_ranges), default=1),
        page_ranges=page_ranges,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Single-page mode
# ─────────────────────────────────────────────────────────────────────────────

def compose_single_page(
    raw_text: str,
    template: ExamTemplate,
    questions: Sequence[Question],
    *,
    exam_time: int = DEFAULT_EXAM_TIME,
    answer_sheet_text: Optional[str] = None,
) -> GeneratedDocument:
    """
    Compose a section-ordered document.

    Each section renders its heading, then the questions from
    ``questions`` whose id it references (in list order), numbered from 1
    within the section. Sections without matches render the heading only.

    Args:
        raw_text: Raw template text with placeholder tokens
        template: Exam template
        questions: Candidate questions
        exam_time: Minutes for {EXAM_TIME}
        answer_sheet_text: Optional raw answer-sheet template

    Returns:
        GeneratedDocument with one page

    Raises:
        InvalidArgumentError: If any required argument is None
    """
    _check_inputs(raw_text, template, questions)

    streams = _Streams()
    for section in template.sections:
        wanted = set(section.question_ids)
        matched = [q for q in questions if q.id in wanted]
        body = [render_section(section)]
        answers = []
        for local_index, question in enumerate(matched, start=1):
            body.append(render_question(question, local_index))
            answers.append(render_answer_sheet_entry(question, local_index))
        streams = streams.add(body=body, answer_sheet=answers, questions=matched)

    header_config = resolve_header_config(template, streams.questions, exam_time)
    streams = streams.add(layout=_page_layout(template, header_config, 1, 1))
    page_ranges = (PageRange(1, 0, streams.rendered, tuple(q.id for q in streams.questions)),)

    logger.debug(
        f"Composed single-page document: {len(template.sections)} sections, "
        f"{streams.rendered} questions"
    )
    return _finish(raw_text, answer_sheet_text, template, streams, page_ranges, exam_time)


# ─────────────────────────────────────────────────────────────────────────────
# Multi-page mode
# ─────────────────────────────────────────────────────────────────────────────

def _fold_page(
    template: ExamTemplate,
    header_config: HeaderConfig,
    total_pages: int,
    page_break: str,
):
    def fold(streams: _Streams, page: PagePlan) -> _Streams:
        breaks = (f"{page_break}\n",) if page.page_number > 1 else ()
        body = list(breaks)
        answers = []
        for offset, question in enumerate(page.questions):
            number = page.start + offset + 1
            body.append(render_question(question, number))
            answers.append(render_answer_sheet_entry(question, number))
        layout = breaks + _page_layout(template, header_config, page.page_number, total_pages)
        return streams.add(body=body, answer_sheet=answers, layout=layout, questions=page.questions)

    return fold


def compose_multi_page(
    raw_text: str,
    template: ExamTemplate,
    questions: Sequence[Question],
    questions_per_page: int = DEFAULT_QUESTIONS_PER_PAGE,
    *,
    exam_time: int = DEFAULT_EXAM_TIME,
    answer_sheet_text: Optional[str] = None,
    page_break: str = PAGE_BREAK,
) -> GeneratedDocument:
    """
    Compose a paginated document over a flattened question list.

    Questions are numbered 1..n across the whole document. A page break
    marker precedes every page after the first, in both the body and the
    layout stream.

    Args:
        raw_text: Raw template text with placeholder tokens
        template: Exam template
        questions: Questions, already resolved from sections
        questions_per_page: Page capacity (>= 1)
        exam_time: Minutes for {EXAM_TIME}
        answer_sheet_text: Optional raw answer-sheet template
        page_break: Page break marker

    Returns:
        GeneratedDocument with per-page ranges

    Raises:
        InvalidArgumentError: If any required argument is None or the
            capacity is below 1
    """
    _check_inputs(raw_text, template, questions)
    if questions_per_page < 1:
        raise InvalidArgumentError(f"questions_per_page must be >= 1, got {questions_per_page}")
    header_config = resolve_header_config(template, questions, exam_time)

    pages = paginate(questions, questions_per_page)
    streams = reduce(
        _fold_page(template, header_config, len(pages), page_break),
        pages,
        _Streams(),
    )
    page_ranges = tuple(page.to_range() for page in pages)

    logger.debug(
        f"Composed multi-page document: {streams.rendered} questions on {len(pages)} pages"
    )
    return _finish(raw_text, answer_sheet_text, template, streams, page_ranges, exam_time)
