"""
Module: builder.layout.paginator

Purpose:
    Split a flattened question list into fixed-capacity pages.

Key Functions:
    - page_count(): Number of pages for n questions
    - paginate(): Page plans

Algorithm:
    total = max(1, ceil(n / capacity)); page p holds the questions in
    [(p-1) * capacity, min(p * capacity, n)). An empty list still yields
    one (empty) page.

Used By:
    - builder.compositor: Multi-page composition
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from examtex.core.models import Question
from examtex.errors import InvalidArgumentError

from .models import PagePlan

logger = logging.getLogger(__name__)


def page_count(question_count: int, questions_per_page: int) -> int:
    """Total pages for ``question_count`` questions, minimum 1."""
    if questions_per_page < 1:
        raise InvalidArgumentError(f"questions_per_page must be >= 1, got {questions_per_page}")
    if question_count < 0:
        raise InvalidArgumentError(f"question_count must be non-negative, got {question_count}")
    return max(1, -(-question_count // questions_per_page))


def paginate(questions: Sequence[Question], questions_per_page: int) -> List[PagePlan]:
    """
    Assign questions to pages in order.

    Args:
        questions: Flattened question list
        questions_per_page: Page capacity (>= 1)

    Returns:
        One PagePlan per page, numbered from 1

    Raises:
        InvalidArgumentError: If questions is None or capacity < 1

    Example:
        >>> [len(p.questions) for p in paginate(seven_questions, 3)]
        [3, 3, 1]
    """
    if questions is None:
        raise InvalidArgumentError("questions must not be None")
    total = page_count(len(questions), questions_per_page)

    pages = []
    for page_number in range(1, total + 1):
        start = (page_number - 1) * questions_per_page
        stop = min(page_number * questions_per_page, len(questions))
        pages.append(PagePlan(page_number=page_number, start=start, questions=tuple(questions[start:stop])))

    logger.debug(f"Paginated {len(questions)} questions onto {total} pages ({questions_per_page} per page)")
    return pages
