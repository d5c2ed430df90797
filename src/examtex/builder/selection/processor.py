"""
Module: builder.selection.processor

Purpose:
    Prepare a question bank for generation and pick questions from it:
    id assignment, validation, filtering, seeded random selection and
    distribution of selected questions into template sections.

Key Functions:
    - validate_question(): Problems with one question

Key Classes:
    - QuestionProcessor: Seeded processor used by the generator

Algorithm (organize_sections):
    1. If any section declares a question_count, fill sections in order
       with that many questions each; leftovers go to the last section
    2. Otherwise split the questions evenly, ceil(n / sections) per section
    3. A template without sections gets a single "Questions" section

Dependencies:
    - random (std)
    - core.models: Question, QuestionBank, ExamTemplate

Used By:
    - builder.controller: ExamPaperGenerator
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence

from examtex.core.models import (
    OPTION_TYPES,
    ExamTemplate,
    Question,
    QuestionBank,
    QuestionType,
    TemplateSection,
)
from examtex.errors import InvalidArgumentError, QuestionValidationError

logger = logging.getLogger(__name__)

DEFAULT_SECTION_TITLE = "Questions"


def validate_question(question: Question) -> List[str]:
    """
    Return the problems that make ``question`` unusable (empty when valid).

    Rules:
        - type label and content must be non-blank
        - multiple-choice and true/false need at least two options
        - multiple-choice needs a correct answer
    """
    problems = []
    label = question.id or "<unassigned>"
    if not question.type_label.strip():
        problems.append(f"{label}: missing type")
    if not question.content.strip():
        problems.append(f"{label}: missing content")
    if question.type in OPTION_TYPES and len(question.options) < 2:
        problems.append(f"{label}: {question.type.value} needs at least 2 options")
    if question.type is QuestionType.MULTIPLE_CHOICE and not question.correct_keys:
        problems.append(f"{label}: multiple_choice needs a correct answer")
    return problems


def _matches(value: str, wanted: Optional[str]) -> bool:
    return wanted is None or value.strip().casefold() == wanted.strip().casefold()


@dataclass
class QuestionProcessor:
    """
    Question bank processing and selection.

    Attributes:
        seed: Random seed for reproducible selection (None = nondeterministic)

    Example:
        >>> processor = QuestionProcessor(seed=7)
        >>> bank = processor.process_question_bank(bank)
        >>> picked = processor.select_random(bank.questions, 10, difficulty="easy")
    """

    seed: Optional[int] = None

    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    # ─────────────────────────────────────────────────────────────────────
    # Processing and validation
    # ─────────────────────────────────────────────────────────────────────

    def process_question_bank(self, bank: QuestionBank) -> QuestionBank:
        """
        Return a copy of ``bank`` ready for generation.

        Questions without an id get ``<bank id>-q<position>``, then the
        bank is validated.

        Raises:
            InvalidArgumentError: If bank is None
            QuestionValidationError: If any question is invalid or ids repeat
        """
        if bank is None:
            raise InvalidArgumentError("question bank must not be None")

        questions = []
        for position, question in enumerate(bank.questions, start=1):
            if not question.id.strip():
                question = replace(question, id=f"{bank.id}-q{position}")
            questions.append(question)

        processed = replace(bank, questions=tuple(questions))
        self.validate_question_bank(processed)
        logger.debug(f"Processed question bank {bank.id!r}: {len(processed)} questions")
        return processed

    def validate_question_bank(self, bank: QuestionBank) -> None:
        """
        Raises:
            QuestionValidationError: Listing every problem found
        """
        problems: List[str] = []
        seen: Dict[str, int] = {}
        for question in bank.questions:
            problems.extend(validate_question(question))
            if question.id:
                seen[question.id] = seen.get(question.id, 0) + 1
        problems.extend(f"{qid}: duplicate id" for qid, n in seen.items() if n > 1)
        if problems:
            raise QuestionValidationError(
                f"Question bank {bank.id!r} has {len(problems)} invalid entries",
                errors=problems,
            )

    # ─────────────────────────────────────────────────────────────────────
    # Filtering and selection
    # ─────────────────────────────────────────────────────────────────────

    @staticmethod
    def filter_questions(
        questions: Sequence[Question],
        category: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> List[Question]:
        """Questions matching category and difficulty (case-insensitive)."""
        return [
            q for q in questions
            if _matches(q.category, category) and _matches(q.difficulty, difficulty)
        ]

    def select_random(
        self,
        questions: Sequence[Question],
        count: int,
        category: Optional[str] = None,
        difficulty: Optional[str] = None,
    ) -> List[Question]:
        """
        Up to ``count`` distinct questions, sampled after filtering.

        Returns fewer than ``count`` when not enough questions match.
        """
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")
        pool = self.filter_questions(questions, category, difficulty)
        if len(pool) < count:
            logger.warning(f"Requested {count} questions but only {len(pool)} match")
        return self._rng.sample(pool, min(count, len(pool)))

    def select_by_distribution(
        self,
        questions: Sequence[Question],
        distribution: Dict[str, int],
        by: str = "difficulty",
    ) -> List[Question]:
        """
        Sample per-value counts, e.g. ``{"easy": 3, "hard": 1}`` by difficulty.

        Args:
            by: "difficulty" or "category"
        """
        if by not in ("difficulty", "category"):
            raise InvalidArgumentError(f"Unknown distribution key: {by!r}")
        selected: List[Question] = []
        for value, count in distribution.items():
            if by == "difficulty":
                selected.extend(self.select_random(questions, count, difficulty=value))
            else:
                selected.extend(self.select_random(questions, count, category=value))
        return selected

    # ─────────────────────────────────────────────────────────────────────
    # Section organisation
    # ─────────────────────────────────────────────────────────────────────

    @staticmethod
    def organize_sections(template: ExamTemplate, questions: Sequence[Question]) -> ExamTemplate:
        """
        Return a copy of ``template`` whose sections reference ``questions``.

        The template itself is not modified.
        """
        if template is None:
            raise InvalidArgumentError("template must not be None")
        ids = [q.id for q in questions]
        sections = list(template.sections) or [TemplateSection(title=DEFAULT_SECTION_TITLE)]

        assigned: List[List[str]] = []
        if any(s.question_count for s in sections):
            cursor = 0
            for section in sections:
                assigned.append(ids[cursor:cursor + section.question_count])
                cursor += section.question_count
            assigned[-1].extend(ids[cursor:])
        else:
            per_section = -(-len(ids) // len(sections)) if ids else 0
            for i in range(len(sections)):
                assigned.append(ids[i * per_section:(i + 1) * per_section])

        return template.with_sections(
            section.with_question_ids(section_ids)
            for section, section_ids in zip(sections, assigned)
        )
