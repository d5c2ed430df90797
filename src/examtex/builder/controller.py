"""
Module: builder.controller

Purpose:
    Orchestrate exam paper generation.
    Resolve → Process → Select → Organise → Compose

Key Classes:
    - ExamPaperGenerator: Main entry point
    - GenerationResult: Complete generation result

Dependencies:
    - builder.loading: Template and question bank repositories
    - builder.selection: QuestionProcessor
    - builder.templates: TemplateRegistry
    - builder.compositor: Single-page and multi-page composition

Used By:
    - Applications embedding examtex
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from examtex.core.models import ExamTemplate, GeneratedDocument, Question, QuestionBank
from examtex.errors import (
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    UnsupportedStyleError,
)

from .compositor import compose_multi_page, compose_single_page
from .config import GenerationOptions
from .loading import QuestionBankRepository, TemplateRepository
from .selection import QuestionProcessor
from .templates import TemplateRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """
    Complete generation result (immutable).

    Attributes:
        document: Composed document(s) and streams
        template: Template as used (title override and section organisation applied)
        questions: Questions included, in selection order
        title: Exam title
        total_points: Sum of points over the included questions
        question_count: Number of included questions
        page_count: Number of logical pages

    Example:
        >>> result = generator.generate("midterm", "algebra-bank")
        >>> print(f"{result.question_count} questions, {result.total_points} points")
    """
    document: GeneratedDocument
    template: ExamTemplate
    questions: Tuple[Question, ...]
    title: str
    total_points: Decimal
    question_count: int
    page_count: int

    @property
    def markup(self) -> str:
        return self.document.document


class ExamPaperGenerator:
    """
    Generate exam papers from stored templates and question banks.

    Example:
        >>> generator = ExamPaperGenerator(
        ...     InMemoryTemplateRepository([template]),
        ...     InMemoryQuestionBankRepository([bank]),
        ...     TemplateRegistry.default(),
        ... )
        >>> result = generator.generate(template.id, bank.id, GenerationOptions(paginate=True))
    """

    def __init__(
        self,
        template_repository: TemplateRepository,
        question_repository: QuestionBankRepository,
        registry: TemplateRegistry,
        processor: Optional[QuestionProcessor] = None,
    ):
        if template_repository is None or question_repository is None or registry is None:
            raise InvalidArgumentError("repositories and registry must not be None")
        self.template_repository = template_repository
        self.question_repository = question_repository
        self.registry = registry
        self.processor = processor

    def _processor(self, options: GenerationOptions) -> QuestionProcessor:
        if self.processor is not None:
            return self.processor
        return QuestionProcessor(seed=options.seed)

    def generate(
        self,
        template_id: str,
        question_bank_id: str,
        options: Optional[GenerationOptions] = None,
    ) -> GenerationResult:
        """
        Generate an exam paper.

        Pipeline:
        1. Resolve template and question bank
        2. Process and validate the bank
        3. Select questions (section order or random)
        4. Organise randomly selected questions into sections
        5. Look up raw template text by style and compose

        Args:
            template_id: Template identifier
            question_bank_id: Question bank identifier
            options: Generation options (defaults when None)

        Returns:
            GenerationResult

        Raises:
            NotFoundError: If the template or bank does not resolve
            QuestionValidationError: If the bank fails validation
            InvalidStateError: If no questions are selected or the style
                has no raw template
            TemplateContentUnavailableError: If the raw template cannot be read
        """
        options = options or GenerationOptions()
        start_time = time.perf_counter()
        logger.info(f"Generating exam from template {template_id!r} and bank {question_bank_id!r}")

        template = self.template_repository.get_by_id(template_id)
        if template is None:
            raise NotFoundError("Template", template_id)
        bank = self.question_repository.get_by_id(question_bank_id)
        if bank is None:
            raise NotFoundError("Question bank", question_bank_id)

        processor = self._processor(options)
        bank = processor.process_question_bank(bank)

        questions = self._select(processor, template, bank, options)
        logger.info(f"Selected {len(questions)} of {len(bank)} questions")
        if options.random_questions:
            template = processor.organize_sections(template, questions)

        result = self.generate_from_questions(template, questions, options)
        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Generated {result.question_count} questions on {result.page_count} pages "
            f"({result.total_points} points) in {elapsed:.2f}s"
        )
        return result

    def generate_from_questions(
        self,
        template: ExamTemplate,
        questions: Sequence[Question],
        options: Optional[GenerationOptions] = None,
    ) -> GenerationResult:
        """
        Compose an exam paper from questions already selected.

        In single-page mode the template's sections decide which questions
        appear; in multi-page mode every question in ``questions`` appears.

        Raises:
            InvalidArgumentError: If template or questions is None
            InvalidStateError: If questions is empty or the style has no
                raw template
        """
        if template is None or questions is None:
            raise InvalidArgumentError("template and questions must not be None")
        if not questions:
            raise InvalidStateError("No questions selected for generation")
        options = options or GenerationOptions()
        if options.title.strip():
            template = replace(template, name=options.title)

        try:
            raw_text = self.registry.get(template.style)
        except UnsupportedStyleError as e:
            raise InvalidStateError(f"No raw template for style {template.style.value!r}") from e
        answer_sheet_text = self.registry.get_answer_sheet() if options.include_answer_sheet else None

        questions = tuple(questions)
        layout = options.layout
        if options.paginate:
            document = compose_multi_page(
                raw_text, template, questions, layout.questions_per_page,
                exam_time=layout.exam_time,
                answer_sheet_text=answer_sheet_text,
                page_break=layout.page_break,
            )
        else:
            document = compose_single_page(
                raw_text, template, questions,
                exam_time=layout.exam_time, answer_sheet_text=answer_sheet_text,
            )

        return GenerationResult(
            document=document,
            template=template,
            questions=questions,
            title=template.name,
            total_points=document.total_points,
            question_count=len(questions),
            page_count=document.page_count,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def _select(
        self,
        processor: QuestionProcessor,
        template: ExamTemplate,
        bank: QuestionBank,
        options: GenerationOptions,
    ) -> List[Question]:
        if options.random_questions:
            if options.difficulty_distribution:
                selected = processor.select_by_distribution(
                    bank.questions, options.difficulty_distribution, by="difficulty"
                )
            elif options.category_distribution:
                selected = processor.select_by_distribution(
                    bank.questions, options.category_distribution, by="category"
                )
            else:
                count = len(bank) if options.question_count is None else options.question_count
                selected = processor.select_random(bank.questions, count)
        else:
            selected = []
            for qid in template.question_ids:
                question = bank.get(qid)
                if question is None:
                    logger.warning(f"Template {template.id!r} references unknown question {qid!r}")
                    continue
                selected.append(question)

        if options.question_count is not None:
            selected = selected[:options.question_count]
        if not selected:
            raise InvalidStateError(
                f"No questions selected from bank {bank.id!r} for template {template.id!r}"
            )
        return selected
