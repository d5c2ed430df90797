"""
Module: builder

Purpose:
    Turn exam templates and question banks into LaTeX documents.

Key Functions:
    - compose_single_page(), compose_multi_page(): Template composition

Key Classes:
    - ExamPaperGenerator: End-to-end generation
    - GenerationOptions: Per-call options
    - GenerationResult: Generation output
    - TemplateRegistry: Raw template text by style
    - QuestionProcessor: Validation and selection
"""

from .compositor import compose_multi_page, compose_single_page
from .config import GenerationOptions
from .controller import ExamPaperGenerator, GenerationResult
from .selection import QuestionProcessor
from .templates import TemplateRegistry, insert_dynamic_content

__all__ = [
    "ExamPaperGenerator",
    "GenerationOptions",
    "GenerationResult",
    "QuestionProcessor",
    "TemplateRegistry",
    "compose_multi_page",
    "compose_single_page",
    "insert_dynamic_content",
]
