"""
Core data models (immutable dataclasses).
"""

from .document import GeneratedDocument, PageRange
from .header import (
    DEFAULT_EXAM_TIME,
    HeaderAlignment,
    HeaderConfig,
    HeaderFontSize,
    HeaderStyle,
    PageNumberFormat,
    PageNumberPosition,
    StudentInfoConfig,
    StudentInfoLayout,
)
from .questions import OPTION_TYPES, Question, QuestionBank, QuestionOption, QuestionType
from .templates import ExamTemplate, PaperSize, SealLinePosition, TemplateSection, TemplateStyle

__all__ = [
    "DEFAULT_EXAM_TIME",
    "ExamTemplate",
    "GeneratedDocument",
    "HeaderAlignment",
    "HeaderConfig",
    "HeaderFontSize",
    "HeaderStyle",
    "OPTION_TYPES",
    "PageNumberFormat",
    "PageNumberPosition",
    "PageRange",
    "PaperSize",
    "Question",
    "QuestionBank",
    "QuestionOption",
    "QuestionType",
    "SealLinePosition",
    "StudentInfoConfig",
    "StudentInfoLayout",
    "TemplateSection",
    "TemplateStyle",
]
