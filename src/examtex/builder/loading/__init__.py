"""
Template and question bank repositories.
"""

from .repositories import (
    InMemoryQuestionBankRepository,
    InMemoryTemplateRepository,
    JsonQuestionBankRepository,
    JsonTemplateRepository,
    LoaderError,
    QuestionBankRepository,
    TemplateRepository,
)

__all__ = [
    "InMemoryQuestionBankRepository",
    "InMemoryTemplateRepository",
    "JsonQuestionBankRepository",
    "JsonTemplateRepository",
    "LoaderError",
    "QuestionBankRepository",
    "TemplateRepository",
]
