"""
Question bank processing and selection.
"""

from .processor import QuestionProcessor, validate_question

__all__ = ["QuestionProcessor", "validate_question"]
