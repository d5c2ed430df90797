"""
JSON schemas and validators for question banks and exam templates.
"""

from .validator import validate_exam_template, validate_question_bank

__all__ = ["validate_exam_template", "validate_question_bank"]
