"""
Content generators: questions, answer-sheet entries and section headings.
"""

from .questions import (
    RENDERERS,
    render_answer_sheet_entry,
    render_essay,
    render_fill_in_blank,
    render_generic,
    render_multiple_choice,
    render_question,
    render_true_false,
)
from .sections import render_section

__all__ = [
    "RENDERERS",
    "render_answer_sheet_entry",
    "render_essay",
    "render_fill_in_blank",
    "render_generic",
    "render_multiple_choice",
    "render_question",
    "render_section",
    "render_true_false",
]
