"""
Raw template registry and placeholder insertion.
"""

from .inserter import (
    PLACEHOLDERS,
    find_placeholders,
    insert_dynamic_content,
    render_answer_sheet_commands,
    unresolved_placeholders,
)
from .registry import TemplateRegistry

__all__ = [
    "PLACEHOLDERS",
    "TemplateRegistry",
    "find_placeholders",
    "insert_dynamic_content",
    "render_answer_sheet_commands",
    "unresolved_placeholders",
]
