"""
Module: errors

Purpose:
    Exception hierarchy shared by every examtex layer. Each exception is
    raised where the problem is detected and translated (with ``from``)
    only at the orchestration boundary.

Key Classes:
    - ExamTexError: Root of the hierarchy
    - InvalidArgumentError: Missing or malformed required argument
    - QuestionValidationError: Question bank failed processor validation
    - PageOutOfRangeError: Page number or page count below 1
    - UnsupportedStyleError: Template style has no raw template text
    - TemplateContentUnavailableError: Raw template text empty or unreadable
    - NotFoundError: Template or question bank did not resolve
    - InvalidStateError: Generation cannot proceed with resolved inputs
    - SchemaValidationError: JSON document failed schema validation

Used By:
    - examtex.core: Model validation, schema validation
    - examtex.builder: Generators, compositor, controller
"""

from __future__ import annotations

from typing import List, Optional


class ExamTexError(Exception):
    """Base class for all examtex errors."""
    pass


class InvalidArgumentError(ExamTexError, ValueError):
    """A required argument was missing or malformed."""
    pass


class QuestionValidationError(InvalidArgumentError):
    """Question bank failed validation before generation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class PageOutOfRangeError(ExamTexError, ValueError):
    """Page number or total page count outside the valid range."""

    def __init__(self, page_number: int, total_pages: int):
        super().__init__(
            f"Page {page_number} of {total_pages} is out of range "
            f"(both must be >= 1 and page <= total)"
        )
        self.page_number = page_number
        self.total_pages = total_pages


class UnsupportedStyleError(ExamTexError, LookupError):
    """No raw template text is registered for the requested style."""

    def __init__(self, style: object):
        super().__init__(f"Unsupported template style: {style}")
        self.style = style


class TemplateContentUnavailableError(ExamTexError):
    """Raw template text exists in the registry but could not be read or is empty."""
    pass


class NotFoundError(ExamTexError, LookupError):
    """Template or question bank identifier did not resolve."""

    def __init__(self, kind: str, identifier: str):
        super().__init__(f"{kind} not found: {identifier!r}")
        self.kind = kind
        self.identifier = identifier


class InvalidStateError(ExamTexError, RuntimeError):
    """Generation cannot proceed with the resolved inputs."""
    pass


class SchemaValidationError(ExamTexError):
    """Raised when JSON data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []
