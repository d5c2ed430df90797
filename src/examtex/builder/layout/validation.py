"""Argument checks shared by the layout generators."""

from __future__ import annotations

from examtex.errors import PageOutOfRangeError


def check_page_range(page_number: int, total_pages: int) -> None:
    """Raise PageOutOfRangeError unless 1 <= page_number <= total_pages."""
    if page_number < 1 or total_pages < 1 or page_number > total_pages:
        raise PageOutOfRangeError(page_number, total_pages)
