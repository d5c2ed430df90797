"""
Module: builder.templates.registry

Purpose:
    Style-keyed lookup of raw LaTeX template text, populated once at
    construction and read-only afterwards.

Key Classes:
    - TemplateRegistry: TemplateStyle -> raw template text

Sources:
    - default(): Templates packaged under examtex/builder/templates/resources
    - from_directory(): <style>.tex files in a directory
    - TemplateRegistry(mapping): Explicit text or paths

Dependencies:
    - importlib.resources (std)

Used By:
    - builder.controller: ExamPaperGenerator
"""

from __future__ import annotations

import logging
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Tuple, Union

from examtex.core.models import TemplateStyle
from examtex.errors import TemplateContentUnavailableError, UnsupportedStyleError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

ANSWER_SHEET_NAME = "answer_sheet"

# A source is either literal template text or a readable resource.
TemplateSource = Union[str, Path, "Traversable"]


def _read(source: TemplateSource, label: str) -> str:
    if isinstance(source, str):
        text = source
    else:
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateContentUnavailableError(
                f"Template content unavailable for {label}: {e}"
            ) from e
    if not text.strip():
        raise TemplateContentUnavailableError(f"Template content unavailable for {label}: empty")
    return text


class TemplateRegistry:
    """
    Read-only mapping from template style to raw template text.

    File-backed sources are read on lookup, so an unreadable file surfaces
    as TemplateContentUnavailableError at the point of use.

    Example:
        >>> registry = TemplateRegistry.default()
        >>> "{CONTENT}" in registry.get(TemplateStyle.BASIC)
        True
    """

    def __init__(
        self,
        sources: Mapping[TemplateStyle, TemplateSource],
        answer_sheet: Optional[TemplateSource] = None,
    ):
        self._sources = MappingProxyType(dict(sources))
        self._answer_sheet = answer_sheet

    @classmethod
    def default(cls) -> "TemplateRegistry":
        """Registry over the packaged basic and advanced templates."""
        root = files(__package__).joinpath("resources")
        return cls(
            {
                TemplateStyle.BASIC: root.joinpath("basic.tex"),
                TemplateStyle.ADVANCED: root.joinpath("advanced.tex"),
            },
            answer_sheet=root.joinpath(f"{ANSWER_SHEET_NAME}.tex"),
        )

    @classmethod
    def from_directory(cls, directory: Path) -> "TemplateRegistry":
        """
        Registry over ``<style>.tex`` files in ``directory``.

        Styles without a file are left unregistered.
        """
        directory = Path(directory)
        sources = {}
        for style in TemplateStyle:
            path = directory / f"{style.value}.tex"
            if path.is_file():
                sources[style] = path
        answer_sheet = directory / f"{ANSWER_SHEET_NAME}.tex"
        logger.debug(f"Registered {len(sources)} template styles from {directory}")
        return cls(sources, answer_sheet=answer_sheet if answer_sheet.is_file() else None)

    @property
    def styles(self) -> Tuple[TemplateStyle, ...]:
        return tuple(self._sources)

    def supports(self, style: TemplateStyle) -> bool:
        return style in self._sources

    def get(self, style: TemplateStyle) -> str:
        """
        Raw template text for ``style``.

        Raises:
            UnsupportedStyleError: If the style is not registered
            TemplateContentUnavailableError: If the text is empty or unreadable
        """
        if style not in self._sources:
            raise UnsupportedStyleError(style)
        return _read(self._sources[style], f"style {style.value!r}")

    def get_answer_sheet(self) -> Optional[str]:
        """Raw answer-sheet template text, or None when not registered."""
        if self._answer_sheet is None:
            return None
        return _read(self._answer_sheet, "answer sheet")
