"""Section heading rendering."""

from __future__ import annotations

from examtex.core.models import TemplateSection
from examtex.core.utils import escape_latex
from examtex.errors import InvalidArgumentError


def render_section(section: TemplateSection) -> str:
    """
    Render a section heading with optional bold instructions.

    Raises:
        InvalidArgumentError: If section is None
    """
    if section is None:
        raise InvalidArgumentError("section must not be None")
    lines = [rf"\section*{{{escape_latex(section.title)}}}"]
    instructions = escape_latex(section.instructions)
    if instructions:
        lines.append(rf"\textbf{{{instructions}}}")
    return "\n".join(lines) + "\n\n"
