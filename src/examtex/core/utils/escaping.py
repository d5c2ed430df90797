"""
Module: core.utils.escaping

Purpose:
    Escape arbitrary user text so it is safe to embed in LaTeX markup.
    Leaf dependency of every content and layout generator.

Key Functions:
    - escape_latex(): Single-pass escape of LaTeX-special characters

Dependencies:
    - re (std)

Used By:
    - builder.content: Question and section rendering
    - builder.layout: Seal line, header and header/footer text
    - builder.templates.inserter: Plain-text placeholder values
"""

from __future__ import annotations

import re
from typing import Dict, Optional

LATEX_REPLACEMENTS: Dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "_": r"\_",
    "^": r"\textasciicircum{}",
    "~": r"\textasciitilde{}",
    "<": r"$<$",
    ">": r"$>$",
}

_SPECIAL_PATTERN = re.compile("|".join(re.escape(ch) for ch in LATEX_REPLACEMENTS))


def escape_latex(text: Optional[str]) -> str:
    """
    Escape LaTeX-special characters in ``text``.

    Every special character is replaced in a single regex pass, so the
    output of one replacement (e.g. the braces in ``\\textbackslash{}``)
    is never escaped again. Escaping already escaped text escapes it a
    second time.

    Args:
        text: Raw user text. None, empty and whitespace-only input
            yield an empty string.

    Returns:
        Escaped text, never raises.

    Example:
        >>> escape_latex("50% of $10")
        '50\\\\% of \\\\$10'
    """
    if text is None or not str(text).strip():
        return ""
    return _SPECIAL_PATTERN.sub(lambda m: LATEX_REPLACEMENTS[m.group(0)], str(text))
