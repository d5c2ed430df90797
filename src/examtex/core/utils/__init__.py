"""
Core utilities: escaping, number formatting, serialization.
"""

from .escaping import escape_latex
from .formatting import format_decimal, format_length, to_decimal

__all__ = ["escape_latex", "format_decimal", "format_length", "to_decimal"]
