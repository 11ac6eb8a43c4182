"""
Plan Copy Rendering
===================
Turns model output into the HTML shown on the results page.

Components:
- renderer.py: Line-based state machine producing plan/supplement fragments
"""

from .renderer import (
    format_response,
    FormattedOutput,
    FormatterState,
    Section,
    LineKind,
    classify_line,
    transition,
    SUPPLEMENT_SECTION_MARKER,
)

__all__ = [
    "format_response",
    "FormattedOutput",
    "FormatterState",
    "Section",
    "LineKind",
    "classify_line",
    "transition",
    "SUPPLEMENT_SECTION_MARKER",
]
