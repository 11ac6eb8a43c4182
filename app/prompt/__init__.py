"""
Plan Prompt Module

- models.py: UserInput (the submitted fitness profile)
- builder.py: Deterministic prompt assembly
"""

from .models import UserInput, NOT_SPECIFIED
from .builder import (
    build_prompt,
    format_supplements_for_prompt,
    MOTIVATIONAL_PHRASE,
    NO_SUPPLEMENTS_TEXT,
)

__all__ = [
    "UserInput",
    "NOT_SPECIFIED",
    "build_prompt",
    "format_supplements_for_prompt",
    "MOTIVATIONAL_PHRASE",
    "NO_SUPPLEMENTS_TEXT",
]
