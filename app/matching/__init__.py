"""
HTC Supplement Matching

Goal → Supplement selection (prompt assembly input).

Given the loaded catalog and the user's goal tag, pick the products the
model is asked to recommend. Goal-tagged products first, then
overall_fitness, then anything else; shuffled once at the end.
"""

from .select import (
    select_supplements,
    build_candidate_pool,
    OVERALL_FITNESS_GOAL,
    DEFAULT_SUPPLEMENT_COUNT,
)

__all__ = [
    "select_supplements",
    "build_candidate_pool",
    "OVERALL_FITNESS_GOAL",
    "DEFAULT_SUPPLEMENT_COUNT",
]
