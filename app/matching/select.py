"""
Supplement Selection

Goal → Supplement matching for the plan prompt.

The pool is assembled in three widening tiers, each de-duplicated by name
against what earlier tiers already collected:
1. Products tagged with the user's goal
2. Products tagged overall_fitness (only if tier 1 is short)
3. Every remaining product (only if still short)

The combined pool is shuffled once and truncated. This is deliberately
randomized, not a ranking: repeated calls give variety when the pool is
larger than the requested count.
"""

import random
from typing import Iterable, List, Optional, Sequence, Set

from app.catalog.models import SupplementRecord


OVERALL_FITNESS_GOAL = "overall_fitness"
DEFAULT_SUPPLEMENT_COUNT = 3


def _extend_pool(
    pool: List[SupplementRecord],
    taken: Set[str],
    candidates: Iterable[SupplementRecord],
) -> None:
    for record in candidates:
        if record.name not in taken:
            taken.add(record.name)
            pool.append(record)


def build_candidate_pool(
    catalog: Sequence[SupplementRecord],
    goal: Optional[str],
    count: int = DEFAULT_SUPPLEMENT_COUNT,
) -> List[SupplementRecord]:
    """
    Assemble the unshuffled candidate pool for a goal.

    The pool may be larger than count; it is never smaller than
    min(count, number of distinct names in catalog).
    """
    pool: List[SupplementRecord] = []
    taken: Set[str] = set()

    _extend_pool(pool, taken, (r for r in catalog if r.has_goal(goal)))

    if len(pool) < count:
        _extend_pool(pool, taken, (r for r in catalog if r.has_goal(OVERALL_FITNESS_GOAL)))

    if len(pool) < count:
        _extend_pool(pool, taken, catalog)

    return pool


def select_supplements(
    catalog: Sequence[SupplementRecord],
    goal: Optional[str],
    count: int = DEFAULT_SUPPLEMENT_COUNT,
    rng: Optional[random.Random] = None,
) -> List[SupplementRecord]:
    """
    Pick up to `count` supplements for the user's goal.

    Args:
        catalog: Loaded supplement catalog (not modified)
        goal: User's goal tag e.g. 'muscle_gain'
        count: Number of products wanted
        rng: Random source; a fresh one is created per call when omitted
             so concurrent requests never share generator state

    Returns:
        Up to `count` distinct records, in random order
    """
    if not catalog or count <= 0:
        return []

    pool = build_candidate_pool(catalog, goal, count)

    rng = rng or random.Random()
    rng.shuffle(pool)

    return pool[:count]
