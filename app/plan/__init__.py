"""
Plan Generation Module

- service.py: PlanService (selector → prompt → model → renderer)
- router.py: POST /api/generate-plan
"""

from .service import PlanService, PlanResult

__all__ = [
    "PlanService",
    "PlanResult",
]
