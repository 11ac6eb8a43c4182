"""
Health Check Module

- router.py: GET /api/v1/health (catalog + model client status)
"""

from .router import router

__all__ = [
    "router",
]
