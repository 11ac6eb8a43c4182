"""
HTC Supplement Catalog

The fixed set of supplement products the planner may recommend.

This module ONLY:
- Defines the SupplementRecord shape
- Loads the catalog from static JSON (empty on failure)

Selection lives in app.matching.
"""

from .models import SupplementRecord
from .loader import load_catalog, parse_catalog

__all__ = [
    "SupplementRecord",
    "load_catalog",
    "parse_catalog",
]
