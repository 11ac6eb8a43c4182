"""
Supplement Catalog Loader

Reads the static supplement catalog once at startup.

A broken or missing catalog must never take the API down: every failure
is logged and degrades to an empty catalog, which the selector and prompt
builder handle gracefully.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Set, Union

from pydantic import ValidationError

from .models import SupplementRecord

logger = logging.getLogger(__name__)


def parse_catalog(raw: Any) -> List[SupplementRecord]:
    """
    Validate raw catalog data into SupplementRecords.

    Invalid entries and duplicate names are skipped with a warning; the
    rest of the catalog is kept.
    """
    if not isinstance(raw, list):
        logger.error(f"Supplement catalog must be a JSON array, got {type(raw).__name__}")
        return []

    records: List[SupplementRecord] = []
    seen_names: Set[str] = set()

    for index, entry in enumerate(raw):
        try:
            record = SupplementRecord.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid supplement entry #{index}: {e.error_count()} error(s)")
            continue

        if record.name in seen_names:
            logger.warning(f"Skipping duplicate supplement name: {record.name}")
            continue

        seen_names.add(record.name)
        records.append(record)

    return records


def load_catalog(path: Union[str, Path]) -> List[SupplementRecord]:
    """
    Load the supplement catalog from a JSON file.

    Returns an empty list on any failure; never raises.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.error(f"Supplement catalog not found: {path}")
        return []
    except (OSError, ValueError) as e:
        logger.error(f"Error loading supplement data from {path}: {e}")
        return []

    records = parse_catalog(raw)
    logger.info(f"Supplement data loaded successfully ({len(records)} products).")
    return records
