"""
Supplement Catalog Models

Pydantic model for HTC supplement products as stored in supplements.json.

Records are immutable once loaded; the catalog is shared read-only across
requests.
"""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class SupplementRecord(BaseModel):
    """
    A single supplement product available for recommendation.

    `goals` keeps the source order (it is rendered into the prompt) but is
    de-duplicated and compared as a set via has_goal().
    """
    name: str = Field(min_length=1, description="Product name, unique within the catalog")
    description: str = Field(default="", description="Short product description")
    url: str = Field(default="", description="Product page URL")
    goals: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Goal tags e.g. ('muscle_gain', 'overall_fitness')"
    )
    benefits_keywords: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Benefit keywords used to tailor the recommendation text"
    )
    timing: Optional[str] = Field(default=None, description="Suggested timing")
    dosage_note: Optional[str] = Field(default=None, description="Suggested dosage")

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("goals", mode="before")
    @classmethod
    def dedupe_goals(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"goals must be a list of strings, got {type(value).__name__}")
        seen = []
        for goal in value:
            if goal not in seen:
                seen.append(goal)
        return tuple(seen)

    @field_validator("benefits_keywords", mode="before")
    @classmethod
    def default_keywords(cls, value):
        if value is None:
            return ()
        return value

    def has_goal(self, goal: Optional[str]) -> bool:
        """Check whether this product is tagged for the given goal."""
        return goal is not None and goal in self.goals
