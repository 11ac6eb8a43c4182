"""
Plan Request Models

The fitness profile submitted by the form. Lives only for one request.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


NOT_SPECIFIED = "Not specified"


class UserInput(BaseModel):
    """
    Fitness profile from the plan form.

    Field names match the JSON sent by the browser (focusArea/subFocus are
    camelCase there). Numbers are accepted for the numeric-looking fields
    and kept as strings; blank strings count as missing.
    """
    goal: Optional[str] = Field(default=None, description="Goal tag e.g. 'muscle_gain'")
    experience: Optional[str] = Field(default=None, description="beginner / intermediate / advanced")
    equipment: Optional[str] = Field(default=None, description="Equipment access e.g. 'full_gym'")
    frequency: Optional[str] = Field(default=None, description="Training days per week")
    duration: Optional[str] = Field(default=None, description="Minutes per session")
    focusArea: Optional[str] = Field(default=None, description="Focus category")
    subFocus: Optional[str] = Field(default=None, description="Specific sub-focus within the category")

    include_nutrition: bool = False
    include_warmup: bool = False
    include_cooldown: bool = False
    include_progression: bool = False

    class Config:
        extra = "allow"

    @field_validator(
        "goal", "experience", "equipment", "frequency", "duration", "focusArea", "subFocus",
        mode="before",
    )
    @classmethod
    def normalize_text(cls, value):
        if value is None:
            return None
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator(
        "include_nutrition", "include_warmup", "include_cooldown", "include_progression",
        mode="before",
    )
    @classmethod
    def none_is_false(cls, value):
        if value is None or value == "":
            return False
        return value

    def display(self, field_name: str) -> str:
        """Field value for the prompt, or the explicit 'Not specified' placeholder."""
        value = getattr(self, field_name)
        return value if value else NOT_SPECIFIED
