"""
Plan Generation Service

Profile → supplements → prompt → model → HTML.

All collaborators are passed in at construction; nothing is read from
module globals, so each test (or app instance) gets its own catalog,
client and random source.
"""

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from app.catalog.models import SupplementRecord
from app.copy.renderer import format_response
from app.llm.client import ModelClient
from app.llm.errors import ModelNotConfiguredError
from app.matching.select import select_supplements, DEFAULT_SUPPLEMENT_COUNT
from app.prompt.builder import build_prompt, format_supplements_for_prompt
from app.prompt.models import UserInput

logger = logging.getLogger(__name__)


class PlanResult(BaseModel):
    """Response body for a generated plan."""
    plan: str = Field(description="Raw model output")
    plan_html: str = Field(description="Rendered workout plan fragment")
    supplements_html: str = Field(description="Rendered supplement fragment")
    supplements: List[str] = Field(
        default_factory=list,
        description="Names of the supplements offered to the model"
    )


class PlanService:
    """Runs one plan request end to end."""

    def __init__(
        self,
        catalog: Sequence[SupplementRecord],
        client: Optional[ModelClient],
        rng_factory: Callable[[], random.Random] = random.Random,
        supplement_count: int = DEFAULT_SUPPLEMENT_COUNT,
        escape_html: bool = True,
    ):
        self.catalog = tuple(catalog)
        self.client = client
        self.rng_factory = rng_factory
        self.supplement_count = supplement_count
        self.escape_html = escape_html

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def select(self, user_input: UserInput) -> List[SupplementRecord]:
        # fresh generator per request; nothing shared across threads
        return select_supplements(
            self.catalog,
            user_input.goal,
            self.supplement_count,
            rng=self.rng_factory(),
        )

    def build(self, user_input: UserInput) -> Tuple[str, List[SupplementRecord]]:
        """Return (prompt, selected supplements) for a profile."""
        selected = self.select(user_input)
        logger.info(f"Selected Supplements for Prompt: {[s.name for s in selected]}")
        prompt = build_prompt(user_input, format_supplements_for_prompt(selected))
        return prompt, selected

    def generate(self, user_input: UserInput) -> PlanResult:
        """
        Generate and render a plan.

        Raises:
            ModelNotConfiguredError: no model client available
            ModelClientError: any failure of the model call
        """
        if self.client is None:
            raise ModelNotConfiguredError("Google AI SDK not initialized. Check API Key.")

        prompt, selected = self.build(user_input)
        logger.debug(f"Prompt length: {len(prompt)} characters")

        plan_text = self.client.send(prompt)
        formatted = format_response(plan_text, escape=self.escape_html)

        return PlanResult(
            plan=plan_text,
            plan_html=formatted.plan,
            supplements_html=formatted.supplements,
            supplements=[s.name for s in selected],
        )
