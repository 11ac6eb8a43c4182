"""
Plan Generation Router

Endpoints:
- POST /api/generate-plan - Generate a workout plan + supplement block

Error responses keep the browser contract: {"error": "<message>"}.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.llm.errors import ModelClientError, ModelNotConfiguredError
from app.prompt.models import UserInput
from .service import PlanService, PlanResult

logger = logging.getLogger(__name__)
router = APIRouter(tags=["plan"])

INVALID_INPUT_MESSAGE = "Invalid user input received."


def get_plan_service(request: Request) -> PlanService:
    """Dependency: the PlanService built by create_app()."""
    return request.app.state.plan_service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/api/generate-plan", response_model=PlanResult)
async def generate_plan(request: Request, service: PlanService = Depends(get_plan_service)):
    """
    Generate a personalized plan for the submitted fitness profile.

    400 for an empty or malformed body, 500 with a specific message for
    model failures.
    """
    logger.info("Received request to /api/generate-plan")

    if not service.is_configured:
        logger.error("Google AI SDK not initialized. Check API Key.")
        return error_response(500, ModelNotConfiguredError.user_message)

    try:
        payload = await request.json()
    except ValueError:
        return error_response(400, INVALID_INPUT_MESSAGE)

    if not isinstance(payload, dict) or not payload:
        return error_response(400, INVALID_INPUT_MESSAGE)

    try:
        user_input = UserInput.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected plan input: {e.error_count()} validation error(s)")
        return error_response(400, INVALID_INPUT_MESSAGE)

    logger.info(f"User Input Received: {user_input.model_dump(exclude_none=True)}")

    try:
        result = await run_in_threadpool(service.generate, user_input)
    except ModelClientError as e:
        logger.error(f"Error during API call or processing: {e.detail}")
        return error_response(500, e.user_message)

    return result
