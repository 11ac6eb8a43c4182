"""
HTC Chamber Plan API Server
AI-generated workout plans with HTC supplement recommendations.

Run locally:
  uvicorn api_server:app --host 0.0.0.0 --port 3000
"""

import logging
from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app.catalog import SupplementRecord, load_catalog
from app.config import Settings, load_settings
from app.health import router as health_router
from app.llm import ModelClient, create_model_client
from app.plan.router import router as plan_router
from app.plan.service import PlanService

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

_UNSET = object()


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Sequence[SupplementRecord]] = None,
    model_client=_UNSET,
) -> FastAPI:
    """
    Build the FastAPI application with its collaborators.

    Args:
        settings: Runtime settings (read from the environment if omitted)
        catalog: Supplement catalog (loaded from settings.supplements_path if omitted)
        model_client: ModelClient to use; None means "not configured".
                      Built from settings if omitted.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    if catalog is None:
        catalog = load_catalog(settings.supplements_path)

    client: Optional[ModelClient]
    if model_client is _UNSET:
        client = create_model_client(settings)
    else:
        client = model_client

    app = FastAPI(
        title="HTC Chamber Plan API",
        description="AI-generated workout plans with HTC supplement recommendations",
        version=API_VERSION,
    )

    # ============================================
    # CORS Configuration - form may be embedded on the storefront
    # ============================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.plan_service = PlanService(catalog, client)

    app.include_router(plan_router)
    app.include_router(health_router)

    # ============================================
    # Static form UI
    # ============================================
    static_dir = settings.static_dir
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

        @app.get("/", include_in_schema=False)
        def index():
            return FileResponse(str(static_dir / "index.html"))
    else:
        logger.warning(f"Static directory not found, form UI disabled: {static_dir}")

    return app


app = create_app()
