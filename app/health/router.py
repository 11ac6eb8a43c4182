"""
Health Check Endpoint
=====================
Reports whether the catalog loaded and the model client is configured.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api/v1/health", tags=["Health"])


@router.get("")
def health(request: Request):
    """
    Component status for the running API.

    The service stays up with an empty catalog or no API key, so both are
    reported rather than failing the check.
    """
    service = request.app.state.plan_service
    settings = request.app.state.settings

    components = {}

    product_count = len(service.catalog)
    components["catalog"] = {
        "status": "healthy" if product_count else "degraded",
        "products": product_count,
    }

    components["model"] = {
        "status": "healthy" if service.is_configured else "not_configured",
        "model_name": settings.model_name,
    }

    overall = "ok"
    if any(c["status"] != "healthy" for c in components.values()):
        overall = "degraded"

    return {
        "status": overall,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": components,
    }
