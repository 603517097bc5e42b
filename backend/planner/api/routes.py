from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from planner.schemas import BlueprintRequest
from planner.services.planning_service import BlueprintService
from planner.utils.logger import logger

router = APIRouter()


@lru_cache(maxsize=1)
def get_blueprint_service() -> BlueprintService:
    # Holds only configuration; safe to share across requests
    return BlueprintService.from_config()


@router.get("/health")
def health():
    return {"status": "ok"}


# ============================================================
# BLUEPRINT ENDPOINT - Project Blueprint Generation
# ============================================================

@router.post("/api/planning/blueprint")
async def generate_blueprint(
    request: Optional[BlueprintRequest] = None,
    service: BlueprintService = Depends(get_blueprint_service),
):
    """
    Generate a complete project blueprint with workflow.

    The envelope always carries the outcome; only a blank request is
    rejected with 400.
    """
    if request is None or not request.requirements or not request.requirements.strip():
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Requirements are required"},
        )

    try:
        result = await service.generate(request.requirements)
        return result.to_response()
    except Exception:
        logger.exception("[Routes] Blueprint route error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"},
        )
