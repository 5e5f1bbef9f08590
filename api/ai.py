"""Plan generation endpoint.

Generation never fails from the caller's point of view: when the model is
unreachable or returns something unusable the fallback plan is returned with
``success: true``. The ``X-Plan-Degraded`` header tells the two apart.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Response

from api.deps import get_plan_service
from core.logger import get_logger
from schemas import ApiResponse, ComprehensivePlan, Profile
from services.plan_normalizer import is_fallback_plan
from services.plan_service import PlanService

logger = get_logger("api.ai")
router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/generate-plan", response_model=ApiResponse[ComprehensivePlan])
def generate_plan(
    response: Response,
    payload: Optional[Profile] = Body(None),
    service: PlanService = Depends(get_plan_service),
):
    """Generate a weekly meal and workout plan for the submitted profile.

    Every profile field is optional and defaulted.
    """
    profile = payload or Profile()
    logger.info("Generating plan (goal=%s, gender=%s)", profile.goal.value, profile.gender.value)
    plan = service.generate(profile)
    response.headers["X-Plan-Degraded"] = "true" if is_fallback_plan(plan) else "false"
    return ApiResponse(data=plan)
