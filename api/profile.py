"""Profile routes: read the caller's profile, save profile plus plan."""

from fastapi import APIRouter, Depends

from api.deps import get_current_identity, get_plan_reader, get_plan_service
from schemas import ApiResponse, Identity, Profile, SavedProfile, SavePlanRequest
from services.plan_service import PlanService

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("/me", response_model=ApiResponse[SavedProfile])
def get_my_profile(
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_reader),
):
    """Return the caller's profile and embedded plan.

    Raises:
        NotFoundError: No profile saved yet; clients proceed to onboarding.
    """
    return ApiResponse(data=service.fetch_profile(identity))


@router.post("/save-plan", response_model=ApiResponse[SavedProfile])
def save_plan(
    payload: SavePlanRequest,
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_service),
):
    """Upsert the caller's profile together with ``plan_json``.

    Raises:
        PersistenceError: The store rejected the write.
    """
    profile = Profile.model_validate(payload.model_dump(exclude={"plan_json"}))
    return ApiResponse(data=service.save_plan(identity, profile, payload.plan_json))
