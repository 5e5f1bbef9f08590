"""Saved meals, one record per identity and day label."""

from fastapi import APIRouter, Depends

from api.deps import get_current_identity, get_plan_reader, get_plan_service
from schemas import ApiResponse, Identity
from schemas.tracking_schema import MealRecord, MealSaveRequest
from services.plan_service import PlanService

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.post("/save", response_model=ApiResponse[MealRecord])
def save_meals(
    payload: MealSaveRequest,
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_service),
):
    return ApiResponse(data=service.save_meal(identity, payload.day, payload.meals))


@router.get("/{day}", response_model=ApiResponse[MealRecord])
def get_meals(
    day: str,
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_reader),
):
    return ApiResponse(data=service.get_meal(identity, day))
