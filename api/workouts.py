"""Saved workouts, one record per identity and day label."""

from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_current_identity, get_plan_reader, get_plan_service
from schemas import ApiResponse, Identity
from schemas.tracking_schema import WorkoutRecord, WorkoutSaveRequest
from services.plan_service import PlanService

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.post("/save", response_model=ApiResponse[WorkoutRecord])
def save_workout(
    payload: WorkoutSaveRequest,
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_service),
):
    return ApiResponse(data=service.save_workout(identity, payload.day, payload.focus, payload.exercises))


@router.get("/week", response_model=ApiResponse[List[WorkoutRecord]])
def get_week(
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_reader),
):
    """Every saved workout for the caller, Monday first."""
    return ApiResponse(data=service.get_week_workouts(identity))
