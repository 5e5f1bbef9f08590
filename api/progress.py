"""Progress tracking: weight log entries and progress photos (append-only)."""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from api.deps import get_current_identity, get_plan_service
from core.exceptions import ValidationError
from core.logger import get_logger
from schemas import ApiResponse, Identity
from schemas.tracking_schema import PhotoUploadResponse, ProgressRecord, WeightLogRequest
from services.plan_service import PlanService

logger = get_logger("api.progress")
router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.post("/weight", response_model=ApiResponse[ProgressRecord])
def log_weight(
    payload: WeightLogRequest,
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_service),
):
    return ApiResponse(data=service.log_weight(identity, payload.weight, payload.date))


@router.post("/photo", response_model=ApiResponse[PhotoUploadResponse])
def upload_photo(
    file: Optional[UploadFile] = File(None),
    identity: Identity = Depends(get_current_identity),
    service: PlanService = Depends(get_plan_service),
):
    """Upload a progress photo and return its public URL.

    Raises:
        ValidationError: No file in the multipart body.
        PersistenceError: The object store rejected the upload.
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded", field="file")

    data = file.file.read()
    url = service.upload_progress_photo(identity, data, file.filename, file.content_type)
    return ApiResponse(data=PhotoUploadResponse(url=url))
