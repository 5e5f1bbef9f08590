"""Success envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{"success": true, "data": ...}``; failures are rendered by the error handlers."""

    success: bool = True
    data: Optional[T] = None
