from fastapi import APIRouter

from spendcat.schemas.common import StatusResponse

router = APIRouter(tags=["status"])

STATUS_OK = "OK"


@router.get("/status", response_model=StatusResponse)
async def get_status() -> StatusResponse:
    """Liveness check."""
    return StatusResponse(status=STATUS_OK)
