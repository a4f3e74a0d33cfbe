from fastapi import APIRouter
from starlette import status

from review_api.schemas.success_msg import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check() -> HealthResponse:
    return HealthResponse(message="All up and running !!")
