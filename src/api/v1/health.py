from fastapi import APIRouter

from schemas.api import ApiResponse


router = APIRouter()


@router.get("/health", response_model=ApiResponse[dict[str, str]])
def health_check() -> ApiResponse[dict[str, str]]:
    """Liveness probe for monitoring and load balancers."""
    return ApiResponse(
        success=True,
        data={"status": "healthy", "message": "NyayaSetu API is running"},
        message="Health check successful",
    )
