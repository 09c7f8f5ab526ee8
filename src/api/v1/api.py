from fastapi import APIRouter, Depends

from core.ratelimit import check_free_trial_rate_limit, check_rate_limit

from .documents import router as documents_router
from .free_trial import router as free_trial_router
from .health import router as health_router
from .translation import router as translation_router


api_router = APIRouter()

# Health stays outside rate limiting so probes never get throttled
api_router.include_router(health_router, tags=["health"])

rate_limited = [Depends(check_rate_limit)]
api_router.include_router(documents_router, dependencies=rate_limited)
api_router.include_router(translation_router, dependencies=rate_limited)
api_router.include_router(
    free_trial_router, dependencies=[Depends(check_free_trial_rate_limit)]
)
